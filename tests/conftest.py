from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_EXA_ENV = ("EXA_API_KEY", "EXA_API_BASE", "EXA_TIMEOUT", "EXA_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_exa_env(monkeypatch: pytest.MonkeyPatch):
    """Keep developer credentials out of the tests."""

    for name in _EXA_ENV:
        monkeypatch.delenv(name, raising=False)
    import keyring

    monkeypatch.setattr(keyring, "get_password", lambda service, name: None)
    yield


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    key = "test-key"
    monkeypatch.setenv("EXA_API_KEY", key)
    return key

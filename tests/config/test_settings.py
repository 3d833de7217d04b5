from __future__ import annotations

import keyring
import pytest
from keyring.errors import NoKeyringError

from exaCli.config import DEFAULT_API_BASE, resolve_settings
from exaCli.errors import ConfigError
from exaCli.utils.secure_store import get_secret


def test_flag_wins_over_environment(monkeypatch):
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_API_BASE", "https://env.example")
    settings = resolve_settings("flag-key", "https://flag.example/", 5)
    assert settings.api_key == "flag-key"
    assert settings.api_base == "https://flag.example"
    assert settings.timeout == 5.0


def test_environment_fallbacks(monkeypatch):
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.setenv("EXA_API_BASE", "https://env.example//")
    monkeypatch.setenv("EXA_TIMEOUT", "12.5")
    settings = resolve_settings()
    assert settings.api_key == "env-key"
    assert settings.api_base == "https://env.example"
    assert settings.timeout == 12.5


def test_defaults(api_key):
    settings = resolve_settings()
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.timeout == 30.0


def test_missing_key_is_config_error():
    with pytest.raises(ConfigError, match="EXA_API_KEY missing"):
        resolve_settings()


def test_missing_key_allowed_when_not_required():
    assert resolve_settings(require_key=False).api_key is None


def test_bad_timeout_env(api_key, monkeypatch):
    monkeypatch.setenv("EXA_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        resolve_settings()


def test_keyring_fallback(monkeypatch):
    def _lookup(service, name):
        return "ring-key" if service == "exa" else None

    monkeypatch.setattr(keyring, "get_password", _lookup)
    assert resolve_settings().api_key == "ring-key"


def test_keyring_backend_errors_are_skipped(monkeypatch):
    def _broken(service, name):
        raise NoKeyringError("no backend")

    monkeypatch.setattr(keyring, "get_password", _broken)
    assert get_secret("EXA_API_KEY", fallback="") == ""
    with pytest.raises(ConfigError):
        get_secret("EXA_API_KEY")


def test_empty_key_flag_is_not_replaced_by_environment(monkeypatch):
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    assert resolve_settings(api_key="").api_key == ""

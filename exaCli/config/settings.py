from __future__ import annotations

"""Resolve API credentials and connection settings from flags and the environment."""

import os
from dataclasses import dataclass

from exaCli.errors import ConfigError
from exaCli.utils.secure_store import get_secret

API_KEY_ENV = "EXA_API_KEY"
API_BASE_ENV = "EXA_API_BASE"
TIMEOUT_ENV = "EXA_TIMEOUT"

DEFAULT_API_BASE = "https://api.exa.ai"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ExaSettings:
    api_key: str | None
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT


def _resolve_timeout(timeout: float | None) -> float:
    if timeout is not None:
        return float(timeout)
    env = os.getenv(TIMEOUT_ENV)
    if not env:
        return DEFAULT_TIMEOUT
    try:
        value = float(env)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {env!r}") from exc
    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {env!r}")
    return value


def resolve_settings(
    api_key: str | None = None,
    api_base: str | None = None,
    timeout: float | None = None,
    *,
    require_key: bool = True,
) -> ExaSettings:
    """Merge explicit values with ``EXA_*`` variables and built-in defaults.

    The API key falls back to the system keyring after the environment. When
    ``require_key`` is set a missing key raises :class:`ConfigError`.
    """

    if api_key is None:
        api_key = get_secret(API_KEY_ENV, fallback=None if require_key else "") or None
    base = api_base or os.getenv(API_BASE_ENV) or DEFAULT_API_BASE
    return ExaSettings(
        api_key=api_key,
        api_base=base.rstrip("/"),
        timeout=_resolve_timeout(timeout),
    )


__all__ = ["API_KEY_ENV", "API_BASE_ENV", "TIMEOUT_ENV", "DEFAULT_API_BASE", "DEFAULT_TIMEOUT", "ExaSettings", "resolve_settings"]

"""Helpers for retrieving secrets from env vars or the OS credential store."""
from __future__ import annotations

import os

import keyring
from keyring.errors import KeyringError

from exaCli.errors import ConfigError

KEYRING_SERVICES = ("exaCli", "exa")


def get_secret(name: str, *, fallback: str | None = None) -> str:
    """Return a secret from the environment or the system keyring.

    Parameters
    ----------
    name:
        Environment variable and credential name.
    fallback:
        Value to return when the secret is absent. If ``None`` and the secret
        cannot be found, :class:`ConfigError` is raised.
    """

    env = os.getenv(name)
    if env:
        return env
    for service in KEYRING_SERVICES:
        try:
            value = keyring.get_password(service, name)
        except KeyringError:
            continue
        if value:
            return value
    if fallback is not None:
        return fallback
    raise ConfigError(f"{name} missing")

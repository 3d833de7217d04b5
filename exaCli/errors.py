"""Exception hierarchy shared by the loader, validator and HTTP client."""
from __future__ import annotations

import json
from typing import Any


class ExaCliError(RuntimeError):
    """Base class for every failure surfaced by the ``exa`` command."""


class ConfigError(ExaCliError):
    """Raised when required configuration (e.g. the API key) is absent."""


class InvalidArguments(ExaCliError):
    """Raised for conflicting or empty command arguments."""


class MissingArgument(InvalidArguments):
    """Raised when a required argument was not supplied."""


class IoError(ExaCliError):
    """Raised when a body file cannot be read."""


class ParseError(ExaCliError):
    """Raised for malformed JSON input."""


class InvalidBody(ExaCliError):
    """Raised when a request body is valid JSON but not an object."""


class ValidationError(ExaCliError):
    """Raised when a request body lacks an endpoint's required field."""


class TransportError(ExaCliError):
    """Raised when the HTTP call itself fails (timeout, connection)."""


class ApiError(ExaCliError):
    """Raised for a non-2xx response; keeps the status and parsed payload."""

    def __init__(self, status: int, payload: Any) -> None:
        self.status = status
        self.payload = payload
        body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        super().__init__(f"exa api failed status={status} body={body}")


__all__ = [
    "ExaCliError",
    "ConfigError",
    "InvalidArguments",
    "MissingArgument",
    "IoError",
    "ParseError",
    "InvalidBody",
    "ValidationError",
    "TransportError",
    "ApiError",
]

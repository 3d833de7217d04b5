"""HTTP clients for the remote services the ``exa`` command talks to."""

from .exa_client import ExaClient, parse_payload

__all__ = ["ExaClient", "parse_payload"]

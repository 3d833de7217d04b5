from .settings import DEFAULT_API_BASE, DEFAULT_TIMEOUT, ExaSettings, resolve_settings

__all__ = ["DEFAULT_API_BASE", "DEFAULT_TIMEOUT", "ExaSettings", "resolve_settings"]

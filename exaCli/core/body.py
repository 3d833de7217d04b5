"""Resolve ``--body`` / ``--body-file`` into a JSON object."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from exaCli.errors import InvalidArguments, InvalidBody, IoError, ParseError


def read_body_text(body: Optional[str], body_file: Optional[Path]) -> Optional[str]:
    """Return the raw body text from exactly one source, or ``None``."""
    if body is not None and body_file is not None:
        raise InvalidArguments("use only one of --body or --body-file")
    if body_file is None:
        return body
    path = Path(body_file)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(f"read body file {path}: {exc}") from exc


def load_body(body: Optional[str] = None, body_file: Optional[Path] = None) -> Dict[str, Any]:
    """Parse the inline or file body into a mutable mapping.

    No source and an explicit JSON ``null`` both yield an empty dict. Any
    other non-object JSON value raises :class:`InvalidBody`.
    """
    raw = read_body_text(body, body_file)
    if raw is None:
        return {}
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise ParseError(f"parse body json: {exc}") from exc
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidBody("--body must be a JSON object")
    return value


__all__ = ["load_body", "read_body_text"]

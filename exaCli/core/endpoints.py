"""Static endpoint table plus the merge/validate routine shared by all commands."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from exaCli.core.body import load_body
from exaCli.errors import MissingArgument, ValidationError

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Endpoint:
    """One API route and the rules used to build its request body.

    Parameters
    ----------
    name:
        Identifier used by the CLI and in log events.
    path:
        Route appended to the API base. ``{name}`` placeholders are filled by
        :func:`endpoint_path`.
    method:
        ``POST`` sends the JSON body, ``GET`` sends none.
    string_fields:
        Flags copied verbatim into the body when supplied.
    list_fields:
        Flags normalised with :func:`normalize_list` before being copied.
    required:
        Keys that must be non-empty strings after the merge.
    required_any:
        Keys of which at least one must be present after the merge.
    fixed_fields:
        Values forced onto every body regardless of user input.
    """

    name: str
    path: str
    method: str = "POST"
    string_fields: Tuple[str, ...] = ()
    list_fields: Tuple[str, ...] = ()
    required: Tuple[str, ...] = ()
    required_any: Tuple[str, ...] = ()
    fixed_fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_body(self) -> bool:
        return self.method == "POST"


SEARCH = Endpoint("search", "/search", string_fields=("query",), required=("query",))
CONTENTS = Endpoint(
    "contents",
    "/contents",
    list_fields=("urls", "ids"),
    required_any=("urls", "ids"),
)
FIND_SIMILAR = Endpoint("findSimilar", "/findSimilar", string_fields=("url",), required=("url",))
ANSWER = Endpoint(
    "answer",
    "/answer",
    string_fields=("query",),
    required=("query",),
    fixed_fields=MappingProxyType({"stream": False}),
)
CONTEXT = Endpoint("context", "/context", string_fields=("query",), required=("query",))
RESEARCH_START = Endpoint(
    "research-start",
    "/research/v0/tasks",
    string_fields=("instructions",),
    required=("instructions",),
)
RESEARCH_CHECK = Endpoint("research-check", "/research/v0/tasks/{task_id}", method="GET")

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType(
    {
        ep.name: ep
        for ep in (SEARCH, CONTENTS, FIND_SIMILAR, ANSWER, CONTEXT, RESEARCH_START, RESEARCH_CHECK)
    }
)


def normalize_list(items: Optional[Iterable[str]]) -> Optional[List[str]]:
    """Trim ``items`` and drop blanks; ``None`` when nothing is left."""
    values = [item.strip() for item in items or () if item.strip()]
    return values or None


def merge_fields(endpoint: Endpoint, body: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
    """Overlay flag values onto ``body`` in place and return it.

    Flag values win over keys already present in ``body``. Empty list flags
    are skipped so they neither satisfy ``required_any`` nor clobber a list
    supplied through ``--body``.
    """
    unknown = set(fields) - set(endpoint.string_fields) - set(endpoint.list_fields)
    if unknown:
        raise TypeError(f"{endpoint.name} does not accept: {', '.join(sorted(unknown))}")
    for key in endpoint.string_fields:
        value = fields.get(key)
        if value is not None:
            body[key] = value
    for key in endpoint.list_fields:
        values = normalize_list(fields.get(key))
        if values is not None:
            body[key] = values
    body.update(endpoint.fixed_fields)
    return body


def validate_body(endpoint: Endpoint, body: Mapping[str, Any]) -> None:
    for key in endpoint.required:
        value = body.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"missing {key}")
    if endpoint.required_any and not any(key in body for key in endpoint.required_any):
        raise ValidationError(f"missing one of: {', '.join(endpoint.required_any)}")


def build_body(
    endpoint: Endpoint,
    *,
    body: Optional[str] = None,
    body_file: Optional[Path] = None,
    **fields: Any,
) -> Dict[str, Any]:
    """Load, merge and validate the request body for ``endpoint``."""
    merged = merge_fields(endpoint, load_body(body, body_file), **fields)
    validate_body(endpoint, merged)
    return merged


def endpoint_path(endpoint: Endpoint, **params: Optional[str]) -> str:
    """Fill ``{name}`` placeholders in the endpoint path verbatim.

    Values are substituted in a single pass over ``endpoint.path`` and are
    never re-scanned, so braces inside a value are left untouched.
    """
    for name in _PLACEHOLDER_RE.findall(endpoint.path):
        if not params.get(name):
            raise MissingArgument(f"{name} missing")
    return _PLACEHOLDER_RE.sub(lambda m: str(params[m.group(1)]), endpoint.path)


__all__ = [
    "Endpoint",
    "ENDPOINTS",
    "SEARCH",
    "CONTENTS",
    "FIND_SIMILAR",
    "ANSWER",
    "CONTEXT",
    "RESEARCH_START",
    "RESEARCH_CHECK",
    "normalize_list",
    "merge_fields",
    "validate_body",
    "build_body",
    "endpoint_path",
]

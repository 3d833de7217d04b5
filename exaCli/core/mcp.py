"""MCP discovery URL helpers. Nothing here touches the network."""
from __future__ import annotations

import string
from typing import Optional, Tuple

from exaCli.errors import InvalidArguments

MCP_BASE = "https://mcp.exa.ai/mcp"
MCP_TOOLS: Tuple[str, ...] = (
    "web_search_exa",
    "web_search_advanced_exa",
    "get_code_context_exa",
    "deep_search_exa",
    "crawling_exa",
    "company_research_exa",
    "people_search_exa",
    "deep_researcher_start",
    "deep_researcher_check",
)

_TRIM_CHARS = string.whitespace + ","


def list_tools() -> Tuple[str, ...]:
    return MCP_TOOLS


def build_mcp_url(tools: Optional[str] = None) -> str:
    """Return the MCP URL, optionally restricted to ``tools``.

    ``"all"`` expands to every known tool. Any other value is passed through
    as-is once surrounding whitespace and commas are removed; names are not
    checked against :data:`MCP_TOOLS`.
    """
    if tools is None:
        return MCP_BASE
    if tools == "all":
        selected = ",".join(MCP_TOOLS)
    else:
        selected = tools.strip(_TRIM_CHARS)
        if not selected:
            raise InvalidArguments("tools list is empty")
    return f"{MCP_BASE}?tools={selected}"


__all__ = ["MCP_BASE", "MCP_TOOLS", "build_mcp_url", "list_tools"]

from __future__ import annotations

from typing import Optional

import click

from exaCli.cli.common import global_options, handle_errors
from exaCli.core.mcp import build_mcp_url, list_tools


@click.group()
@global_options
def mcp() -> None:
    """Exa MCP server helpers (no API key, no network)."""


@mcp.command()
@click.option("--tools", default=None, metavar="LIST|all", help="Comma-separated tool names, or `all`.")
@handle_errors
def url(tools: Optional[str]) -> None:
    """Print the MCP server URL."""
    click.echo(build_mcp_url(tools))


@mcp.command()
def tools() -> None:
    """List the known MCP tool names."""
    for name in list_tools():
        click.echo(name)

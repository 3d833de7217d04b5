from __future__ import annotations

"""Top-level ``exa`` command group."""

from pathlib import Path
from typing import Optional

import click

from exaCli import __version__
from exaCli.cli.common import GlobalOptions, body_options, global_options, handle_errors, list_option, run_endpoint
from exaCli.cli.mcp import mcp
from exaCli.cli.research import research
from exaCli.core import endpoints


@click.group()
@click.version_option(__version__)
@global_options
@click.pass_context
def cli(ctx: click.Context) -> None:  # pragma: no cover - simple wrapper
    """Exa API command line."""
    ctx.ensure_object(GlobalOptions)


@cli.command()
@click.option("--query", default=None, help="Search query.")
@body_options
@global_options
@click.pass_context
@handle_errors
def search(ctx: click.Context, query: Optional[str], body: Optional[str], body_file: Optional[Path]) -> None:
    """POST /search."""
    run_endpoint(ctx, endpoints.SEARCH, body=body, body_file=body_file, query=query)


@cli.command()
@list_option("--urls", "URLs to fetch contents for.")
@list_option("--ids", "Result ids to fetch contents for.")
@body_options
@global_options
@click.pass_context
@handle_errors
def contents(
    ctx: click.Context,
    urls: list[str],
    ids: list[str],
    body: Optional[str],
    body_file: Optional[Path],
) -> None:
    """POST /contents. Requires --urls or --ids (or either key in the body)."""
    run_endpoint(ctx, endpoints.CONTENTS, body=body, body_file=body_file, urls=urls, ids=ids)


@cli.command(name="find-similar")
@click.option("--url", default=None, help="Page to find similar links for.")
@body_options
@global_options
@click.pass_context
@handle_errors
def find_similar(ctx: click.Context, url: Optional[str], body: Optional[str], body_file: Optional[Path]) -> None:
    """POST /findSimilar."""
    run_endpoint(ctx, endpoints.FIND_SIMILAR, body=body, body_file=body_file, url=url)


@cli.command()
@click.option("--query", default=None, help="Question to answer.")
@body_options
@global_options
@click.pass_context
@handle_errors
def answer(ctx: click.Context, query: Optional[str], body: Optional[str], body_file: Optional[Path]) -> None:
    """POST /answer. Streaming is always disabled."""
    run_endpoint(ctx, endpoints.ANSWER, body=body, body_file=body_file, query=query)


@cli.command()
@click.option("--query", default=None, help="Code context query.")
@body_options
@global_options
@click.pass_context
@handle_errors
def context(ctx: click.Context, query: Optional[str], body: Optional[str], body_file: Optional[Path]) -> None:
    """POST /context."""
    run_endpoint(ctx, endpoints.CONTEXT, body=body, body_file=body_file, query=query)


cli.add_command(research)
cli.add_command(mcp)


if __name__ == "__main__":  # pragma: no cover - manual usage
    cli(prog_name="exa")

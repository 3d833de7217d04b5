from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from exaCli.cli.common import GlobalOptions, body_options, dispatch, global_options, handle_errors, run_endpoint
from exaCli.core import endpoints
from exaCli.errors import MissingArgument


@click.group()
@global_options
def research() -> None:
    """Start and poll deep research tasks."""


@research.command()
@click.option("--instructions", default=None, help="What the research task should investigate.")
@body_options
@global_options
@click.pass_context
@handle_errors
def start(ctx: click.Context, instructions: Optional[str], body: Optional[str], body_file: Optional[Path]) -> None:
    """POST /research/v0/tasks."""
    run_endpoint(ctx, endpoints.RESEARCH_START, body=body, body_file=body_file, instructions=instructions)


@research.command()
@click.option("--task-id", default=None, help="Task id returned by `research start`.")
@global_options
@click.pass_context
@handle_errors
def check(ctx: click.Context, task_id: Optional[str]) -> None:
    """GET /research/v0/tasks/{task_id}."""
    opts = ctx.ensure_object(GlobalOptions)
    settings = opts.settings()
    if not task_id:
        raise MissingArgument("task_id missing")
    dispatch(opts, settings, endpoints.RESEARCH_CHECK, task_id=task_id)

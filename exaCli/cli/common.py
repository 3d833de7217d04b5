from __future__ import annotations

"""Options and helpers shared by every ``exa`` subcommand."""

import functools
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

import click

from api_clients.exa_client import ExaClient
from exaCli.config import ExaSettings, resolve_settings
from exaCli.core.endpoints import Endpoint, build_body
from exaCli.errors import ExaCliError
from exaCli.utils.log_json import set_log_level


@dataclass
class GlobalOptions:
    api_key: Optional[str] = None
    api_base: Optional[str] = None
    pretty: bool = False
    timeout: Optional[int] = None
    verbose: bool = False

    def settings(self, *, require_key: bool = True) -> ExaSettings:
        return resolve_settings(self.api_key, self.api_base, self.timeout, require_key=require_key)


def _store_global(ctx: click.Context, param: click.Parameter, value: Any) -> None:
    # Unset flags must not reset a value given at the group level.
    if value is None or value is False:
        return
    setattr(ctx.ensure_object(GlobalOptions), param.name, value)
    if param.name == "verbose":
        set_log_level("INFO")


def global_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--api-key``/``--api-base``/``--pretty``/``--timeout``/``--verbose``.

    Applied to the root group and to every leaf command so the flags work on
    either side of the subcommand name. Values land in the shared
    :class:`GlobalOptions` context object.
    """
    common = {"callback": _store_global, "expose_value": False}
    options = (
        click.option("--api-key", default=None, help="Exa API key (defaults to $EXA_API_KEY).", **common),
        click.option(
            "--api-base",
            default=None,
            help="API base URL (defaults to $EXA_API_BASE or https://api.exa.ai).",
            **common,
        ),
        click.option("--pretty", is_flag=True, default=False, help="Pretty-print the JSON response.", **common),
        click.option(
            "--timeout",
            type=click.IntRange(min=1),
            default=None,
            metavar="SECONDS",
            help="Request timeout in seconds (default 30).",
            **common,
        ),
        click.option("--verbose", is_flag=True, default=False, help="Log request events to stderr.", **common),
    )
    for option in reversed(options):
        func = option(func)
    return func


def body_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--body-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        metavar="PATH",
        help="Read the base JSON body from PATH.",
    )(func)
    func = click.option("--body", default=None, help="Base JSON body; flags override its keys.")(func)
    return func


def _split_list(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[str]:
    return [piece for item in value for piece in item.split(",")]


def list_option(name: str, help_text: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Repeatable option whose values may also be comma-separated."""
    return click.option(
        name,
        multiple=True,
        callback=_split_list,
        metavar="VALUE[,VALUE...]",
        help=help_text,
    )


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn :class:`ExaCliError` into a one-line click error and exit 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ExaCliError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def emit(payload: Any, *, pretty: bool) -> None:
    if pretty:
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        click.echo(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def dispatch(
    opts: GlobalOptions,
    settings: ExaSettings,
    endpoint: Endpoint,
    body: Optional[dict[str, Any]] = None,
    **path_params: Optional[str],
) -> None:
    """Perform one request and print its payload."""
    with ExaClient.from_settings(settings) as client:
        payload = client.call(endpoint, body, **path_params)
    emit(payload, pretty=opts.pretty)


def run_endpoint(
    ctx: click.Context,
    endpoint: Endpoint,
    *,
    body: Optional[str],
    body_file: Optional[Path],
    **fields: Any,
) -> None:
    """Resolve settings, then build, validate and send the body for ``endpoint``."""
    opts = ctx.ensure_object(GlobalOptions)
    settings = opts.settings()
    payload = build_body(endpoint, body=body, body_file=body_file, **fields)
    dispatch(opts, settings, endpoint, payload)


__all__ = [
    "GlobalOptions",
    "global_options",
    "body_options",
    "list_option",
    "handle_errors",
    "emit",
    "dispatch",
    "run_endpoint",
]

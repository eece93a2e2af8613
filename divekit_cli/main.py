from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable

import click
import typer
from rich.console import Console

from . import __version__
from .cli_shared import GlobalOpts, OpError, UsageError, _eprint
from .init_command import cmd_init
from .log_utils import configure_logging
from .settings import _bootstrap_env, load_settings
from .visuals import CliVisuals

_VISUALS = CliVisuals()
_ERROR_CONSOLE = Console(stderr=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {msg}", markup=True, highlight=False)


def _render_usage_error_with_help(*, message: str, ctx: click.Context | None = None) -> None:
    _rich_error(message)
    help_text = ""
    if isinstance(ctx, click.Context):
        help_text = str(ctx.get_help() or "").strip()
    if help_text:
        _eprint("")
        _eprint(help_text)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"divekit {__version__}")
        raise typer.Exit(code=0)


app = typer.Typer(
    name="divekit",
    help="Bootstrap a divekit working directory.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def app_callback(
    ctx: typer.Context,
    home: str | None = typer.Option(
        None,
        "--home",
        "-m",
        help="Directory that holds .divekit (env override: DIVEKIT_HOME; default: current directory)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, error (env override: DIVEKIT_LOG_LEVEL)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Just tell what would be done, but don't do it",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    del version
    try:
        g = load_settings(home=home, log_level=log_level, dry_run=dry_run)
    except UsageError as e:
        _render_usage_error_with_help(message=str(e), ctx=ctx)
        raise typer.Exit(code=2)
    logger = configure_logging(g.log_level)
    logger.debug("resolved options: %s", g)
    ctx.obj = {"g": g, "logger": logger}


def _ctx_global(ctx: typer.Context) -> tuple[GlobalOpts, logging.Logger]:
    obj = ctx.find_root().obj
    return obj["g"], obj["logger"]


def _invoke(ctx: typer.Context, func: Any, **kwargs: Any) -> None:
    g, logger = _ctx_global(ctx)
    args = argparse.Namespace(**kwargs)
    try:
        code = int(func(args, g, visuals=_VISUALS, logger=logger))
    except UsageError as e:
        _render_usage_error_with_help(message=str(e), ctx=ctx)
        raise typer.Exit(code=2)
    except OpError as e:
        _VISUALS.print_error(str(e))
        raise typer.Exit(code=1)

    if code:
        raise typer.Exit(code=code)


def _advanced_option() -> typer.core.TyperOption:
    # Bare --advanced means true; --advanced true|false sets it explicitly.
    return typer.core.TyperOption(
        param_decls=["advanced", "--advanced"],
        type=click.BOOL,
        is_flag=False,
        flag_value=True,
        default=False,
        metavar="[BOOLEAN]",
        help="Use the advanced configuration profile",
    )


class _InitCommand(typer.core.TyperCommand):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params = [_advanced_option() if p.name == "advanced" else p for p in self.params]


def init(
    ctx: typer.Context,
    advanced: bool = typer.Option(False, "--advanced"),
) -> None:
    _invoke(ctx, cmd_init, advanced=advanced)


@dataclass(frozen=True)
class CommandSpec:
    name: str
    help: str
    handler: Callable[..., None]
    cls: type[typer.core.TyperCommand] = typer.core.TyperCommand


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="init",
        help="Initialize divekit in the home directory.",
        handler=init,
        cls=_InitCommand,
    ),
)

for _spec in COMMANDS:
    app.command(_spec.name, help=_spec.help, cls=_spec.cls)(_spec.handler)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    _bootstrap_env()
    _VISUALS.print_header()
    if not argv:
        _VISUALS.print_no_args_help()
    try:
        result = app(args=argv, prog_name="divekit", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except click.ClickException as e:
        if isinstance(e, click.UsageError):
            _render_usage_error_with_help(message=e.format_message(), ctx=getattr(e, "ctx", None))
            return int(e.exit_code)
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        _VISUALS.print_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

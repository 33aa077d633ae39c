"""Typer application wiring for the ucfinder CLI."""

from __future__ import annotations

from pathlib import Path

from rich.traceback import Traceback
import typer

from ucfinder.version import get_version

from .commands import block, blocks, chart, info, regex, search, step
from .state import debug_enabled, emit_error, get_cli_state, set_cli_state
from .utils import configure_logging


app = typer.Typer(
    help="Look up, search and browse Unicode characters.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def _app_root(
    ctx: typer.Context,
    data: str | None = typer.Option(
        None,
        "--data",
        "-d",
        help="Character data file path or URL (defaults to $UCFINDER_DATA).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML configuration file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the installed version and exit.",
        is_eager=True,
    ),
) -> None:
    if version:
        typer.echo(get_version())
        raise typer.Exit(code=0)
    ctx.obj = get_cli_state(ctx)
    state = set_cli_state(
        ctx=ctx,
        verbosity=verbose,
        debug=debug,
        data_source=data,
        config_path=config,
    )
    configure_logging(state)


app.command(name="info")(info)
app.command(name="step")(step)
app.command(name="search")(search)
app.command(name="regex")(regex)
app.command(name="block")(block)
app.command(name="blocks")(blocks)
app.command(name="chart")(chart)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]

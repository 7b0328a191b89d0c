"""Typer application factory and CLI entry point for actiongen.

This module wires together the top-level Typer application and registers
the built-in commands (``make:action``, ``make:class``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app. Unhandled exceptions are written to a crash log
under the data directory.

See Also:
    :mod:`actiongen.config`: Configuration resolution.
    :mod:`actiongen.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import typer

from actiongen import __version__
from actiongen.commands.config import config_app
from actiongen.commands.make import make_action_command, make_class_command
from actiongen.exit_codes import EXIT_GENERIC_FAILURE

if TYPE_CHECKING:
    from actiongen.output import OutputFormat


app = typer.Typer(
    name="actiongen",
    help="Scaffold Laravel action classes and plain classes from stubs.",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"actiongen {__version__}")
        raise typer.Exit()


def _configured_format(project: Optional[str]) -> OutputFormat:
    """Output format from the effective config, used when no format flag is given."""
    from actiongen.config import resolve_config
    from actiongen.exceptions import ConfigError
    from actiongen.output import OutputFormat

    try:
        config = resolve_config(Path(project) if project else None)
    except ConfigError:
        # The sub-command resolves config again and reports the error.
        return OutputFormat.AUTO
    return OutputFormat(config.output.format)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    project: Optional[str] = typer.Option(
        None,
        "--project",
        "-C",
        help="Laravel project root (defaults to the current directory).",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Preview without writing files."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~actiongen.output.OutputManager` from
    CLI flags (``--json``/``--plain`` win over the configured
    ``output.format``), and stores shared options (``project``, ``dry_run``) in the
    Typer context so that sub-commands can read them via ``ctx.obj``.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        project: Laravel project root override.
        json_output: Force JSON output format.
        plain_output: Force plain-text output format.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level diagnostic output.
        dry_run: Render and report targets without writing them.
    """
    from actiongen.output import OutputFormat, OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = _configured_format(project)

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)

    ctx.ensure_object(dict)
    ctx.obj["project"] = project
    ctx.obj["dry_run"] = dry_run


app.command("make:action")(make_action_command)
app.command("make:class")(make_class_command)
app.add_typer(config_app, name="config", help="Configuration management.")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from actiongen.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``actiongen`` console script.

    Installs signal handlers and invokes the Typer application.

    Unhandled :class:`~actiongen.exceptions.ActionGenError` instances
    cause a clean exit with the error's ``exit_code``. All other exceptions
    produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from actiongen.exceptions import ActionGenError
        from actiongen.output import error

        if isinstance(exc, ActionGenError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)

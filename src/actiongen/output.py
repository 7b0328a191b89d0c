"""Terminal output for actiongen.

Two streams, two purposes:

* **stdout** carries the result a user might pipe somewhere else: route
  declarations, JSON summaries, config dumps.
* **stderr** carries every diagnostic: per-file notices, warnings, errors,
  hints and debug traces.

Colour is dropped when ``NO_COLOR`` is set, when ``TERM=dumb``, or when
``--no-color`` is passed; diagnostics are then written verbatim. Messages
are escaped before they reach Rich, so namespaces such as ``[Foo/Bar$]``
print as typed.

Commands talk to the module-level helpers (:func:`info`, :func:`error`, ...)
which forward to the :class:`OutputManager` installed by the root callback.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """How stdout data is rendered. ``AUTO`` means rich on a colour TTY, plain otherwise."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


# kind -> (plain template, Rich template, hidden by --quiet)
_DIAGNOSTICS: dict[str, tuple[str, str, bool]] = {
    "info": ("{}", "{}", True),
    "success": ("{}", "[green]{}[/green]", True),
    "warning": ("Warning: {}", "[yellow]Warning:[/yellow] {}", False),
    "error": ("Error: {}", "[bold red]Error:[/bold red] {}", False),
    "suggest": ("→ {}", "[dim]→ {}[/dim]", True),
    "debug": ("[debug] {}", "[dim]\\[debug] {}[/dim]", False),
}


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        format: Rendering for :meth:`format_response`.
        no_color: Force colourless output regardless of the environment.
        quiet: Hide informational diagnostics; warnings and errors still show.
        verbose: Show :meth:`debug` traces.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            rich_ok = _is_tty() and not self._no_color
            format = OutputFormat.RICH if rich_ok else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    # -- stdout ------------------------------------------------------------

    def format_response(self, data: Any) -> None:
        """Render structured *data* to stdout in the active format."""
        if self._format == OutputFormat.JSON:
            if isinstance(data, str):
                try:
                    data = json.loads(data)
                except json.JSONDecodeError:
                    self.print_data(data)
                    return
            self.print_data(_dumps(data))
        elif self._format == OutputFormat.PLAIN:
            for line in _plain_lines(data):
                self.print_data(line)
        elif isinstance(data, (dict, list)):
            self._stdout.print(Syntax(_dumps(data), "json", theme="monokai", word_wrap=True))
        else:
            self._stdout.print(str(data), markup=False)

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    # -- stderr ------------------------------------------------------------

    def _emit(self, kind: str, message: str) -> None:
        plain, styled, quiet_hides = _DIAGNOSTICS[kind]
        if quiet_hides and self._quiet:
            return
        if self._no_color:
            print(plain.format(message), file=sys.stderr, flush=True)
        else:
            self._stderr.print(styled.format(escape(message)))

    def info(self, message: str) -> None:
        self._emit("info", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def suggest(self, message: str) -> None:
        """A next step for the user, shown after an arrow."""
        self._emit("suggest", message)

    def debug(self, message: str) -> None:
        if self._verbose:
            self._emit("debug", message)

    def alert(self, message: str) -> None:
        """Frame *message* in a box, as a headline for the data that follows."""
        if self._quiet:
            return
        if self._no_color:
            border = "*" * (len(message) + 12)
            print(f"{border}\n*     {message}     *\n{border}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(Panel(escape(message), expand=False, border_style="yellow"))


def _plain_lines(data: Any) -> list[str]:
    """Tab-separated lines: ``key<TAB>value`` for a dict, one row per list item."""
    if isinstance(data, dict):
        return [f"{key}\t{value}" for key, value in data.items()]
    if isinstance(data, list):
        return [
            "\t".join(str(v) for v in item.values()) if isinstance(item, dict) else str(item)
            for item in data
        ]
    return [str(data)]


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (to anything) or ``TERM`` is ``dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# -- process-wide instance -------------------------------------------------

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """The installed manager, or a default one created on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager; tests call this between runs."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_data(text: str) -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)


def alert(message: str) -> None:
    get_output().alert(message)

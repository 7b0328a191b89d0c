"""Built-in CLI sub-commands for actiongen.

This package groups the Typer command modules that form the CLI's
top-level command tree:

* :mod:`~actiongen.commands.make` -- ``make:action`` and ``make:class``,
  the class generators.
* :mod:`~actiongen.commands.config` -- view and modify global settings.

Single commands are exported as plain callback functions registered on
the root app; multi-command groups export a :class:`typer.Typer`
sub-application.
"""

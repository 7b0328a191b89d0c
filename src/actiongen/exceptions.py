"""Exception hierarchy for actiongen.

All exceptions inherit from :class:`ActionGenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`actiongen.exit_codes`.
Commands catch ``ActionGenError``, print its message, and exit with the
attached code. The top-level handler in :func:`actiongen.app.main` does the
same for anything that escapes a command, while unexpected exceptions
produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    ActionGenError (exit 1)
    +-- InvalidUsageError          (exit 2)
    |   +-- InvalidNameError
    |   +-- InvalidNamespaceError
    |   +-- InvalidActionNameError
    +-- TargetAlreadyExistsError   (exit 1, reported per target)
    +-- StubNotFoundError          (exit 1)
    +-- ConfigError                (exit 1)
"""

from __future__ import annotations

from actiongen.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INVALID_USAGE


class ActionGenError(Exception):
    """Base exception for all actiongen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`actiongen.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ActionGenError):
    """Raised for invalid CLI arguments. Always raised before any file is touched."""

    exit_code = EXIT_INVALID_USAGE


class InvalidNameError(InvalidUsageError):
    """Raised when the ``NAME`` argument contains non-word characters."""


class InvalidNamespaceError(InvalidUsageError):
    """Raised when ``--namespace`` is not a well-formed namespace path."""


class InvalidActionNameError(InvalidUsageError):
    """Raised when a token passed via ``--actions`` or ``--except`` is malformed."""


class TargetAlreadyExistsError(ActionGenError):
    """Raised for a single target whose file exists and ``--force`` is absent.

    The command shell catches this per target, reports it, and carries on
    with the remaining targets.

    Args:
        class_name: Short class name of the conflicting target.
        kind: Human label for the generated type (``"action"`` or
            ``"class"``).
        path: Filesystem path that already exists.
    """

    def __init__(self, class_name: str, kind: str, path: str) -> None:
        super().__init__(f"{class_name} {kind} already exists!")
        self.class_name = class_name
        self.kind = kind
        self.path = path


class StubNotFoundError(ActionGenError):
    """Raised when a stub template cannot be found in any stub directory."""


class ConfigError(ActionGenError):
    """Raised for configuration problems (invalid JSON, failed validation, bad composer.json)."""

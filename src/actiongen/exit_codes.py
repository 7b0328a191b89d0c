"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~actiongen.exceptions.ActionGenError` subclass.
Shell wrappers and CI scripts can inspect the exit code to tell a bad
invocation apart from a broken configuration without parsing stderr.

Example::

    $ actiongen make:action 'Post!'
    Error: Name can't contain any non-word characters.
    $ echo $?
    2   # EXIT_INVALID_USAGE -- nothing was written
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred (bad config, missing stub, crash)."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with an invalid name, namespace, or action token."""

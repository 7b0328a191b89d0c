"""actiongen -- Scaffold Laravel action classes and plain classes from stubs.

This package is a command-line generator for Laravel projects. It turns a
class name plus a handful of flags into one or more PHP classes rendered
from stub templates, and suggests route registrations for the generated
actions.

Typical workflow::

    actiongen make:action Post --resource --except=create,edit
    actiongen make:class PostPublisher --namespace=Services

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and project detection.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    generator: The name, namespace, stub, and route pipeline.
"""

__version__ = "0.3.0"

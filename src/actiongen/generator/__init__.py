"""Class generator -- turn a name and a set of flags into PHP source files.

This sub-package holds everything that does not depend on the CLI layer.

Typical usage::

    from pathlib import Path

    from actiongen.generator import (
        build_class_specs,
        collect_action_names,
        load_stub,
        render_class,
    )
    from actiongen.models import GeneratorConfig

    names = collect_action_names(resource=True, except_="create,edit")
    specs = build_class_specs(names, "Post", "App\\\\Http\\\\Actions", Path("."), GeneratorConfig())
    stub = load_stub("action")
    sources = [render_class(stub, s.fully_qualified_name, "Acme\\\\Action") for s in specs]

Sub-modules:

* :mod:`~actiongen.generator.actions` -- :class:`ActionNameSet` and the
  ``--resource`` / ``--actions`` / ``--except`` / ``--api`` processors.
* :mod:`~actiongen.generator.names` -- name and namespace validation,
  namespace resolution, class names and file paths.
* :mod:`~actiongen.generator.renderer` -- stub loading and placeholder
  substitution.
* :mod:`~actiongen.generator.routes` -- suggested ``Route::`` lines.
* :mod:`~actiongen.generator.writer` -- force-aware atomic file writes.
"""

from actiongen.generator.actions import ActionNameSet, collect_action_names
from actiongen.generator.names import (
    build_class_specs,
    default_namespace,
    generate_class_names,
    resolve_final_namespace,
    validate_name_argument,
    validate_namespace_option,
)
from actiongen.generator.renderer import load_stub, render_class
from actiongen.generator.routes import build_route_suggestions, format_routes
from actiongen.generator.writer import write_target

__all__ = [
    "ActionNameSet",
    "build_class_specs",
    "build_route_suggestions",
    "collect_action_names",
    "default_namespace",
    "format_routes",
    "generate_class_names",
    "load_stub",
    "render_class",
    "resolve_final_namespace",
    "validate_name_argument",
    "validate_namespace_option",
    "write_target",
]

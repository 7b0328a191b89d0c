"""Make commands -- scaffold action classes and plain classes.

Implements the ``actiongen make:action`` and ``actiongen make:class``
top-level commands. Both follow the same sequence:

1. Collect action tokens from the flags (``make:action`` only).
2. Validate the name and namespace, resolve the final namespace, and
   compute every target. Any invalid input aborts here, before a single
   file is touched.
3. Render the stub for each target and write it, reporting targets that
   already exist (unless ``--force``) without aborting the others.
4. Print suggested routes for the generated actions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

from actiongen.exceptions import ActionGenError, TargetAlreadyExistsError
from actiongen.generator.actions import ActionNameSet
from actiongen.models import GeneratedClassSpec, GenerationResult, GeneratorConfig, TargetStatus
from actiongen.output import (
    OutputFormat,
    alert,
    debug,
    error,
    format_response,
    get_output,
    info,
    print_data,
    success,
    suggest,
    warning,
)


def make_action_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the class."),
    resource: bool = typer.Option(
        False, "--resource", "-r", help="Generate actions for all resource actions."
    ),
    api: bool = typer.Option(
        False, "--api", "-a", help="Generate the API resource actions (no create/edit)."
    ),
    actions: Optional[str] = typer.Option(
        None, "--actions", help="Generate specified actions separated by comma."
    ),
    except_: Optional[str] = typer.Option(
        None, "--except", help="Exclude specified actions separated by comma."
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", help="The namespace for generated action(s)."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Override existing action(s)."
    ),
    no_routes: bool = typer.Option(
        False, "--no-routes", help="Do not print suggested routes."
    ),
) -> None:
    """Create one or more action classes.

    Without flags a single action named after NAME is generated. Each
    collected action token is prefixed to NAME, so ``--actions=show,store``
    on ``Post`` produces ``ShowPost`` and ``StorePost``.

    Args:
        ctx: Typer context carrying the global ``project`` and ``dry_run``
            settings.
        name: Bare class name; word characters only.
        resource: Add ``index, show, create, store, edit, update, destroy``.
        api: Add ``index, show, store, update, destroy``. Applied after
            ``--except``.
        actions: Comma-separated extra action tokens.
        except_: Comma-separated tokens to remove.
        namespace: Namespace relative to the default action namespace, or
            absolute when it starts with ``\\``.
        force: Overwrite files that already exist.
        no_routes: Skip the suggested routes even when the
            ``print_routes`` config setting is on.

    Raises:
        typer.Exit: With code 2 on an invalid name, namespace, or action
            token; code 1 on config or stub errors.

    Example::

        actiongen make:action Post --resource --except=create,edit
        actiongen make:action Post --actions=approve,reject --namespace=Admin
        actiongen make:action Report --namespace='\\Domain\\Reports' --force
    """
    from actiongen.generator import collect_action_names
    from actiongen.generator.routes import build_route_suggestions, format_route, format_routes

    try:
        names = collect_action_names(
            resource=resource, actions=actions, except_=except_, api=api
        )
        specs, stub, config = _plan(ctx, "action", name, names, namespace)
    except ActionGenError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    results = _write_all(ctx, specs, stub, "action", config.base_action, force)

    show_routes = config.print_routes and not no_routes
    suggestions = []
    if show_routes and any(r.status != TargetStatus.SKIPPED for r in results):
        suggestions = build_route_suggestions(
            [s.class_name for s in specs], name, specs[0].namespace
        )

    if get_output().format == OutputFormat.JSON:
        format_response(
            {
                "targets": [_result_to_dict(r) for r in results],
                "routes": [
                    {**s.model_dump(), "declaration": format_route(s)} for s in suggestions
                ],
            }
        )
    elif suggestions:
        alert("You may use following routes:")
        print_data(format_routes(suggestions))


def make_class_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the class."),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", help="The namespace for generated class."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Override existing class."),
) -> None:
    """Create a new plain class.

    The class is generated into the default class namespace
    (``App\\Actions`` in a stock project) unless ``--namespace`` says
    otherwise.

    Raises:
        typer.Exit: With code 2 on an invalid name or namespace; code 1 on
            config or stub errors.

    Example::

        actiongen make:class PostPublisher
        actiongen make:class PostPublisher --namespace=Services
    """
    try:
        specs, stub, _ = _plan(ctx, "class", name, ActionNameSet(), namespace)
    except ActionGenError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    results = _write_all(ctx, specs, stub, "class", None, force)

    if get_output().format == OutputFormat.JSON:
        format_response({"targets": [_result_to_dict(r) for r in results]})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _context_settings(ctx: typer.Context) -> tuple[Path, bool]:
    """Return ``(project_root, dry_run)`` from the root callback's context."""
    obj: dict[str, Any] = ctx.obj if isinstance(ctx.obj, dict) else {}
    project = obj.get("project")
    return (Path(project) if project else Path.cwd()), bool(obj.get("dry_run", False))


def _plan(
    ctx: typer.Context,
    kind: str,
    name: str,
    names: ActionNameSet,
    namespace: Optional[str],
) -> tuple[list[GeneratedClassSpec], str, GeneratorConfig]:
    """Validate input and compute every target plus the stub to render.

    Raises:
        ActionGenError: On invalid input, bad config, or a missing stub.
    """
    from actiongen.config import resolve_config
    from actiongen.generator import (
        build_class_specs,
        default_namespace,
        load_stub,
        resolve_final_namespace,
        validate_name_argument,
        validate_namespace_option,
    )
    from actiongen.generator.renderer import resolve_stub_path

    base_name = validate_name_argument(name)
    namespace_option = validate_namespace_option(namespace)

    project_root, _ = _context_settings(ctx)
    config = resolve_config(project_root).generator
    debug(f"Project root: {project_root}")
    debug(f"Root namespace: {config.root_namespace}")

    final_namespace = resolve_final_namespace(default_namespace(config, kind), namespace_option)
    debug(f"Final namespace: {final_namespace or '(global)'}")

    specs = build_class_specs(names, base_name, final_namespace, project_root, config)

    stubs_dir = project_root / config.stubs_path if config.stubs_path else None
    if stubs_dir is not None and not stubs_dir.is_dir():
        warning(f"Stubs directory {stubs_dir} does not exist; using bundled stubs.")
    debug(f"Using stub: {resolve_stub_path(kind, stubs_dir)}")
    stub = load_stub(kind, stubs_dir)

    return specs, stub, config


def _write_all(
    ctx: typer.Context,
    specs: list[GeneratedClassSpec],
    stub: str,
    kind: str,
    base_action: Optional[str],
    force: bool,
) -> list[GenerationResult]:
    """Render and write every target, reporting each outcome.

    A target that already exists is reported and skipped; the remaining
    targets are still processed.
    """
    from actiongen.generator import render_class, write_target

    _, dry_run = _context_settings(ctx)
    results: list[GenerationResult] = []

    for spec in specs:
        label = f"{spec.class_name} {kind}"
        content = render_class(stub, spec.fully_qualified_name, base_action)
        try:
            status = write_target(spec, content, kind, force=force, dry_run=dry_run)
        except TargetAlreadyExistsError as exc:
            error(str(exc))
            results.append(GenerationResult(spec=spec, status=TargetStatus.SKIPPED))
            continue

        if status == TargetStatus.PLANNED:
            info(f"{label} would be written to {spec.path}")
        else:
            debug(f"Wrote {spec.path}")
            success(f"{label} created successfully.")
        results.append(GenerationResult(spec=spec, status=status))

    if any(r.status == TargetStatus.SKIPPED for r in results):
        suggest("Use --force to overwrite existing files.")

    return results


def _result_to_dict(result: GenerationResult) -> dict[str, str]:
    """Summarise *result* for JSON output."""
    return {
        "class": result.spec.fully_qualified_name,
        "path": str(result.spec.path),
        "status": result.status.value,
    }

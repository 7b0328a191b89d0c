"""Config commands -- view and modify global configuration.

Provides the ``actiongen config`` sub-command group for reading, updating,
and resetting the user's global configuration file
(:class:`~actiongen.models.GlobalConfig`). ``show --effective`` prints the
configuration after project config, ``composer.json``, and environment
overrides have been applied.
"""

from __future__ import annotations

from pathlib import Path

import typer

from actiongen.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show(
    ctx: typer.Context,
    effective: bool = typer.Option(
        False,
        "--effective",
        "-e",
        help="Show the merged configuration for the current project.",
    ),
) -> None:
    """Show current configuration.

    Prints the config directory path followed by the configuration as
    formatted output (JSON or key/value lines, depending on the active
    output mode).

    Example::

        actiongen config show
        actiongen --project ../blog config show --effective
    """
    from actiongen.config import get_config_dir, load_global_config, resolve_config
    from actiongen.exceptions import ConfigError

    try:
        if effective:
            project = (ctx.obj or {}).get("project")
            config = resolve_config(Path(project) if project else None)
        else:
            config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'generator.base_action')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is coerced to match the
    existing field's type (bool or str). The updated config is validated
    against :class:`~actiongen.models.GlobalConfig` before saving.

    Args:
        key: Dot-separated config key path (e.g. ``generator.app_path``).
        value: String value to set; coerced to the target field type.

    Raises:
        typer.Exit: With code 2 if the key path is invalid or validation
            fails.

    Example::

        actiongen config set generator.base_action 'Acme\\Actions\\Action'
        actiongen config set generator.print_routes false
        actiongen config set output.format plain
    """
    from actiongen.config import load_global_config, save_global_config
    from actiongen.exceptions import ConfigError
    from actiongen.models import GlobalConfig

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    data = config.model_dump(mode="json")

    # Navigate the dot-separated key path.
    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    # Type coerce the value to match the current field type.
    current = target[final_key]
    if isinstance(current, bool):
        coerced = value.lower() in ("true", "1", "yes")
    else:
        coerced = value  # type: ignore[assignment]

    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except Exception as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset configuration to defaults.

    Replaces the persisted global config with a fresh
    :class:`~actiongen.models.GlobalConfig` instance containing all
    default values. Asks for confirmation unless ``--force`` is given.

    Raises:
        typer.Exit: If the user declines confirmation.

    Example::

        actiongen config reset
        actiongen config reset --force
    """
    from actiongen.config import save_global_config
    from actiongen.models import GlobalConfig

    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")

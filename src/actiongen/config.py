"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for actiongen:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.actiongen/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~actiongen.models.GlobalConfig`
  JSON file storing user-wide defaults.
* **Project config** -- An optional ``actiongen.json`` in the Laravel
  project root, plus the PSR-4 autoload map in ``composer.json`` from which
  the application's root namespace is detected.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project-local config, ``composer.json``, and
  global config into the final effective configuration.

All file writes, including generated class files, go through
:func:`atomic_write` (temp file then rename) so that an interrupted run
never leaves a truncated file behind.
"""

from __future__ import annotations

import json
import os
import platform
import stat
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from actiongen.exceptions import ConfigError
from actiongen.models import GlobalConfig

_APP_NAME = "actiongen"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "actiongen.json"
_COMPOSER_FILENAME = "composer.json"

_ENV_OVERRIDES: dict[str, str] = {
    "ACTIONGEN_ROOT_NAMESPACE": "root_namespace",
    "ACTIONGEN_BASE_ACTION": "base_action",
    "ACTIONGEN_STUBS_PATH": "stubs_path",
}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def _config_dir_path() -> Path:
    """Locate the configuration directory without touching the filesystem."""
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/actiongen/`` (default ``~/.config/actiongen/``).
    On macOS/Windows: ``~/.actiongen/``.

    Returns:
        Absolute path to the configuration directory (guaranteed to exist).
    """
    path = _config_dir_path()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/actiongen/`` (default ``~/.local/share/actiongen/``).
    On macOS/Windows: ``~/.actiongen/logs/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    Missing parent directories are created first. On success the temp file
    is renamed over *path*; on any failure the temp file is cleaned up.

    The result keeps the mode of an existing *path*; a new file gets the
    usual ``0o666`` minus the process umask instead of the ``0o600`` that
    :mod:`tempfile` creates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


def _current_umask() -> int:
    """Return the process umask (``os.umask`` can only be read by setting it)."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    """Permission bits the file at *path* should end up with."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def _read_json(path: Path, label: str) -> Any:
    """Parse the JSON file at *path*, wrapping failures in :class:`ConfigError`."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid {label} at {path}: {exc}") from exc


# --- Global config ---


def _global_config_path() -> Path:
    """Path to the global config file. Reading it never creates directories."""
    return _config_dir_path() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the XDG config directory.

    Returns:
        The deserialised :class:`~actiongen.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    data = _read_json(path, "global config")
    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk.

    Args:
        config: The configuration to save.
    """
    data = config.model_dump(mode="json")
    atomic_write(get_config_dir() / _CONFIG_FILENAME, json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config(project_root: Path) -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``<project_root>/actiongen.json``.

    The file holds a partial :class:`~actiongen.models.GlobalConfig`, for
    example ``{"generator": {"action_namespace": "Http\\\\Handlers"}}``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = project_root / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    data = _read_json(path, "project config")
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def detect_root_namespace(project_root: Path, app_path: str = "app") -> Optional[str]:
    """Detect the application namespace from ``composer.json``.

    Looks for the ``autoload.psr-4`` entry whose directory is *app_path*,
    which is how Laravel itself determines the application namespace.

    Returns:
        The namespace with its trailing separator (e.g. ``"App\\\\"``), or
        ``None`` when there is no ``composer.json`` or no matching entry.

    Raises:
        ConfigError: If ``composer.json`` exists but is not valid JSON.
    """
    path = project_root / _COMPOSER_FILENAME
    if not path.is_file():
        return None
    composer = _read_json(path, "composer.json")
    if not isinstance(composer, dict):
        return None

    autoload = composer.get("autoload")
    psr4 = autoload.get("psr-4") if isinstance(autoload, dict) else None
    if not isinstance(psr4, dict):
        return None

    wanted = app_path.strip("/")
    for namespace, dirs in psr4.items():
        candidates = dirs if isinstance(dirs, list) else [dirs]
        for directory in candidates:
            if isinstance(directory, str) and directory.strip("/").removeprefix("./") == wanted:
                return namespace
    return None


# --- Precedence resolution ---


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into *base* in place and return *base*."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def resolve_config(
    project_root: Optional[Path] = None,
    cli_format: Optional[str] = None,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_format``)
        2. Environment variables (``ACTIONGEN_ROOT_NAMESPACE``,
           ``ACTIONGEN_BASE_ACTION``, ``ACTIONGEN_STUBS_PATH``)
        3. Project config (``<project_root>/actiongen.json``)
        4. ``composer.json`` PSR-4 root namespace detection
        5. User config (``~/.config/actiongen/config.json``)
        6. Defaults

    Args:
        project_root: Laravel project directory. Defaults to the current
            working directory.
        cli_format: Output format override from the command line.

    Returns:
        The effective :class:`~actiongen.models.GlobalConfig`.

    Raises:
        ConfigError: If any config source is unreadable or the merged
            result fails validation.
    """
    root = project_root if project_root is not None else Path.cwd()

    # 6 + 5. User config (fills in defaults automatically)
    data = load_global_config().model_dump(mode="json")

    # 3. Project-local config is merged now so that a custom app_path is
    # known before composer.json is consulted.
    project = load_project_config(root) or {}
    _deep_merge(data, project)
    for section in ("generator", "output"):
        if not isinstance(data.get(section), dict):
            raise ConfigError(f"Invalid project config in {root}: '{section}' must be an object")

    # 4. composer.json only decides the namespace when the project config
    # did not pin one.
    project_generator = project.get("generator")
    if not (isinstance(project_generator, dict) and "root_namespace" in project_generator):
        detected = detect_root_namespace(root, data["generator"]["app_path"])
        if detected is not None:
            data["generator"]["root_namespace"] = detected

    # 2. Environment variables
    for env_var, field in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data["generator"][field] = value

    # 1. CLI flags
    if cli_format is not None:
        data["output"]["format"] = cli_format

    try:
        return GlobalConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration for {root}: {exc}") from exc

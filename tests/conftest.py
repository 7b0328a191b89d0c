"""Shared test fixtures for actiongen.

Provides reusable fixtures for creating isolated config environments,
scaffolding throwaway Laravel projects, managing output state, and
running CLI commands. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from actiongen.models import GeneratorConfig
from actiongen.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path
    so that tests never touch real user config. Clears all ACTIONGEN_*
    environment variables and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr("actiongen.config._is_xdg_platform", lambda: True)

    for var in [
        "ACTIONGEN_ROOT_NAMESPACE",
        "ACTIONGEN_BASE_ACTION",
        "ACTIONGEN_STUBS_PATH",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Project fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def laravel_project(isolated_config: Path) -> Path:
    """A minimal Laravel project root inside the isolated tmp directory.

    Contains a ``composer.json`` mapping ``App\\`` to ``app/`` and an
    empty ``app/`` directory. The working directory is the project root.
    """
    project = isolated_config / "blog"
    (project / "app").mkdir(parents=True)
    composer = {
        "name": "laravel/laravel",
        "autoload": {"psr-4": {"App\\": "app/"}},
    }
    (project / "composer.json").write_text(json.dumps(composer, indent=4))
    return project


@pytest.fixture
def generator_config() -> GeneratorConfig:
    """Stock Laravel layout settings."""
    return GeneratorConfig()


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Set up a quiet output manager for tests that don't care about output.

    Installs a PLAIN-format, quiet OutputManager as the global output
    and resets it after the test completes.
    """
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner.

    Returns a CliRunner with colour disabled so that diagnostics are
    printed verbatim and assertions can match them as plain text.
    """
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})

"""Tests for the ``config`` command group (show, set, reset)."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from actiongen.app import app
from actiongen.config import load_global_config, save_global_config
from actiongen.models import GeneratorConfig, GlobalConfig


class TestConfigShow:
    def test_show_defaults_as_json(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["--json", "config", "show"])

        assert result.exit_code == 0, result.output
        assert '"base_action": "Sarfraznawaz2005\\\\Actions\\\\Action"' in result.output

    def test_show_effective_uses_project(
        self, cli_runner: CliRunner, laravel_project: Path
    ) -> None:
        (laravel_project / "composer.json").write_text(
            json.dumps({"autoload": {"psr-4": {"Acme\\": "app/"}}})
        )
        result = cli_runner.invoke(
            app, ["--project", str(laravel_project), "--plain", "config", "show", "--effective"]
        )

        assert result.exit_code == 0, result.output
        assert "Acme\\\\" in result.output

    def test_show_broken_global_config(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        config_file = isolated_config / "config" / "actiongen" / "config.json"
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("{oops")

        result = cli_runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid global config" in result.output


class TestConfigSet:
    def test_set_string(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(
            app, ["config", "set", "generator.base_action", "Acme\\Action"]
        )

        assert result.exit_code == 0, result.output
        assert load_global_config().generator.base_action == "Acme\\Action"

    def test_set_bool(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["config", "set", "generator.print_routes", "false"])

        assert result.exit_code == 0, result.output
        assert load_global_config().generator.print_routes is False

    def test_set_unknown_key(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["config", "set", "generator.nope", "x"])

        assert result.exit_code == 2
        assert "Unknown config key" in result.output

    def test_set_section_rejected(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["config", "set", "generator", "x"])

        assert result.exit_code == 2

    def test_set_invalid_path(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(app, ["config", "set", "missing.key", "x"])

        assert result.exit_code == 2
        assert "Invalid config key" in result.output


class TestConfigReset:
    def test_reset_force(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(generator=GeneratorConfig(print_routes=False)))

        result = cli_runner.invoke(app, ["config", "reset", "--force"])

        assert result.exit_code == 0, result.output
        assert load_global_config() == GlobalConfig()

    def test_reset_declined(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(generator=GeneratorConfig(print_routes=False)))

        result = cli_runner.invoke(app, ["config", "reset"], input="n\n")

        assert result.exit_code == 0
        assert load_global_config().generator.print_routes is False

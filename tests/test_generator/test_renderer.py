"""Tests for actiongen.generator.renderer -- stub loading and substitution."""

from __future__ import annotations

from pathlib import Path

import pytest

from actiongen.exceptions import StubNotFoundError
from actiongen.generator.renderer import (
    PLACEHOLDER_BASE_ACTION,
    PLACEHOLDER_CLASS,
    PLACEHOLDER_NAMESPACE,
    STUBS_DIR,
    load_stub,
    render_class,
    resolve_stub_path,
    split_class_name,
)


class TestSplitClassName:
    def test_qualified(self) -> None:
        assert split_class_name("App\\Http\\Actions\\ShowPost") == ("App\\Http\\Actions", "ShowPost")

    def test_unqualified(self) -> None:
        assert split_class_name("ShowPost") == ("", "ShowPost")

    def test_leading_separator_trimmed(self) -> None:
        assert split_class_name("\\App\\ShowPost") == ("App", "ShowPost")


class TestResolveStubPath:
    def test_bundled_stubs_exist(self) -> None:
        assert resolve_stub_path("action") == STUBS_DIR / "action.stub"
        assert resolve_stub_path("class") == STUBS_DIR / "class.stub"

    def test_unknown_kind(self) -> None:
        with pytest.raises(StubNotFoundError, match="Unknown stub type"):
            resolve_stub_path("controller")

    def test_project_override_wins(self, tmp_path: Path) -> None:
        custom = tmp_path / "action.stub"
        custom.write_text("<?php // custom DummyClass\n")
        assert resolve_stub_path("action", tmp_path) == custom

    def test_missing_override_falls_back(self, tmp_path: Path) -> None:
        assert resolve_stub_path("class", tmp_path) == STUBS_DIR / "class.stub"

    def test_missing_bundled_stub(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("actiongen.generator.renderer.STUBS_DIR", tmp_path / "nowhere")
        with pytest.raises(StubNotFoundError, match="Stub not found"):
            resolve_stub_path("action")


class TestLoadStub:
    def test_action_stub_placeholders(self) -> None:
        stub = load_stub("action")
        assert PLACEHOLDER_NAMESPACE in stub
        assert PLACEHOLDER_BASE_ACTION in stub
        assert PLACEHOLDER_CLASS in stub

    def test_class_stub_has_no_base_action(self) -> None:
        stub = load_stub("class")
        assert PLACEHOLDER_BASE_ACTION not in stub
        assert PLACEHOLDER_CLASS in stub


class TestRenderClass:
    BASE = "Sarfraznawaz2005\\Actions\\Action"

    def test_action_fully_substituted(self) -> None:
        source = render_class(load_stub("action"), "App\\Http\\Actions\\ShowPost", self.BASE)

        assert "namespace App\\Http\\Actions;" in source
        assert "use Sarfraznawaz2005\\Actions\\Action as BaseAction;" in source
        assert "class ShowPost extends BaseAction" in source
        assert "Dummy" not in source

    def test_class_fully_substituted(self) -> None:
        source = render_class(load_stub("class"), "App\\Actions\\PostPublisher")
        assert source.startswith("<?php\n\nnamespace App\\Actions;\n")
        assert "class PostPublisher\n{" in source
        assert "Dummy" not in source

    def test_base_action_leading_separator_stripped(self) -> None:
        source = render_class(load_stub("action"), "App\\ShowPost", "\\Acme\\Action")
        assert "use Acme\\Action as BaseAction;" in source

    def test_global_namespace_drops_declaration(self) -> None:
        source = render_class(load_stub("class"), "PostPublisher")
        assert "namespace" not in source
        assert source.startswith("<?php\n\nclass PostPublisher\n")

    def test_deterministic(self) -> None:
        stub = load_stub("action")
        first = render_class(stub, "App\\Http\\Actions\\StorePost", self.BASE)
        second = render_class(stub, "App\\Http\\Actions\\StorePost", self.BASE)
        assert first == second

    def test_no_base_action_leaves_placeholder(self) -> None:
        source = render_class(load_stub("action"), "App\\ShowPost")
        assert PLACEHOLDER_BASE_ACTION in source

    def test_literal_substitution_only(self) -> None:
        stub = "namespace DummyNamespace;\n\n{{ DummyClass }} $DummyClass"
        assert render_class(stub, "A\\B") == "namespace A;\n\n{{ B }} $B"

    def test_placeholder_text_in_values_kept_literal(self) -> None:
        source = render_class(
            load_stub("action"), "App\\Http\\Actions\\DummyClassHelpers\\ShowPost", self.BASE
        )

        assert "namespace App\\Http\\Actions\\DummyClassHelpers;" in source
        assert "class ShowPost extends BaseAction" in source

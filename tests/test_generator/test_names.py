"""Tests for actiongen.generator.names -- names, namespaces and file paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from actiongen.exceptions import InvalidNameError, InvalidNamespaceError
from actiongen.generator.actions import ActionNameSet, collect_action_names
from actiongen.generator.names import (
    build_class_specs,
    class_path,
    default_namespace,
    generate_class_names,
    join_namespace,
    resolve_final_namespace,
    studly,
    validate_name_argument,
    validate_namespace_option,
)
from actiongen.models import GeneratorConfig


# ------------------------------------------------------------------ #
# Validation
# ------------------------------------------------------------------ #


class TestValidateName:
    @pytest.mark.parametrize("name", ["Post", "post", "blog_post", "Post2"])
    def test_accepts_word_names(self, name: str) -> None:
        assert validate_name_argument(name) == name

    @pytest.mark.parametrize("name", ["", "Post!", "Blog/Post", "Blog\\Post", "my-post"])
    def test_rejects_non_word(self, name: str) -> None:
        with pytest.raises(InvalidNameError, match="Name can't contain any non-word characters."):
            validate_name_argument(name)


class TestValidateNamespace:
    def test_none_and_empty_are_absent(self) -> None:
        assert validate_namespace_option(None) is None
        assert validate_namespace_option("") is None

    def test_single_segment(self) -> None:
        assert validate_namespace_option("Post") == "Post"

    def test_slashes_normalized(self) -> None:
        assert validate_namespace_option("Admin/Posts") == "Admin\\Posts"

    def test_separator_runs_collapse(self) -> None:
        assert validate_namespace_option("Admin//\\Posts") == "Admin\\Posts"

    def test_absolute_kept(self) -> None:
        assert validate_namespace_option("\\App\\Foo\\Bar") == "\\App\\Foo\\Bar"

    def test_leading_slash_is_absolute(self) -> None:
        assert validate_namespace_option("/Domain/Reports") == "\\Domain\\Reports"

    def test_bare_separator_allowed(self) -> None:
        assert validate_namespace_option("\\") == "\\"

    @pytest.mark.parametrize(
        "bad",
        ["Foo/Bar$", "Foo\\", "Foo/", "Foo Bar", "Foo.Bar", "Foo\\-Bar"],
    )
    def test_rejects_malformed(self, bad: str) -> None:
        with pytest.raises(InvalidNamespaceError) as exc_info:
            validate_namespace_option(bad)
        assert str(exc_info.value) == f"[{bad}] is not a valid namespace."

    def test_long_malformed_input_fails_quickly(self) -> None:
        with pytest.raises(InvalidNamespaceError):
            validate_namespace_option("A\\" * 5000 + "$")


# ------------------------------------------------------------------ #
# Namespace resolution
# ------------------------------------------------------------------ #


class TestResolveFinalNamespace:
    DEFAULT = "App\\Http\\Actions"

    def test_absent_returns_default(self) -> None:
        assert resolve_final_namespace(self.DEFAULT, None) == self.DEFAULT

    def test_relative_appended(self) -> None:
        assert resolve_final_namespace(self.DEFAULT, "Post") == "App\\Http\\Actions\\Post"

    def test_relative_nested(self) -> None:
        assert (
            resolve_final_namespace(self.DEFAULT, "Admin\\Post")
            == "App\\Http\\Actions\\Admin\\Post"
        )

    def test_absolute_ignores_default(self) -> None:
        assert resolve_final_namespace(self.DEFAULT, "\\App\\Foo\\Bar") == "App\\Foo\\Bar"

    def test_bare_separator_is_global(self) -> None:
        assert resolve_final_namespace(self.DEFAULT, "\\") == ""


class TestDefaultNamespace:
    def test_action_default(self, generator_config: GeneratorConfig) -> None:
        assert default_namespace(generator_config, "action") == "App\\Http\\Actions"

    def test_class_default(self, generator_config: GeneratorConfig) -> None:
        assert default_namespace(generator_config, "class") == "App\\Actions"

    def test_custom_root(self) -> None:
        config = GeneratorConfig(root_namespace="Acme\\", action_namespace="Handlers")
        assert default_namespace(config, "action") == "Acme\\Handlers"


class TestJoinNamespace:
    def test_skips_empty_parts(self) -> None:
        assert join_namespace("", "App\\", "Http") == "App\\Http"

    def test_all_empty(self) -> None:
        assert join_namespace("", "") == ""


# ------------------------------------------------------------------ #
# Class names
# ------------------------------------------------------------------ #


class TestGenerateClassNames:
    def test_empty_set_yields_bare_name(self) -> None:
        assert generate_class_names(ActionNameSet(), "post") == ["Post"]

    def test_listed_order(self) -> None:
        names = collect_action_names(actions="show,destroy,approve")
        assert generate_class_names(names, "Post") == ["ShowPost", "DestroyPost", "ApprovePost"]

    def test_resource_except(self) -> None:
        names = collect_action_names(resource=True, except_="index,show,edit")
        assert generate_class_names(names, "Post") == [
            "CreatePost",
            "StorePost",
            "UpdatePost",
            "DestroyPost",
        ]

    def test_snake_case_token_and_name(self) -> None:
        names = collect_action_names(actions="approveAll")
        assert generate_class_names(names, "blog_post") == ["ApproveAllBlogPost"]

    def test_underscore_runs_collapse(self) -> None:
        names = collect_action_names(actions="foo__bar")
        assert generate_class_names(names, "blog__post") == ["FooBarBlogPost"]

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("post", "Post"),
            ("blog_post", "BlogPost"),
            ("foo__bar", "FooBar"),
            ("_post_", "Post"),
            ("fooBar", "FooBar"),
        ],
    )
    def test_studly(self, value: str, expected: str) -> None:
        assert studly(value) == expected

    @pytest.mark.parametrize(
        "actions, except_, expected",
        [
            ("a,b,c", None, 3),
            ("a,b,a", None, 2),
            ("a,b", "a,b", 1),
            ("a,b,c", "b", 2),
        ],
    )
    def test_length_matches_distinct_tokens(
        self, actions: str, except_: str | None, expected: int
    ) -> None:
        names = collect_action_names(actions=actions, except_=except_)
        assert len(generate_class_names(names, "Post")) == expected


# ------------------------------------------------------------------ #
# Paths and specs
# ------------------------------------------------------------------ #


class TestClassPath:
    def test_root_namespace_maps_to_app_path(self, generator_config: GeneratorConfig) -> None:
        path = class_path("App\\Http\\Actions\\ShowPost", Path("/srv/blog"), generator_config)
        assert path == Path("/srv/blog/app/Http/Actions/ShowPost.php")

    def test_other_namespace_relative_to_project(self, generator_config: GeneratorConfig) -> None:
        path = class_path("Domain\\Reports\\Build", Path("/srv/blog"), generator_config)
        assert path == Path("/srv/blog/Domain/Reports/Build.php")

    def test_global_namespace(self, generator_config: GeneratorConfig) -> None:
        assert class_path("ShowPost", Path("/srv"), generator_config) == Path("/srv/ShowPost.php")

    def test_custom_layout(self) -> None:
        config = GeneratorConfig(root_namespace="Acme\\", app_path="src")
        path = class_path("Acme\\Handlers\\ShowPost", Path("/p"), config)
        assert path == Path("/p/src/Handlers/ShowPost.php")

    def test_prefix_must_match_whole_segment(self, generator_config: GeneratorConfig) -> None:
        path = class_path("Application\\ShowPost", Path("/p"), generator_config)
        assert path == Path("/p/Application/ShowPost.php")


class TestBuildClassSpecs:
    def test_specs_line_up_with_tokens(self, generator_config: GeneratorConfig) -> None:
        names = collect_action_names(actions="show,store")
        specs = build_class_specs(
            names, "post", "App\\Http\\Actions", Path("/p"), generator_config
        )

        assert [s.action_token for s in specs] == ["show", "store"]
        assert [s.class_name for s in specs] == ["ShowPost", "StorePost"]
        assert specs[0].fully_qualified_name == "App\\Http\\Actions\\ShowPost"
        assert specs[0].base_name == "Post"
        assert specs[1].path == Path("/p/app/Http/Actions/StorePost.php")

    def test_bare_spec_has_no_token(self, generator_config: GeneratorConfig) -> None:
        specs = build_class_specs(
            ActionNameSet(), "Post", "App\\Actions", Path("/p"), generator_config
        )
        assert len(specs) == 1
        assert specs[0].action_token is None
        assert specs[0].fully_qualified_name == "App\\Actions\\Post"

    def test_global_namespace_spec(self, generator_config: GeneratorConfig) -> None:
        specs = build_class_specs(ActionNameSet(), "Post", "", Path("/p"), generator_config)
        assert specs[0].fully_qualified_name == "Post"
        assert specs[0].namespace == ""

    def test_distinct_paths(self, generator_config: GeneratorConfig) -> None:
        names = collect_action_names(resource=True)
        specs = build_class_specs(
            names, "Post", "App\\Http\\Actions", Path("/p"), generator_config
        )
        assert len({s.path for s in specs}) == len(specs)

"""Canonical Pydantic models shared across all actiongen modules.

This is the single source of truth for data shapes in the project. The
models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config
directory or in a project-local ``actiongen.json``:
    :class:`GeneratorConfig`, :class:`OutputConfig`, and
    :class:`GlobalConfig`.

**Pipeline models** -- produced by the generator and consumed by the
command shell and output layer:
    :class:`GeneratedClassSpec`, :class:`RouteSuggestion`,
    :class:`TargetStatus`, and :class:`GenerationResult`.

All models use Pydantic v2. Pipeline models are frozen: once computed for
an invocation they are never mutated.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Configuration ---


class GeneratorConfig(BaseModel):
    """Settings describing the target Laravel project layout.

    The defaults match a stock Laravel application: classes under the
    ``App\\`` namespace live in ``app/``, actions are generated into
    ``App\\Http\\Actions`` and plain classes into ``App\\Actions``.

    Example::

        GeneratorConfig(
            root_namespace="Acme\\\\",
            action_namespace="Http\\\\Handlers",
        )
    """

    root_namespace: str = Field(
        default="App\\", description="PSR-4 namespace mapped to app_path"
    )
    app_path: str = Field(
        default="app", description="Directory of the root namespace, relative to the project"
    )
    action_namespace: str = Field(
        default="Http\\Actions",
        description="Default namespace for make:action, relative to root_namespace",
    )
    class_namespace: str = Field(
        default="Actions",
        description="Default namespace for make:class, relative to root_namespace",
    )
    base_action: str = Field(
        default="Sarfraznawaz2005\\Actions\\Action",
        description="Fully-qualified base class imported by generated actions",
    )
    stubs_path: Optional[str] = Field(
        default=None,
        description="Project directory holding custom action.stub / class.stub overrides",
    )
    print_routes: bool = Field(
        default=True, description="Print suggested routes after make:action"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/actiongen/config.json``.

    Loaded and saved by :func:`~actiongen.config.load_global_config` and
    :func:`~actiongen.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by ``composer.json``, project
    config, environment variables, or CLI flags. See
    :func:`~actiongen.config.resolve_config` for the full precedence chain.
    """

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Pipeline ---


class GeneratedClassSpec(BaseModel):
    """One class the generator is about to emit.

    ``fully_qualified_name`` is ``namespace + "\\\\" + class_name`` (or just
    ``class_name`` in the global namespace), and ``class_name`` is the
    PascalCased action token followed by the PascalCased base name.
    """

    model_config = ConfigDict(frozen=True)

    action_token: Optional[str] = None
    base_name: str
    namespace: str
    class_name: str
    fully_qualified_name: str
    path: Path


class RouteSuggestion(BaseModel):
    """A suggested Laravel route registration for one generated action."""

    model_config = ConfigDict(frozen=True)

    http_verb: str
    route_path: str
    target_class: str
    route_name: str


class TargetStatus(str, enum.Enum):
    """Outcome of processing a single :class:`GeneratedClassSpec`."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    PLANNED = "planned"


class GenerationResult(BaseModel):
    """The outcome for one target, collected by the command shell."""

    spec: GeneratedClassSpec
    status: TargetStatus

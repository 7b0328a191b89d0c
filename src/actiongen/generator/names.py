"""Name and namespace resolution for generated classes.

Turns the raw ``NAME`` argument and ``--namespace`` option into the final
list of :class:`~actiongen.models.GeneratedClassSpec` targets:

1. :func:`validate_name_argument` and :func:`validate_namespace_option`
   reject malformed input before anything touches the filesystem.
2. :func:`resolve_final_namespace` combines the default namespace with the
   option. A leading ``\\`` makes the option absolute.
3. :func:`generate_class_names` prefixes the PascalCased name with each
   action token.
4. :func:`class_path` maps a fully-qualified name onto a file under the
   Laravel project, the same way Laravel's own generators do.

Namespaces use PHP's ``\\`` separator throughout; ``/`` is accepted on
input and normalized away.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

import inflection

from actiongen.exceptions import InvalidNameError, InvalidNamespaceError
from actiongen.generator.actions import ActionNameSet, is_word
from actiongen.models import GeneratedClassSpec, GeneratorConfig

NAMESPACE_SEPARATOR = "\\"

_SEPARATOR_RUN_RE = re.compile(r"[/\\]+")
_NAMESPACE_RE = re.compile(r"\\|\\?\w+(?:\\\w+)*", re.ASCII)


def validate_name_argument(name: str) -> str:
    """Return *name* unchanged if it consists solely of word characters.

    Raises:
        InvalidNameError: If *name* is empty or has non-word characters.
    """
    if not is_word(name):
        raise InvalidNameError("Name can't contain any non-word characters.")
    return name


def validate_namespace_option(namespace: Optional[str]) -> Optional[str]:
    """Validate and normalize a ``--namespace`` value.

    Runs of ``/`` and ``\\`` collapse into a single ``\\``. The result must
    be a bare ``\\`` or an optionally-rooted path of word segments.

    Returns:
        The normalized namespace, or ``None`` if *namespace* is empty.

    Raises:
        InvalidNamespaceError: If the normalized value is malformed, e.g.
            ``Foo/Bar$`` or ``Foo\\``.

    Example::

        >>> validate_namespace_option("Admin//Posts")
        'Admin\\\\Posts'
    """
    if not namespace:
        return None

    normalized = _SEPARATOR_RUN_RE.sub(r"\\", namespace)
    if _NAMESPACE_RE.fullmatch(normalized) is None:
        raise InvalidNamespaceError(f"[{namespace}] is not a valid namespace.")
    return normalized


def join_namespace(*parts: str) -> str:
    """Join namespace fragments, ignoring empty ones and stray separators."""
    segments = [p.strip("\\/") for p in parts]
    return NAMESPACE_SEPARATOR.join(s for s in segments if s)


def default_namespace(config: GeneratorConfig, kind: str) -> str:
    """Return the default namespace for *kind* (``"action"`` or ``"class"``)."""
    sub = config.action_namespace if kind == "action" else config.class_namespace
    return join_namespace(config.root_namespace, sub)


def resolve_final_namespace(default: str, namespace_option: Optional[str]) -> str:
    """Combine the default namespace with a validated ``--namespace`` value.

    * No option -- *default*.
    * Absolute option (leading ``\\``) -- the option alone, without the
      leading separator. A bare ``\\`` is the global namespace (``""``).
    * Relative option -- appended to *default*.

    Example::

        >>> resolve_final_namespace("App\\\\Http\\\\Actions", "Post")
        'App\\\\Http\\\\Actions\\\\Post'
        >>> resolve_final_namespace("App\\\\Http\\\\Actions", "\\\\App\\\\Foo")
        'App\\\\Foo'
    """
    if namespace_option is None:
        return default
    if namespace_option.startswith(NAMESPACE_SEPARATOR):
        return namespace_option.lstrip(NAMESPACE_SEPARATOR)
    return join_namespace(default, namespace_option)


def studly(value: str) -> str:
    """PascalCase *value*, treating any run of underscores as one word break.

    Example::

        >>> studly("foo__bar")
        'FooBar'
    """
    words = [word for word in value.split("_") if word]
    if not words:
        return value
    return "".join(inflection.camelize(word) for word in words)


def generate_class_names(names: ActionNameSet, name: str) -> list[str]:
    """Return the ordered class names for *name* and the collected tokens.

    Example::

        >>> s = ActionNameSet()
        >>> for a in ("show", "destroy"):
        ...     s.add_if_not_exists(a)
        >>> generate_class_names(s, "post")
        ['ShowPost', 'DestroyPost']
    """
    base = studly(name)
    if names.is_empty():
        return [base]
    return [studly(action) + base for action in names.get()]


def qualify(namespace: str, class_name: str) -> str:
    """Return the fully-qualified name of *class_name* within *namespace*."""
    return join_namespace(namespace, class_name)


def class_path(fully_qualified_name: str, project_root: Path, config: GeneratorConfig) -> Path:
    """Map a fully-qualified class name to its PHP file in the project.

    Names under ``config.root_namespace`` live below ``config.app_path``;
    anything else is laid out relative to the project root.

    Example::

        >>> class_path("App\\\\Http\\\\Actions\\\\ShowPost", Path("/srv"), GeneratorConfig())
        PosixPath('/srv/app/Http/Actions/ShowPost.php')
    """
    name = fully_qualified_name.lstrip(NAMESPACE_SEPARATOR)
    root_prefix = join_namespace(config.root_namespace) + NAMESPACE_SEPARATOR
    if name.startswith(root_prefix):
        base = project_root / config.app_path
        name = name[len(root_prefix):]
    else:
        base = project_root
    return base.joinpath(*name.split(NAMESPACE_SEPARATOR)).with_suffix(".php")


def build_class_specs(
    names: ActionNameSet,
    name: str,
    namespace: str,
    project_root: Path,
    config: GeneratorConfig,
) -> list[GeneratedClassSpec]:
    """Compute every :class:`GeneratedClassSpec` for one invocation.

    Args:
        names: Collected action tokens (empty for a single bare class).
        name: The validated ``NAME`` argument.
        namespace: The final namespace from :func:`resolve_final_namespace`.
        project_root: Root directory of the Laravel project.
        config: Project layout settings.

    Returns:
        One spec per class, in the same order as
        :func:`generate_class_names`.
    """
    tokens: list[Optional[str]] = list(names.get()) or [None]
    specs: list[GeneratedClassSpec] = []
    for token, class_name in zip(tokens, generate_class_names(names, name)):
        fqn = qualify(namespace, class_name)
        specs.append(
            GeneratedClassSpec(
                action_token=token,
                base_name=studly(name),
                namespace=namespace,
                class_name=class_name,
                fully_qualified_name=fqn,
                path=class_path(fqn, project_root, config),
            )
        )
    return specs

"""Stub loading and placeholder substitution.

Generated PHP files are produced from two stub templates, ``action.stub``
and ``class.stub``. Rendering is a single-pass literal substitution over a fixed
placeholder vocabulary:

* ``DummyNamespace`` -- namespace portion of the fully-qualified name.
* ``DummyBaseActionNamespace`` -- fully-qualified base action class
  (action stubs only).
* ``DummyClass`` -- the short class name.

The bundled stubs live in ``generator/stubs/`` alongside this module. A
Laravel project can override either file by placing its own copy in the
directory named by ``stubs_path`` in its configuration.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from actiongen.exceptions import StubNotFoundError

STUBS_DIR = Path(__file__).parent / "stubs"
"""Path to the bundled stub directory (``generator/stubs/``)."""

STUB_FILES: dict[str, str] = {
    "action": "action.stub",
    "class": "class.stub",
}

PLACEHOLDER_NAMESPACE = "DummyNamespace"
PLACEHOLDER_BASE_ACTION = "DummyBaseActionNamespace"
PLACEHOLDER_CLASS = "DummyClass"

_NAMESPACE_LINE_RE = re.compile(rf"^namespace {PLACEHOLDER_NAMESPACE};\n\n?", re.MULTILINE)
_PLACEHOLDER_RE = re.compile(
    "|".join(map(re.escape, (PLACEHOLDER_BASE_ACTION, PLACEHOLDER_NAMESPACE, PLACEHOLDER_CLASS)))
)


def resolve_stub_path(kind: str, stubs_dir: Optional[Path] = None) -> Path:
    """Return the stub file for *kind*, preferring a project override.

    Args:
        kind: ``"action"`` or ``"class"``.
        stubs_dir: Optional directory of custom stubs. A file there wins
            over the bundled stub of the same name.

    Raises:
        StubNotFoundError: If *kind* is unknown or no stub file exists.
    """
    filename = STUB_FILES.get(kind)
    if filename is None:
        raise StubNotFoundError(f"Unknown stub type: {kind}")

    if stubs_dir is not None:
        custom = stubs_dir / filename
        if custom.is_file():
            return custom

    bundled = STUBS_DIR / filename
    if not bundled.is_file():
        raise StubNotFoundError(f"Stub not found: {bundled}")
    return bundled


def load_stub(kind: str, stubs_dir: Optional[Path] = None) -> str:
    """Read the stub template for *kind*. See :func:`resolve_stub_path`."""
    path = resolve_stub_path(kind, stubs_dir)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StubNotFoundError(f"Cannot read stub {path}: {exc}") from exc


def split_class_name(fully_qualified_name: str) -> tuple[str, str]:
    """Split a fully-qualified name into ``(namespace, short_class_name)``.

    >>> split_class_name("App\\\\Http\\\\Actions\\\\ShowPost")
    ('App\\\\Http\\\\Actions', 'ShowPost')
    >>> split_class_name("ShowPost")
    ('', 'ShowPost')
    """
    namespace, _, _ = fully_qualified_name.rpartition("\\")
    namespace = namespace.strip("\\")
    class_name = fully_qualified_name
    if namespace:
        class_name = class_name.replace(namespace + "\\", "", 1)
    return namespace, class_name.strip("\\/")


def render_class(
    stub: str,
    fully_qualified_name: str,
    base_action: Optional[str] = None,
) -> str:
    """Fill *stub* for the class *fully_qualified_name*.

    Pure function: the same inputs always produce the same text. A class
    in the global namespace gets no ``namespace`` declaration.

    Args:
        stub: Template text containing the ``Dummy*`` placeholders.
        fully_qualified_name: Target class, e.g.
            ``App\\Http\\Actions\\ShowPost``.
        base_action: Fully-qualified base action class. Only action stubs
            reference it; ``None`` leaves the placeholder untouched.

    Returns:
        The rendered PHP source.
    """
    namespace, class_name = split_class_name(fully_qualified_name)

    if not namespace:
        stub = _NAMESPACE_LINE_RE.sub("", stub)

    values = {PLACEHOLDER_NAMESPACE: namespace, PLACEHOLDER_CLASS: class_name}
    if base_action is not None:
        values[PLACEHOLDER_BASE_ACTION] = base_action.strip("\\")

    # One pass, so placeholder text inside a substituted value stays literal.
    return _PLACEHOLDER_RE.sub(lambda m: values.get(m.group(0), m.group(0)), stub)

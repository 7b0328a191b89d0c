"""Writing rendered classes to disk.

Each target is handled independently: an existing file is left alone
unless ``force`` is set, in which case it is overwritten. Parent
directories are created on demand. There is no locking; two concurrent
runs against the same file race and the last writer wins.
"""

from __future__ import annotations

from actiongen.config import atomic_write
from actiongen.exceptions import TargetAlreadyExistsError
from actiongen.models import GeneratedClassSpec, TargetStatus


def write_target(
    spec: GeneratedClassSpec,
    content: str,
    kind: str,
    force: bool = False,
    dry_run: bool = False,
) -> TargetStatus:
    """Write *content* to ``spec.path``.

    Args:
        spec: The target being generated.
        content: Rendered PHP source.
        kind: ``"action"`` or ``"class"``, used in the conflict message.
        force: Overwrite an existing file instead of refusing.
        dry_run: Report what would happen without touching the disk.

    Returns:
        :attr:`TargetStatus.CREATED` or :attr:`TargetStatus.OVERWRITTEN`,
        or :attr:`TargetStatus.PLANNED` in dry-run mode.

    Raises:
        TargetAlreadyExistsError: If the file exists and *force* is off.
    """
    exists = spec.path.exists()
    if exists and not force:
        raise TargetAlreadyExistsError(spec.class_name, kind, str(spec.path))

    if dry_run:
        return TargetStatus.PLANNED

    atomic_write(spec.path, content)
    return TargetStatus.OVERWRITTEN if exists else TargetStatus.CREATED

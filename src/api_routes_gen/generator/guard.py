"""Regeneration guard and restore for generated test files.

Whether an existing test file holds hand-written work is judged by a plain
length difference against the freshly generated body. Equal-length edits go
unnoticed; that is a known limitation of the heuristic.
"""

from enum import Enum
from pathlib import Path

from api_routes_gen.config import BACKUP_SUFFIX, DIVERGENCE_THRESHOLD
from api_routes_gen.log import log


class ReconcileAction(str, Enum):
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    BACKED_UP = "backed-up-and-overwritten"


def divergence(existing: str, new: str) -> int:
    return abs(len(existing) - len(new))


def needs_backup(existing: str, new: str, threshold: int = DIVERGENCE_THRESHOLD) -> bool:
    return divergence(existing, new) >= threshold


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def reconcile(path: Path, content: str) -> ReconcileAction:
    """Write ``content`` to ``path``, backing up a diverged previous file first."""
    if not path.exists():
        path.write_text(content, encoding="utf-8")
        return ReconcileAction.CREATED

    existing = path.read_text(encoding="utf-8", errors="replace")
    if not needs_backup(existing, content):
        path.write_text(content, encoding="utf-8")
        return ReconcileAction.OVERWRITTEN

    bak = backup_path(path)
    log(
        f"Moving old test file to '{bak}' to preserve tests that were already implemented. "
        "\nPlease be sure to check this file and move all implemented tests back into "
        "the newly generated test!",
        "warning",
    )
    try:
        path.replace(bak)
    except OSError as e:
        log(f"Could not move '{path}' to '{bak}': {e}", "error")
    path.write_text(content, encoding="utf-8")
    return ReconcileAction.BACKED_UP


def restore(version_dir: Path, version: str = "") -> int:
    """Move every backup file in ``version_dir`` back over its original."""
    restored = 0
    for bak in sorted(version_dir.glob("*" + BACKUP_SUFFIX)):
        if not bak.is_file():
            continue
        bak.replace(bak.with_name(bak.name.removesuffix(BACKUP_SUFFIX)))
        log(f"Restored '{bak.name}' ({version or version_dir.name})")
        restored += 1
    return restored

"""Cleanup of the files a pod installation does not need.

Planning and removal are separate: ``plan_cleanup`` only reads the tree, so a
plan can be inspected (or used as a dry run) before ``remove_paths`` acts on it.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_used(candidate: str, used_paths: Iterable[str]) -> bool:
    # Plain substring containment in both directions: a directory holding a used
    # file is kept, and so is anything inside a used directory.
    return any(path in candidate or candidate in path for path in used_paths)


def plan_cleanup(root: Path, used_paths: Iterable[str]) -> list[str]:
    """
    Compute the paths under root that no specification uses.

    Every entry under root is a candidate, hidden ones included. A candidate is
    kept if any used path contains it or is contained by it as a string.

    Args:
        root: Root directory of the pod
        used_paths: Absolute paths used by the specifications

    Returns:
        Sorted absolute paths that can be deleted (empty if root doesn't exist)

    Example:
        >>> plan_cleanup(Path("/Pods/Foo"), {"/Pods/Foo/Foo/Foo.h"})
        ['/Pods/Foo/Foo/unused.txt']
    """
    root = Path(root)
    if not root.is_dir():
        return []

    used = list(used_paths)
    candidates = sorted(str(path) for path in root.rglob("*"))

    plan = []
    for candidate in candidates:
        if Path(candidate).name in (".", ".."):
            continue
        if _is_used(candidate, used):
            continue
        plan.append(candidate)

    logger.debug(f"Cleanup plan for {root}: {len(plan)} of {len(candidates)} entries")
    return plan


def remove_paths(paths: Iterable[str]) -> int:
    """
    Delete planned paths, directories recursively.

    Paths already gone because an ancestor was removed earlier in the same
    plan are skipped. Any other failure propagates and stops the removal.

    Args:
        paths: Paths from plan_cleanup

    Returns:
        Number of paths actually removed
    """
    removed = 0
    for raw in paths:
        path = Path(raw)
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            logger.debug(f"Already removed: {path}")
            continue
        logger.debug(f"Removed {path}")
        removed += 1
    return removed

"""Header mapping - where each header of a pod is exposed in the sandbox."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _absolute(path: Path, install_root: Path) -> Path:
    return path if path.is_absolute() else install_root / path


def map_headers(
    namespace_dir: Path,
    header_dir: str | None,
    header_mappings_dir: str | Path | None,
    install_root: Path,
    headers: Iterable[Path],
) -> dict[Path, list[Path]]:
    """
    Group headers by the sandbox sub-directory they should be linked into.

    The destination root is ``namespace_dir``, or ``namespace_dir / header_dir``
    when the consumer declares a header dir. With a header mappings dir, a
    header keeps its folder structure relative to that dir beneath the
    destination root. Headers outside the mappings dir go to the destination root.

    Args:
        namespace_dir: Namespacing directory, usually the pod name
        header_dir: Consumer's header_dir, if any
        header_mappings_dir: Consumer's header_mappings_dir, relative to install_root or absolute
        install_root: Root of the installed pod; relative headers are resolved against it
        headers: Header files to map

    Returns:
        Mapping of destination directory to headers, in first-seen order.
        Every header appears exactly once and no group is empty.

    Example:
        >>> map_headers(Path("Foo"), None, "Foo/include", root, [Path("Foo/include/sub/Foo.h")])
        {PosixPath('Foo/sub'): [PosixPath('Foo/include/sub/Foo.h')]}
    """
    install_root = Path(install_root)
    base_dir = Path(namespace_dir)
    if header_dir:
        base_dir = base_dir / header_dir

    mappings_root = None
    if header_mappings_dir:
        mappings_root = _absolute(Path(header_mappings_dir), install_root)

    mappings: dict[Path, list[Path]] = {}
    for header in headers:
        header = Path(header)
        absolute_header = _absolute(header, install_root)
        sub_dir = base_dir
        if mappings_root is not None:
            try:
                relative = absolute_header.relative_to(mappings_root)
            except ValueError:
                logger.debug(f"{header} is outside header mappings dir {header_mappings_dir}")
            else:
                sub_dir = base_dir / relative.parent
        mappings.setdefault(sub_dir, []).append(header)
    return mappings

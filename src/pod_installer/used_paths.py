"""Collection of the paths a pod's specifications actually use."""

from collections.abc import Iterable

from .file_accessor import FileAccessor


def collect_used_paths(file_accessors: Iterable[FileAccessor]) -> set[str]:
    """
    Union every classified path of every accessor.

    Headers are not collected separately: they are part of the source files.
    Missing single-file roles (prefix header, readme, license) contribute nothing.

    Args:
        file_accessors: Accessors for all the specs in scope, on all platforms

    Returns:
        Absolute path strings of every used file or directory
    """
    used: set[str] = set()
    for accessor in file_accessors:
        for paths in (accessor.source_files, accessor.resources, accessor.preserve_paths):
            used.update(str(path) for path in paths)
        for path in (accessor.prefix_header, accessor.readme, accessor.license):
            if path is not None:
                used.add(str(path))
    return used

"""File accessor - classification of a pod's files for one spec on one platform.

The classification is computed once, when the accessor is built, from the
path list of the pod root. Build accessors after the source is in place.
"""

from pathlib import Path

from .path_list import PathList
from .specification import SpecConsumer

HEADER_EXTENSIONS = ("h", "hpp", "hh", "hxx")
SOURCE_EXTENSIONS = HEADER_EXTENSIONS + ("c", "cc", "cpp", "cxx", "m", "mm", "swift", "s", "S")

_SOURCE_DIR_PATTERN = "*.{" + ",".join(SOURCE_EXTENSIONS) + "}"
_README_PATTERN = "readme*"
_LICENSE_PATTERN = "licen[cs]e*"


class FileAccessor:
    """
    Files of a pod classified by role for a spec consumer.

    Roles overlap: headers are a subset of source files and public headers a
    subset of the files matched under the root. Every path is absolute.

    Args:
        path_list: Path list of the pod root
        spec_consumer: Specification resolved for a platform

    Example:
        >>> accessor = FileAccessor(PathList(root), spec.consumer("ios"))
        >>> accessor.headers
        [PosixPath('.../Foo/Foo.h')]
    """

    def __init__(self, path_list: PathList, spec_consumer: SpecConsumer):
        self.path_list = path_list
        self.spec_consumer = spec_consumer

        consumer = spec_consumer
        excludes = consumer.exclude_files

        self.source_files: list[Path] = path_list.glob(
            consumer.source_files, dir_pattern=_SOURCE_DIR_PATTERN, exclude_patterns=excludes
        )
        self.headers: list[Path] = [f for f in self.source_files if f.suffix.lstrip(".").lower() in HEADER_EXTENSIONS]

        if consumer.public_header_files:
            self.public_headers: list[Path] = path_list.glob(
                consumer.public_header_files,
                dir_pattern="*.{" + ",".join(HEADER_EXTENSIONS) + "}",
                exclude_patterns=excludes,
            )
        else:
            self.public_headers = list(self.headers)

        self.resources: list[Path] = path_list.glob(consumer.resources, exclude_patterns=excludes)
        self.preserve_paths: list[Path] = path_list.glob(consumer.preserve_paths)

        self.prefix_header: Path | None = None
        if consumer.prefix_header_file:
            self.prefix_header = path_list.root / consumer.prefix_header_file

        self.readme: Path | None = self._first_root_file(_README_PATTERN)

        self.license: Path | None
        if consumer.license_file:
            self.license = path_list.root / consumer.license_file
        else:
            self.license = self._first_root_file(_LICENSE_PATTERN)

    @property
    def root(self) -> Path:
        return self.path_list.root

    def _first_root_file(self, pattern: str) -> Path | None:
        matches = self.path_list.glob([pattern], include_dirs=False)
        return matches[0] if matches else None

    def __repr__(self) -> str:
        return f"<FileAccessor {self.spec_consumer.spec_name} ({self.spec_consumer.platform})>"

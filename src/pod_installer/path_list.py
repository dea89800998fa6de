"""Path list - enumeration and glob matching over a pod's root.

The tree is read once and matched in memory. Matching is case-insensitive and
includes hidden entries, so ``readme*`` finds ``README.md`` and ``**/*`` finds
``.gitignore``.

Supported pattern syntax:
- ``*`` and ``?`` within a single path component
- ``**`` across any number of directories (``**/`` may match none)
- ``{a,b}`` alternatives
- ``[...]`` character classes
"""

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)


def _translate(pattern: str) -> str:
    """Translate a glob pattern into a regular expression source."""
    out: list[str] = []
    i = 0
    n = len(pattern)
    depth = 0
    while i < n:
        c = pattern[i]
        if c == "*":
            if pattern.startswith("**/", i):
                out.append("(?:.*/)?")
                i += 3
                continue
            if pattern.startswith("**", i):
                out.append(".*")
                i += 2
                continue
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "{":
            out.append("(?:")
            depth += 1
        elif c == "}" and depth:
            out.append(")")
            depth -= 1
        elif c == "," and depth:
            out.append("|")
        elif c == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(c))
            else:
                body = pattern[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append(f"[{body}]")
                i = end
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern for case-insensitive full matching."""
    return re.compile(_translate(pattern.strip("/")), re.IGNORECASE)


class PathList:
    """
    Cached listing of every file and directory under a pod root.

    Args:
        root: Root directory of the pod

    Example:
        >>> path_list = PathList(Path("Pods/Foo"))
        >>> path_list.glob(["Classes/**/*.{h,m}"])
        [PosixPath('Pods/Foo/Classes/Foo.h'), PosixPath('Pods/Foo/Classes/Foo.m')]
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self.files: list[str] = []
        self.dirs: list[str] = []
        self.read_file_system()

    def read_file_system(self) -> None:
        """(Re)read the tree under root. Relative paths use "/" separators."""
        files: list[str] = []
        dirs: list[str] = []
        if self.root.is_dir():
            for dirpath, dirnames, filenames in os.walk(self.root):
                rel_dir = Path(dirpath).relative_to(self.root).as_posix()
                prefix = "" if rel_dir == "." else f"{rel_dir}/"
                dirs.extend(prefix + name for name in dirnames)
                files.extend(prefix + name for name in filenames)
        self.files = sorted(files)
        self.dirs = sorted(dirs)
        logger.debug(f"Read {len(self.files)} files and {len(self.dirs)} directories under {self.root}")

    def relative_glob(
        self,
        patterns: list[str],
        dir_pattern: str | None = None,
        exclude_patterns: list[str] | None = None,
        include_dirs: bool = True,
    ) -> list[str]:
        """
        Match patterns against the cached tree.

        Args:
            patterns: Glob patterns relative to root
            dir_pattern: If given, a matched directory is replaced by the files
                under it matching this pattern (e.g. "*.{h,m}")
            exclude_patterns: Patterns whose matches are removed from the result
            include_dirs: Whether directories may appear in the result

        Returns:
            Sorted, deduplicated relative paths
        """
        results: set[str] = set()
        content_regex = compile_pattern(f"**/{dir_pattern}") if dir_pattern is not None else None
        for pattern in patterns:
            regex = compile_pattern(pattern)
            results.update(f for f in self.files if regex.fullmatch(f))
            for d in self.dirs:
                if not regex.fullmatch(d):
                    continue
                if content_regex is not None:
                    prefix = f"{d}/"
                    results.update(
                        f for f in self.files if f.startswith(prefix) and content_regex.fullmatch(f[len(prefix) :])
                    )
                elif include_dirs:
                    results.add(d)

        if exclude_patterns:
            # An excluded directory takes its whole content with it
            excluded = set(self.relative_glob(exclude_patterns))
            excluded.update(self.relative_glob(exclude_patterns, dir_pattern="*"))
            results.difference_update(excluded)

        return sorted(results)

    def glob(
        self,
        patterns: list[str],
        dir_pattern: str | None = None,
        exclude_patterns: list[str] | None = None,
        include_dirs: bool = True,
    ) -> list[Path]:
        """Same as relative_glob but returns absolute paths under root."""
        return [
            self.root / rel
            for rel in self.relative_glob(
                patterns,
                dir_pattern=dir_pattern,
                exclude_patterns=exclude_patterns,
                include_dirs=include_dirs,
            )
        ]

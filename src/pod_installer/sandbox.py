"""Sandbox - the shared workspace for every pod of one installation.

The sandbox owns the pod directories and two header indexes: build headers
(visible while building the pods) and public headers (exported to the user's
targets). Both indexes are append-only.
"""

import logging
import os
import threading
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class HeadersStore:
    """
    Header index backed by a directory of symlinks.

    Args:
        root: Directory holding the links (e.g. Pods/Headers/Build)
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self._search_paths: list[Path] = []
        self._lock = threading.Lock()

    def add_search_path(self, path: Path) -> None:
        """Register a search path relative to the store root (kept once, in order)."""
        path = Path(path)
        with self._lock:
            if path not in self._search_paths:
                self._search_paths.append(path)
                logger.debug(f"Added header search path {self.root / path}")

    def search_paths(self) -> list[Path]:
        """Absolute header search paths, including the store root."""
        with self._lock:
            return [self.root] + [self.root / path for path in self._search_paths]

    def add_files(self, namespace: Path, files: Iterable[Path]) -> list[Path]:
        """
        Link files into ``root / namespace``.

        Links are relative so the sandbox can be moved. An existing link with
        the same name is replaced.

        Args:
            namespace: Destination directory relative to the store root
            files: Absolute paths of the files to expose

        Returns:
            Paths of the created links
        """
        destination = self.root / namespace
        links = []
        with self._lock:
            destination.mkdir(parents=True, exist_ok=True)
            for file in files:
                file = Path(file)
                link = destination / file.name
                if link.is_symlink() or link.exists():
                    link.unlink()
                link.symlink_to(os.path.relpath(file, destination))
                links.append(link)
        logger.debug(f"Linked {len(links)} headers into {destination}")
        return links


class Sandbox:
    """
    Workspace for pods (app injects the root).

    Args:
        root: Sandbox directory (e.g. ./Pods)
        predownloaded_pods: Names of pods already fetched during resolution

    Example:
        >>> sandbox = Sandbox(Path("Pods"), predownloaded_pods={"Foo"})
        >>> sandbox.pod_dir("Foo")
        PosixPath('Pods/Foo')
    """

    def __init__(self, root: Path, predownloaded_pods: Iterable[str] = ()):
        self.root = Path(root)
        self.predownloaded_pods = set(predownloaded_pods)
        self.build_headers = HeadersStore(self.root / "Headers" / "Build")
        self.public_headers = HeadersStore(self.root / "Headers" / "Public")

    def pod_dir(self, name: str) -> Path:
        """Directory holding the source of the pod with the given root name."""
        return self.root / name

"""Protocols for the collaborators of the pod source installer.

The installer doesn't know HOW to fetch a source or render documentation: apps
provide implementations and inject them through factories.
"""

from pathlib import Path
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    from .path_list import PathList
    from .sandbox import Sandbox
    from .specification import Specification


@runtime_checkable
class DownloaderProtocol(Protocol):
    """Protocol for source downloaders.

    Example implementations:
    - GitDownloader: git clone/checkout of a tag, commit or branch
    - HttpDownloader: archive download and extraction

    The installer sets the cache attributes before any download.
    """

    cache_root: Path | None
    max_cache_size: int | None
    aggressive_cache: bool

    async def download(self) -> None:
        """Fetch the source described by the specification into the target root."""
        ...

    async def download_head(self) -> None:
        """Fetch the latest revision of the source into the target root."""
        ...

    def checkout_options(self) -> dict[str, str]:
        """Options pinning the exact revision that was fetched (e.g. a commit)."""
        ...

    def options_specific(self) -> bool:
        """Whether the original source options already pin a single revision."""
        ...


class DownloaderFactory(Protocol):
    """Builds a downloader for a target root and source options."""

    def __call__(self, target_root: Path, source: dict[str, str]) -> DownloaderProtocol: ...


@runtime_checkable
class DocumentationGeneratorProtocol(Protocol):
    """Protocol for documentation generators."""

    def already_installed(self) -> bool:
        """Whether documentation for this pod version is already installed."""
        ...

    async def generate(self, install: bool) -> None:
        """Render documentation, and install it in the toolchain if requested."""
        ...


class DocumentationGeneratorFactory(Protocol):
    """Builds a documentation generator for a pod."""

    def __call__(
        self, sandbox: "Sandbox", root_spec: "Specification", path_list: "PathList"
    ) -> DocumentationGeneratorProtocol: ...

"""Installer configuration.

Apps build the configuration (from CLI flags, settings files, ...) and inject
it; the library reads no environment or files itself.
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import field_validator

CACHE_ROOT = Path("~/Library/Caches/CocoaPods")

# Maximum size of the download cache, in MB
MAX_CACHE_SIZE = 500


class InstallerConfig(BaseModel):
    """Options of a pod source installation (immutable)."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    # Remove the files no specification uses
    clean: bool = True
    generate_docs: bool = False
    # Install generated documentation in the toolchain
    install_docs: bool = False
    # Let the downloader reuse its cache without checking the remote
    aggressive_cache: bool = False
    # Path of a local checkout used instead of a download; never modified
    local_path: Path | None = None

    cache_root: Path = CACHE_ROOT
    max_cache_size: int = MAX_CACHE_SIZE

    @field_validator("cache_root")
    @classmethod
    def _expand_cache_root(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def local(self) -> bool:
        return self.local_path is not None

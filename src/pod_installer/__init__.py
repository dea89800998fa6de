"""pod-installer - Installs the source of a single pod into a sandbox.

Public API exports.

This is library mechanism: apps inject policy (sandbox location, downloaders,
documentation generators, lock path).
"""

from .cleanup import plan_cleanup
from .cleanup import remove_paths
from .config import CACHE_ROOT
from .config import MAX_CACHE_SIZE
from .config import InstallerConfig
from .exceptions import InstallOrderError
from .exceptions import PodError
from .exceptions import PodInstallError
from .file_accessor import FileAccessor
from .headers import map_headers
from .installer import InstallPhase
from .installer import PodSourceInstaller
from .lock import CheckoutLock
from .lock import CheckoutLockEntry
from .path_list import PathList
from .protocols import DocumentationGeneratorProtocol
from .protocols import DownloaderProtocol
from .sandbox import HeadersStore
from .sandbox import Sandbox
from .specification import FileAttributes
from .specification import SpecConsumer
from .specification import Specification
from .specification import Version
from .used_paths import collect_used_paths

__all__ = [
    # Specifications
    "Specification",
    "SpecConsumer",
    "FileAttributes",
    "Version",
    # Sandbox
    "Sandbox",
    "HeadersStore",
    # File classification
    "PathList",
    "FileAccessor",
    "collect_used_paths",
    # Cleanup
    "plan_cleanup",
    "remove_paths",
    # Headers
    "map_headers",
    # Installation
    "PodSourceInstaller",
    "InstallPhase",
    "InstallerConfig",
    "CACHE_ROOT",
    "MAX_CACHE_SIZE",
    "DownloaderProtocol",
    "DocumentationGeneratorProtocol",
    # Lock file
    "CheckoutLock",
    "CheckoutLockEntry",
    # Exceptions
    "PodError",
    "PodInstallError",
    "InstallOrderError",
]

__version__ = "0.1.0"

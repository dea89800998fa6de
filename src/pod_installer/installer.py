"""Pod source installation (protocol-based).

Installs the source of a single pod in the sandbox: fetch it, optionally
generate its documentation, remove the files no active specification uses,
and expose its headers to the other pods and to the user's targets.

The installer doesn't know HOW to fetch or document: apps inject factories for
the downloader and the documentation generator.
"""

import logging
import shutil
from enum import Enum
from pathlib import Path

from .cleanup import plan_cleanup
from .cleanup import remove_paths
from .config import InstallerConfig
from .exceptions import InstallOrderError
from .exceptions import PodInstallError
from .file_accessor import FileAccessor
from .headers import map_headers
from .lock import CheckoutLock
from .path_list import PathList
from .protocols import DocumentationGeneratorFactory
from .protocols import DocumentationGeneratorProtocol
from .protocols import DownloaderFactory
from .protocols import DownloaderProtocol
from .sandbox import Sandbox
from .specification import Specification
from .used_paths import collect_used_paths

logger = logging.getLogger(__name__)


class InstallPhase(Enum):
    """Steps of a pod source installation, in the only order they may run."""

    NOT_STARTED = "not_started"
    FETCHED = "fetched"
    DOCUMENTED = "documented"
    CLEANED = "cleaned"
    LINKED = "linked"


class PodSourceInstaller:
    """
    Installs the activated specifications of a single pod.

    All the specs of the pod, on every platform, must be passed together:
    cleanup keeps a file if any of them uses it.

    Args:
        sandbox: Sandbox receiving the pod and its headers
        specs_by_platform: Specifications to install, grouped by platform
        downloader_factory: Builds the downloader (needed unless the pod is
            predownloaded or local)
        docs_generator_factory: Builds the documentation generator (needed
            when documentation generation is enabled)
        config: Installation options
        lock: Optional lock recording specific sources

    Example:
        >>> installer = PodSourceInstaller(
        ...     sandbox=Sandbox(Path("Pods")),
        ...     specs_by_platform={"ios": [spec]},
        ...     downloader_factory=GitDownloader,
        ... )
        >>> await installer.install()
        >>> installer.specific_source
        {'git': 'https://github.com/org/Foo.git', 'commit': 'abc123'}
    """

    def __init__(
        self,
        sandbox: Sandbox,
        specs_by_platform: dict[str, list[Specification]],
        downloader_factory: DownloaderFactory | None = None,
        docs_generator_factory: DocumentationGeneratorFactory | None = None,
        config: InstallerConfig | None = None,
        lock: CheckoutLock | None = None,
    ):
        if not any(specs_by_platform.values()):
            raise PodInstallError("No specifications to install", context={"platforms": list(specs_by_platform)})

        self.sandbox = sandbox
        self.specs_by_platform = specs_by_platform
        self.downloader_factory = downloader_factory
        self.docs_generator_factory = docs_generator_factory
        self.config = config or InstallerConfig()
        self.lock = lock

        self.specific_source: dict[str, str] | None = None
        self.phase = InstallPhase.NOT_STARTED
        self.history: list[InstallPhase] = []

        self._downloader: DownloaderProtocol | None = None
        self._documentation_generator: DocumentationGeneratorProtocol | None = None
        self._path_list: PathList | None = None
        self._file_accessors: list[FileAccessor] | None = None

    # Installation

    async def install(self) -> list[InstallPhase]:
        """
        Run the installation steps in order.

        1. Fetch the source, unless predownloaded or local
        2. Generate the documentation, if enabled and not local
        3. Remove unused files, if enabled and not local
        4. Link the headers (always)

        Returns:
            The phases reached during this installation

        Raises:
            InstallOrderError: If documentation is requested after cleanup
            Exception: Downloader and filesystem failures, unchanged
        """
        logger.info(f"Installing {self.name} ({self.root_spec.version})")

        if not (self.predownloaded or self.local):
            await self.download_source()
        if self.config.generate_docs and not self.local:
            await self.generate_docs()
        if self.config.clean and not self.local:
            self.clean_installation()
        self.link_headers()

        return list(self.history)

    async def download_source(self) -> None:
        """
        Fetch the source of the pod into its root.

        Records in ``specific_source`` the options needed to fetch exactly
        the same revision again: always for a head version, otherwise only
        when the declared source doesn't already pin a revision.
        """
        logger.info(f"Downloading source of {self.name}")
        if self.root.exists():
            shutil.rmtree(self.root)

        downloader = self.downloader()
        if self.root_spec.version.head:
            await downloader.download_head()
            self.specific_source = downloader.checkout_options()
        else:
            await downloader.download()
            if not downloader.options_specific():
                self.specific_source = downloader.checkout_options()

        # The tree changed under any classification computed so far
        self._path_list = None
        self._file_accessors = None

        if self.specific_source is not None and self.lock is not None:
            self.lock.record(self.name, self.root_spec.source, self.specific_source)

        self._advance(InstallPhase.FETCHED)

    async def generate_docs(self) -> None:
        """
        Generate the documentation of the pod, unless already installed.

        Raises:
            InstallOrderError: If the pod has already been cleaned
        """
        if InstallPhase.CLEANED in self.history:
            raise InstallOrderError(
                "Attempt to generate the documentation from a cleaned Pod.",
                context={"pod": self.name, "root": str(self.root)},
            )

        generator = self.documentation_generator()
        if generator.already_installed():
            logger.info(f"Using existing documentation for {self.name}")
        else:
            logger.info(f"Installing documentation for {self.name}")
            await generator.generate(self.config.install_docs)

        self._advance(InstallPhase.DOCUMENTED)

    def plan_cleanup(self) -> list[str]:
        """Paths under the pod root that no specification uses (nothing is removed)."""
        return plan_cleanup(self.root, self.used_paths())

    def clean_installation(self) -> list[str]:
        """
        Remove every file not used by the specifications.

        Returns:
            The removed paths
        """
        logger.info(f"Cleaning {self.name}")
        paths = self.plan_cleanup()
        removed = remove_paths(paths)
        logger.debug(f"Removed {removed} paths from {self.root}")
        self._advance(InstallPhase.CLEANED)
        return paths

    def link_headers(self) -> None:
        """Add the pod's search path and headers to both sandbox header indexes."""
        headers_sandbox = Path(self.name)
        self.sandbox.build_headers.add_search_path(headers_sandbox)
        self.sandbox.public_headers.add_search_path(headers_sandbox)

        for accessor in self.file_accessors():
            consumer = accessor.spec_consumer
            build_mappings = map_headers(
                headers_sandbox, consumer.header_dir, consumer.header_mappings_dir, self.root, accessor.headers
            )
            for namespace, files in build_mappings.items():
                self.sandbox.build_headers.add_files(namespace, files)

            public_mappings = map_headers(
                headers_sandbox, consumer.header_dir, consumer.header_mappings_dir, self.root, accessor.public_headers
            )
            for namespace, files in public_mappings.items():
                self.sandbox.public_headers.add_files(namespace, files)

        self._advance(InstallPhase.LINKED)

    def _advance(self, phase: InstallPhase) -> None:
        self.phase = phase
        self.history.append(phase)
        logger.debug(f"{self.name}: {phase.value}")

    # Collaborators

    def downloader(self) -> DownloaderProtocol:
        """The downloader for the pod root, configured with the cache options."""
        if self._downloader is None:
            if self.downloader_factory is None:
                raise PodInstallError(
                    f"No downloader available to fetch {self.name}",
                    context={"pod": self.name},
                )
            downloader = self.downloader_factory(self.root, dict(self.root_spec.source))
            downloader.cache_root = self.config.cache_root
            downloader.max_cache_size = self.config.max_cache_size
            downloader.aggressive_cache = self.config.aggressive_cache
            self._downloader = downloader
        return self._downloader

    def documentation_generator(self) -> DocumentationGeneratorProtocol:
        if self._documentation_generator is None:
            if self.docs_generator_factory is None:
                raise PodInstallError(
                    f"No documentation generator available for {self.name}",
                    context={"pod": self.name},
                )
            self._documentation_generator = self.docs_generator_factory(self.sandbox, self.root_spec, self.path_list())
        return self._documentation_generator

    # File classification

    def path_list(self) -> PathList:
        if self._path_list is None:
            self._path_list = PathList(self.root)
        return self._path_list

    def file_accessors(self) -> list[FileAccessor]:
        """Accessors for every spec on its platform, built once per installation."""
        if self._file_accessors is None:
            path_list = self.path_list()
            self._file_accessors = [
                FileAccessor(path_list, spec.consumer(platform))
                for platform, specs in self.specs_by_platform.items()
                for spec in specs
            ]
        return self._file_accessors

    def used_paths(self) -> set[str]:
        return collect_used_paths(self.file_accessors())

    # Convenience

    @property
    def specs(self) -> list[Specification]:
        return [spec for specs in self.specs_by_platform.values() for spec in specs]

    @property
    def root_spec(self) -> Specification:
        return self.specs[0].root

    @property
    def name(self) -> str:
        return self.root_spec.name

    @property
    def root(self) -> Path:
        """Folder holding the source of the pod."""
        if self.config.local_path is not None:
            return self.config.local_path
        return self.sandbox.pod_dir(self.name)

    @property
    def predownloaded(self) -> bool:
        """Whether the source was fetched during resolution to read its specification."""
        return self.name in self.sandbox.predownloaded_pods

    @property
    def local(self) -> bool:
        """Whether the pod comes from a local path the installer must not modify."""
        return self.config.local

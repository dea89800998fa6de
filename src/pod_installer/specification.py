"""Specification object model - the read-only view of a pod's metadata.

Parsing specification files is the resolver's job. This module only models the
attributes the installer reads: the source to fetch, the version, and the file
patterns that classify the package tree, optionally refined per platform.
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class Version(BaseModel):
    """Requested version of a pod.

    A head version means "latest from source control": the concrete checkout
    has to be recorded again on every install.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    head: bool = False

    def __str__(self) -> str:
        if self.head:
            return f"HEAD based on {self.value}"
        return self.value


class FileAttributes(BaseModel):
    """File patterns and header options declared by a specification."""

    model_config = ConfigDict(frozen=True)

    source_files: list[str] = Field(default_factory=list)
    exclude_files: list[str] = Field(default_factory=list)
    public_header_files: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    preserve_paths: list[str] = Field(default_factory=list)

    prefix_header_file: str | None = None
    license_file: str | None = None
    header_dir: str | None = None
    header_mappings_dir: str | None = None


_LIST_ATTRIBUTES = ("source_files", "exclude_files", "public_header_files", "resources", "preserve_paths")
_SCALAR_ATTRIBUTES = ("prefix_header_file", "license_file", "header_dir", "header_mappings_dir")


class SpecConsumer(FileAttributes):
    """Attributes of a specification resolved for a single platform."""

    spec_name: str
    platform: str


class Specification(BaseModel):
    """
    Package metadata (immutable).

    Subspecs carry a ``parent`` link; the root specification owns the source
    and the version used for fetching.

    Example:
        >>> spec = Specification(name="Foo", version=Version(value="1.0"), source={"git": "https://example.com/foo.git", "tag": "1.0"})
        >>> core = spec.subspec("Core", attributes=FileAttributes(source_files=["Core/*.{h,m}"]))
        >>> core.name
        'Foo/Core'
        >>> core.root.name
        'Foo'
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: Version
    source: dict[str, str] = Field(default_factory=dict)
    attributes: FileAttributes = Field(default_factory=FileAttributes)
    platform_attributes: dict[str, FileAttributes] = Field(default_factory=dict)
    parent: "Specification | None" = None

    @property
    def root(self) -> "Specification":
        """The root specification of the pod."""
        spec = self
        while spec.parent is not None:
            spec = spec.parent
        return spec

    @property
    def root_name(self) -> str:
        return self.name.split("/")[0]

    def subspec(
        self,
        name: str,
        attributes: FileAttributes | None = None,
        platform_attributes: dict[str, FileAttributes] | None = None,
    ) -> "Specification":
        """Create a child specification named ``<self.name>/<name>``."""
        return Specification(
            name=f"{self.name}/{name}",
            version=self.version,
            source=self.source,
            attributes=attributes or FileAttributes(),
            platform_attributes=platform_attributes or {},
            parent=self,
        )

    def consumer(self, platform: str) -> SpecConsumer:
        """
        Resolve the attributes of this specification for a platform.

        List attributes are the shared values followed by the platform values.
        Scalar attributes prefer the platform value, then the shared value, then
        the value inherited from the parent chain.

        Args:
            platform: Platform identifier (e.g. "ios", "osx")

        Returns:
            SpecConsumer for the platform
        """
        platform_attrs = self.platform_attributes.get(platform)
        resolved: dict[str, object] = {}

        for name in _LIST_ATTRIBUTES:
            values = list(getattr(self.attributes, name))
            if platform_attrs is not None:
                values.extend(getattr(platform_attrs, name))
            resolved[name] = values

        for name in _SCALAR_ATTRIBUTES:
            value = getattr(platform_attrs, name) if platform_attrs is not None else None
            if value is None:
                value = getattr(self.attributes, name)
            if value is None and self.parent is not None:
                value = getattr(self.parent.consumer(platform), name)
            resolved[name] = value

        return SpecConsumer(spec_name=self.name, platform=platform, **resolved)

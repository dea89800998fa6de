"""Tests for FileAccessor classification."""

import tempfile
from pathlib import Path

from pod_installer import FileAccessor
from pod_installer import FileAttributes
from pod_installer import PathList
from pod_installer import Specification
from pod_installer import Version

from .fakes import POD_FILES
from .fakes import make_tree


def test_classifies_pod_files(foo_spec):
    """Test files are classified by role from the spec patterns."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(root, POD_FILES)

        accessor = FileAccessor(PathList(root), foo_spec.consumer("ios"))

        assert accessor.source_files == [root / "Foo/Foo.h", root / "Foo/Foo.m", root / "Foo/include/sub/Bar.h"]
        assert accessor.headers == [root / "Foo/Foo.h", root / "Foo/include/sub/Bar.h"]
        assert accessor.public_headers == accessor.headers
        assert accessor.resources == [root / "Resources/icon.png"]
        assert accessor.preserve_paths == []
        assert accessor.prefix_header is None
        assert accessor.readme == root / "README.md"
        assert accessor.license == root / "LICENSE"


def test_public_header_files_and_excludes():
    """Test public header patterns, excludes and declared single files."""
    spec = Specification(
        name="Foo",
        version=Version(value="1.0"),
        attributes=FileAttributes(
            source_files=["Classes"],
            exclude_files=["Classes/Private"],
            public_header_files=["Classes/Public/*.h"],
            prefix_header_file="Foo-Prefix.pch",
            license_file="COPYING",
            preserve_paths=["scripts"],
        ),
    )
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(
            root,
            [
                "Classes/Public/Foo.h",
                "Classes/Foo.m",
                "Classes/Private/Secret.h",
                "Foo-Prefix.pch",
                "COPYING",
                "scripts/build.sh",
            ],
        )

        accessor = FileAccessor(PathList(root), spec.consumer("ios"))

        assert accessor.source_files == [root / "Classes/Foo.m", root / "Classes/Public/Foo.h"]
        assert accessor.public_headers == [root / "Classes/Public/Foo.h"]
        assert accessor.prefix_header == root / "Foo-Prefix.pch"
        assert accessor.license == root / "COPYING"
        assert accessor.preserve_paths == [root / "scripts"]
        assert accessor.readme is None


def test_accessor_reports_consumer(foo_spec):
    """Test accessor exposes its consumer and root."""
    with tempfile.TemporaryDirectory() as tmpdir:
        accessor = FileAccessor(PathList(Path(tmpdir)), foo_spec.consumer("osx"))

        assert accessor.spec_consumer.platform == "osx"
        assert accessor.root == Path(tmpdir)
        assert accessor.source_files == []

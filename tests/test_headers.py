"""Tests for header mapping."""

from pathlib import Path

from pod_installer import map_headers

ROOT = Path("/sandbox/Pods/Foo")


def test_headers_go_to_namespace_dir():
    """Test headers map to the namespace dir by default."""
    mappings = map_headers(Path("Foo"), None, None, ROOT, [Path("Foo/include/Foo.h")])

    assert mappings == {Path("Foo"): [Path("Foo/include/Foo.h")]}


def test_header_mappings_dir_preserves_structure():
    """Test header mappings dir keeps sub-folders."""
    mappings = map_headers(Path("Foo"), None, "Foo/include", ROOT, [Path("Foo/include/sub/Foo.h")])

    assert mappings == {Path("Foo/sub"): [Path("Foo/include/sub/Foo.h")]}


def test_header_dir_nests_destination():
    """Test header dir nests the destination under the namespace."""
    headers = [ROOT / "Classes/A.h", ROOT / "Classes/B.h"]

    mappings = map_headers(Path("Foo"), "FooKit", None, ROOT, headers)

    assert mappings == {Path("Foo/FooKit"): headers}


def test_header_dir_and_mappings_dir_combined():
    """Test header dir and mappings dir combine."""
    headers = [ROOT / "include/a/A.h", ROOT / "include/B.h"]

    mappings = map_headers(Path("Foo"), "FooKit", "include", ROOT, headers)

    assert mappings == {
        Path("Foo/FooKit/a"): [ROOT / "include/a/A.h"],
        Path("Foo/FooKit"): [ROOT / "include/B.h"],
    }


def test_header_outside_mappings_dir_goes_to_destination_root():
    """Test headers outside the mappings dir collapse to the destination root."""
    headers = [ROOT / "include/sub/A.h", ROOT / "src/B.h"]

    mappings = map_headers(Path("Foo"), None, ROOT / "include", ROOT, headers)

    assert mappings == {Path("Foo/sub"): [ROOT / "include/sub/A.h"], Path("Foo"): [ROOT / "src/B.h"]}


def test_mapping_partitions_headers():
    """Test every header lands in exactly one non-empty group."""
    headers = [ROOT / p for p in ["inc/a/1.h", "inc/a/2.h", "inc/b/3.h", "inc/4.h", "other/5.h"]]

    mappings = map_headers(Path("Foo"), None, "inc", ROOT, headers)

    grouped = [h for files in mappings.values() for h in files]
    assert sorted(grouped) == sorted(headers)
    assert len(grouped) == len(set(grouped))
    assert all(mappings.values())


def test_no_headers():
    """Test no headers produce no groups."""
    assert map_headers(Path("Foo"), "FooKit", "inc", ROOT, []) == {}

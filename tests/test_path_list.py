"""Tests for PathList glob matching."""

import tempfile
from pathlib import Path

from pod_installer import PathList
from pod_installer.path_list import compile_pattern

from .fakes import make_tree


def test_compile_pattern_star_stays_in_component():
    """Test * doesn't cross directories but ** does."""
    assert compile_pattern("Foo/*.h").fullmatch("Foo/a.h")
    assert not compile_pattern("Foo/*.h").fullmatch("Foo/sub/a.h")
    assert compile_pattern("Foo/**/*.h").fullmatch("Foo/a.h")
    assert compile_pattern("Foo/**/*.h").fullmatch("Foo/sub/deep/a.h")


def test_compile_pattern_braces_and_case():
    """Test brace alternatives and case-insensitive matching."""
    regex = compile_pattern("*.{h,m}")
    assert regex.fullmatch("Foo.h")
    assert regex.fullmatch("Foo.M")
    assert not regex.fullmatch("Foo.c")
    assert compile_pattern("licen[cs]e*").fullmatch("LICENSE.txt")


def test_read_includes_hidden_entries():
    """Test hidden files and directories are listed."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(root, [".hidden/file", "visible.txt"])

        path_list = PathList(root)

        assert path_list.files == [".hidden/file", "visible.txt"]
        assert path_list.dirs == [".hidden"]


def test_missing_root_is_empty():
    """Test a root that doesn't exist lists nothing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path_list = PathList(Path(tmpdir) / "missing")

        assert path_list.files == []
        assert path_list.glob(["**/*"]) == []


def test_glob_expands_directories_with_dir_pattern():
    """Test a matched directory is replaced by its matching files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(root, ["Classes/A.h", "Classes/sub/B.m", "Classes/notes.txt"])

        path_list = PathList(root)

        assert path_list.relative_glob(["Classes"], dir_pattern="*.{h,m}") == ["Classes/A.h", "Classes/sub/B.m"]
        assert path_list.relative_glob(["Classes"]) == ["Classes"]


def test_glob_exclude_patterns():
    """Test excluded files and directory contents are removed."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(root, ["Classes/A.h", "Classes/Tests/ATests.m", "Classes/B.m"])

        path_list = PathList(root)
        result = path_list.relative_glob(["Classes/**/*.{h,m}"], exclude_patterns=["Classes/Tests"])

        assert result == ["Classes/A.h", "Classes/B.m"]


def test_glob_returns_absolute_paths():
    """Test glob returns paths under the root."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        make_tree(root, ["README.md"])

        assert PathList(root).glob(["readme*"], include_dirs=False) == [root / "README.md"]

"""Tests for installer configuration."""

from pathlib import Path

from pod_installer import MAX_CACHE_SIZE
from pod_installer import InstallerConfig


def test_defaults():
    """Test default installation options."""
    config = InstallerConfig()

    assert config.clean is True
    assert config.generate_docs is False
    assert config.install_docs is False
    assert config.aggressive_cache is False
    assert config.local_path is None
    assert not config.local
    assert config.max_cache_size == MAX_CACHE_SIZE == 500


def test_cache_root_is_expanded():
    """Test the default cache root has the home directory expanded."""
    config = InstallerConfig()

    assert "~" not in str(config.cache_root)
    assert config.cache_root == Path("~/Library/Caches/CocoaPods").expanduser()


def test_local_path():
    """Test a local path marks the pod as local."""
    config = InstallerConfig(local_path=Path("/src/Foo"))

    assert config.local

"""Shared fixtures."""

import pytest
from pod_installer import FileAttributes
from pod_installer import Specification
from pod_installer import Version


@pytest.fixture
def foo_spec() -> Specification:
    return Specification(
        name="Foo",
        version=Version(value="1.0"),
        source={"git": "https://example.com/Foo.git", "tag": "1.0"},
        attributes=FileAttributes(source_files=["Foo/**/*.{h,m}"], resources=["Resources/*.png"]),
    )

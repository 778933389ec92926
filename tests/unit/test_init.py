r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import arefetch


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(arefetch.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in arefetch.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in arefetch.__all__:
        assert hasattr(arefetch, name), f"{name} is in __all__ but not defined in module"


def test_all_exports_count() -> None:
    """Test that __all__ has the expected number of exports."""
    # 1 client + 1 config + 7 errors + 2 models + 2 transports + 1 version + 8 functions = 22
    assert len(arefetch.__all__) == 22

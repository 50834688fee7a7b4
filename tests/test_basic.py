"""Package-level behaviour: metadata banner and public exports."""

from __future__ import annotations

import lib_log_buffers
from lib_log_buffers import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    """The summary names the package and version."""

    summary = summary_info()
    assert "Info for lib_log_buffers" in summary
    assert f"version       = {__init__conf__.version}" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    """Repeated calls return the same text."""

    assert summary_info() == summary_info()


def test_public_surface_is_exported() -> None:
    """The package root exports the public API."""

    for name in lib_log_buffers.__all__:
        assert hasattr(lib_log_buffers, name), name

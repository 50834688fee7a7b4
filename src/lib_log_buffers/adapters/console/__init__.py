"""Console-facing adapters built on Rich."""

from __future__ import annotations

from .progress import RichProgressAdapter, compute_percent
from .rich_console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter", "RichProgressAdapter", "compute_percent"]

"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .console import RichConsoleAdapter, RichProgressAdapter
from .system import SystemClock, SystemIdentityProvider
from .text_file import TextFileReader, TextFileWriter

__all__ = [
    "RichConsoleAdapter",
    "RichProgressAdapter",
    "SystemClock",
    "SystemIdentityProvider",
    "TextFileReader",
    "TextFileWriter",
]

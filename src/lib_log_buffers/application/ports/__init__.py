"""Protocols separating the application layer from concrete adapters."""

from __future__ import annotations

from .console import ConsolePort
from .files import TextReaderPort, TextWriterPort
from .progress import ProgressPort
from .time import ClockPort, SystemIdentityPort

__all__ = [
    "ClockPort",
    "ConsolePort",
    "ProgressPort",
    "SystemIdentityPort",
    "TextReaderPort",
    "TextWriterPort",
]

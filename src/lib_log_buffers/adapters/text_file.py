"""Filesystem adapters for text export and snapshot files.

Purpose
-------
Write rendered logs and snapshot documents in the requested encoding, and read
snapshot documents back regardless of their byte-order mark.

Contents
--------
* :class:`TextFileWriter` - implementation of :class:`TextWriterPort`.
* :class:`TextFileReader` - implementation of :class:`TextReaderPort`.
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path

from lib_log_buffers.application.ports.files import TextReaderPort, TextWriterPort
from lib_log_buffers.domain.encoding import FileEncoding

_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


class TextFileWriter(TextWriterPort):
    """Write or append encoded text, creating parent directories on demand."""

    def __init__(self, *, line_separator: str = os.linesep) -> None:
        self._line_separator = line_separator

    def write(self, path: Path, content: str, *, encoding: FileEncoding, append: bool = False) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        existing = append and path.exists() and path.stat().st_size > 0
        if existing:
            payload = f"{self._line_separator}{content}"
            with path.open("ab") as fh:
                fh.write(payload.encode(encoding.append_codec, errors=encoding.errors))
            return
        with path.open("wb") as fh:
            fh.write(content.encode(encoding.codec, errors=encoding.errors))


class TextFileReader(TextReaderPort):
    """Decode files written by :class:`TextFileWriter`.

    A leading UTF-8 or UTF-16 byte-order mark selects the codec; otherwise the
    content is decoded as UTF-8.
    """

    def read(self, path: Path) -> str:
        raw = path.read_bytes()
        for bom, codec in _BOMS:
            if raw.startswith(bom):
                return raw.decode(codec)
        return raw.decode("utf-8")


__all__ = ["TextFileReader", "TextFileWriter"]

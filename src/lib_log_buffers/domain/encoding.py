"""Text encodings supported by file export.

Purpose
-------
Standardise the encoding names accepted by ``save_log`` and
``export_snapshot`` and map them onto Python codecs.

Contents
--------
* :class:`FileEncoding` enumeration with parsing helpers.
"""

from __future__ import annotations

from enum import Enum


class FileEncoding(Enum):
    """Supported output encodings.

    Examples
    --------
    >>> FileEncoding.from_name('UTF8NOBOM') is FileEncoding.UTF8_NO_BOM
    True
    >>> FileEncoding.UNICODE.codec
    'utf-16'
    """

    UTF8 = "utf8"
    UTF8_NO_BOM = "utf8NoBOM"
    ASCII = "ascii"
    UNICODE = "unicode"

    @property
    def codec(self) -> str:
        """Return the Python codec writing this encoding from the start of a file."""

        return _CODECS[self][0]

    @property
    def append_codec(self) -> str:
        """Return the codec used when appending (never writes a second BOM)."""

        return _CODECS[self][1]

    @property
    def errors(self) -> str:
        return "replace" if self is FileEncoding.ASCII else "strict"

    @classmethod
    def from_name(cls, name: str) -> "FileEncoding":
        normalized = name.strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unsupported file encoding: {name!r}")

    @classmethod
    def coerce(cls, value: "FileEncoding | str") -> "FileEncoding":
        if isinstance(value, FileEncoding):
            return value
        return cls.from_name(value)


_CODECS: dict[FileEncoding, tuple[str, str]] = {
    FileEncoding.UTF8: ("utf-8-sig", "utf-8"),
    FileEncoding.UTF8_NO_BOM: ("utf-8", "utf-8"),
    FileEncoding.ASCII: ("ascii", "ascii"),
    FileEncoding.UNICODE: ("utf-16", "utf-16-le"),
}


__all__ = ["FileEncoding"]

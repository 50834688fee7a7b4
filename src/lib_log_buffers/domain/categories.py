"""Log categories and the severity table shared by every read path.

Purpose
-------
Define the closed set of entry categories together with the single severity
table used by the recorder, the query engine, and the summary aggregator.

Contents
--------
* :class:`LogCategory` enum with severity and icon lookups.
* :class:`SeverityThreshold` enum describing the ``min_severity`` filter.
* :class:`SeverityTier` enum naming the three severity buckets.
* ``_SEVERITY_TABLE`` / ``_ICON_TABLE`` constants.

System Role
-----------
Every component that needs a severity rank asks :attr:`LogCategory.severity`;
no other module keeps its own mapping.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class LogCategory(Enum):
    """Closed enumeration of entry categories."""

    ADD = "Add"
    INFO = "Info"
    SUCCESS = "Success"
    ERROR = "Error"
    WARNING = "Warning"
    QUESTION = "Question"
    SUB = "Sub"
    RAW = "Raw"

    @property
    def severity(self) -> int:
        """Return the severity rank (1 = debug tier, 2 = warning, 3 = error)."""

        return _SEVERITY_TABLE[self]

    @property
    def tier(self) -> "SeverityTier":
        """Return the :class:`SeverityTier` bucket for this category."""

        return SeverityTier.from_rank(self.severity)

    @property
    def icon(self) -> str:
        """Return the console glyph prefixed to rendered lines (empty for ``RAW``)."""

        return _ICON_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> "LogCategory":
        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown log category: {name!r}")

    @classmethod
    def coerce(cls, value: "LogCategory | str") -> "LogCategory":
        """Accept either an enum member or a case-insensitive category name.

        Examples
        --------
        >>> LogCategory.coerce("warning") is LogCategory.WARNING
        True
        >>> LogCategory.coerce(LogCategory.SUB) is LogCategory.SUB
        True
        """
        if isinstance(value, LogCategory):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        raise ValueError(f"Unknown log category: {value!r}")


class SeverityThreshold(Enum):
    """Minimum-severity filter accepted by read operations.

    ``ALL`` and ``INFO`` are equivalent thresholds: both admit every
    debug-tier category.
    """

    ALL = "All"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"

    @property
    def min_rank(self) -> int:
        return _THRESHOLD_RANKS[self]

    @classmethod
    def from_name(cls, name: str) -> "SeverityThreshold":
        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown severity threshold: {name!r}")

    @classmethod
    def coerce(cls, value: "SeverityThreshold | str") -> "SeverityThreshold":
        if isinstance(value, SeverityThreshold):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        raise ValueError(f"Unknown severity threshold: {value!r}")


class SeverityTier(Enum):
    """Named severity buckets used by summaries."""

    DEBUG = "Debug"
    WARNING = "Warning"
    ERROR = "Error"

    @classmethod
    def from_rank(cls, rank: int) -> "SeverityTier":
        for member in cls:
            if _TIER_RANKS[member] == rank:
                return member
        raise ValueError(f"Unsupported severity rank: {rank}")


_SEVERITY_TABLE: dict[LogCategory, int] = {
    LogCategory.ADD: 1,
    LogCategory.INFO: 1,
    LogCategory.SUCCESS: 1,
    LogCategory.SUB: 1,
    LogCategory.QUESTION: 1,
    LogCategory.RAW: 1,
    LogCategory.WARNING: 2,
    LogCategory.ERROR: 3,
}

# Console glyphs prefixed to the rendered line per category.
_ICON_TABLE: dict[LogCategory, str] = {
    LogCategory.ADD: "[+]",
    LogCategory.INFO: "[i]",
    LogCategory.SUCCESS: "[✓]",
    LogCategory.ERROR: "[✖]",
    LogCategory.WARNING: "[!]",
    LogCategory.QUESTION: "[?]",
    LogCategory.SUB: "[-]",
    LogCategory.RAW: "",
}

_THRESHOLD_RANKS: dict[SeverityThreshold, int] = {
    SeverityThreshold.ALL: 1,
    SeverityThreshold.INFO: 1,
    SeverityThreshold.WARNING: 2,
    SeverityThreshold.ERROR: 3,
}

_TIER_RANKS: dict[SeverityTier, int] = {
    SeverityTier.DEBUG: 1,
    SeverityTier.WARNING: 2,
    SeverityTier.ERROR: 3,
}


def _require_exhaustive(table: Mapping[Enum, object], members: type[Enum], label: str) -> None:
    """Raise :class:`RuntimeError` when ``table`` lacks any member of ``members``.

    Examples
    --------
    >>> _require_exhaustive({LogCategory.ADD: 1}, LogCategory, "severity")
    Traceback (most recent call last):
    ...
    RuntimeError: severity table is missing: Info, Success, Error, Warning, Question, Sub, Raw
    """

    missing = [member.value for member in members if member not in table]
    if missing:
        raise RuntimeError(f"{label} table is missing: {', '.join(missing)}")


_require_exhaustive(_SEVERITY_TABLE, LogCategory, "severity")
_require_exhaustive(_ICON_TABLE, LogCategory, "icon")
_require_exhaustive(_THRESHOLD_RANKS, SeverityThreshold, "threshold")
_require_exhaustive(_TIER_RANKS, SeverityTier, "tier")


__all__ = ["LogCategory", "SeverityThreshold", "SeverityTier"]

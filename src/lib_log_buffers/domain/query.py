"""Filter contract shared by every read-side operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .categories import SeverityThreshold
from .entry import LogEntry

NO_LEVEL_FILTER = -1


@dataclass(slots=True, frozen=True)
class EntryFilter:
    """Combine the indentation-level and minimum-severity predicates.

    Examples
    --------
    >>> EntryFilter.build(max_level=-1, min_severity="warning").min_severity.min_rank
    2
    """

    max_level: int = NO_LEVEL_FILTER
    min_severity: SeverityThreshold = SeverityThreshold.ALL

    def __post_init__(self) -> None:
        if not isinstance(self.max_level, int) or isinstance(self.max_level, bool) or self.max_level < NO_LEVEL_FILTER:
            raise ValueError(f"max_level must be -1 or a non-negative integer, got {self.max_level!r}")

    @classmethod
    def build(cls, *, max_level: int = NO_LEVEL_FILTER, min_severity: SeverityThreshold | str = SeverityThreshold.ALL) -> "EntryFilter":
        return cls(max_level=max_level, min_severity=SeverityThreshold.coerce(min_severity))

    def admits(self, entry: LogEntry) -> bool:
        if self.max_level != NO_LEVEL_FILTER and entry.level > self.max_level:
            return False
        return entry.category.severity >= self.min_severity.min_rank

    def apply(self, entries: Iterable[LogEntry]) -> list[LogEntry]:
        """Return admitted entries in insertion order."""

        return [entry for entry in entries if self.admits(entry)]


__all__ = ["EntryFilter", "NO_LEVEL_FILTER"]

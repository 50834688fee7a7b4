"""Summary aggregation over a filtered entry set.

Purpose
-------
Compute counts, time range, and severity breakdown for a buffer in one pass
and expose both a structured record and a fixed human-readable block from the
same :class:`LogSummary` object.

Contents
--------
* :class:`LogSummary` dataclass with :meth:`~LogSummary.to_dict` and
  :meth:`~LogSummary.render`.
* :func:`summarize` aggregation entry point.

System Role
-----------
Backs :func:`lib_log_buffers.get_log_summary`. An absent or empty buffer
produces :meth:`LogSummary.empty`, never an exception.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Sequence

from .categories import LogCategory, SeverityThreshold, SeverityTier
from .entry import LogEntry, parse_timestamp
from .query import EntryFilter

DurationErrorHook = Callable[[str, str, ValueError], None] | None


def _empty_severity_counts() -> dict[str, int]:
    return {tier.value: 0 for tier in SeverityTier}


def _partition_types(min_severity: SeverityThreshold) -> tuple[tuple[str, ...], tuple[str, ...]]:
    included = tuple(category.value for category in LogCategory if category.severity >= min_severity.min_rank)
    excluded = tuple(category.value for category in LogCategory if category.severity < min_severity.min_rank)
    return included, excluded


@dataclass(slots=True, frozen=True)
class LogSummary:
    """Aggregated view of one filtered buffer.

    Attributes
    ----------
    buffer_id:
        Buffer the summary was computed for.
    total:
        Number of entries admitted by the filter.
    first_timestamp / last_timestamp:
        Timestamps of the first and last admitted entries in insertion order;
        ``None`` when nothing was admitted.
    duration:
        ``last - first`` or ``None`` when either timestamp cannot be parsed.
    counts_by_type:
        Per-category counts keyed by category name, sorted by name.
    counts_by_severity:
        ``Debug`` / ``Warning`` / ``Error`` counts, always all three keys.
    included_types / excluded_types:
        Partition of every category by the severity threshold.
    """

    buffer_id: str
    max_level: int
    min_severity: SeverityThreshold
    total: int = 0
    first_timestamp: str | None = None
    last_timestamp: str | None = None
    duration: timedelta | None = None
    counts_by_type: dict[str, int] = field(default_factory=dict)
    counts_by_severity: dict[str, int] = field(default_factory=_empty_severity_counts)
    included_types: tuple[str, ...] = ()
    excluded_types: tuple[str, ...] = ()

    @classmethod
    def empty(cls, buffer_id: str, entry_filter: EntryFilter) -> "LogSummary":
        """Return the zero-count summary for ``buffer_id``."""

        included, excluded = _partition_types(entry_filter.min_severity)
        return cls(
            buffer_id=buffer_id,
            max_level=entry_filter.max_level,
            min_severity=entry_filter.min_severity,
            included_types=included,
            excluded_types=excluded,
        )

    @property
    def duration_seconds(self) -> float | None:
        return None if self.duration is None else self.duration.total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Return the structured record used for programmatic access."""

        return {
            "BufferId": self.buffer_id,
            "MaxLevel": self.max_level,
            "MinSeverity": self.min_severity.value,
            "TotalEntries": self.total,
            "FirstTimestamp": self.first_timestamp,
            "LastTimestamp": self.last_timestamp,
            "Duration": None if self.duration is None else str(self.duration),
            "DurationSeconds": self.duration_seconds,
            "CountsByType": dict(self.counts_by_type),
            "CountsBySeverity": dict(self.counts_by_severity),
            "IncludedTypes": list(self.included_types),
            "ExcludedTypes": list(self.excluded_types),
        }

    def render(self) -> str:
        """Return the fixed multi-line block shown to humans."""

        level_text = "all" if self.max_level < 0 else str(self.max_level)
        lines = [
            f"Log summary for buffer '{self.buffer_id}'",
            f"  Filter         : max level {level_text}, min severity {self.min_severity.value}",
            f"  Total entries  : {self.total}",
            f"  First entry    : {self.first_timestamp or '-'}",
            f"  Last entry     : {self.last_timestamp or '-'}",
            f"  Duration       : {self.duration if self.duration is not None else '-'}",
            "  By type        :",
        ]
        if self.counts_by_type:
            lines.extend(f"    {name:<10} {count}" for name, count in self.counts_by_type.items())
        else:
            lines.append("    (none)")
        lines.append("  By severity    :")
        lines.extend(f"    {name:<10} {count}" for name, count in self.counts_by_severity.items())
        lines.append(f"  Included types : {', '.join(self.included_types) or '-'}")
        lines.append(f"  Excluded types : {', '.join(self.excluded_types) or '-'}")
        return "\n".join(lines)


def _duration_between(first: str, last: str, on_error: DurationErrorHook) -> timedelta | None:
    try:
        return parse_timestamp(last) - parse_timestamp(first)
    except ValueError as exc:
        if on_error is not None:
            on_error(first, last, exc)
        return None


def summarize(
    buffer_id: str,
    entries: Sequence[LogEntry],
    entry_filter: EntryFilter,
    *,
    on_duration_error: DurationErrorHook = None,
) -> LogSummary:
    """Aggregate ``entries`` after applying ``entry_filter``.

    ``on_duration_error`` receives both timestamp strings and the parse error
    when the duration cannot be computed; the summary itself still succeeds.
    """

    admitted = entry_filter.apply(entries)
    if not admitted:
        return LogSummary.empty(buffer_id, entry_filter)

    first = admitted[0].timestamp
    last = admitted[-1].timestamp
    by_type = Counter(entry.category.value for entry in admitted)
    by_severity = _empty_severity_counts()
    for entry in admitted:
        by_severity[entry.category.tier.value] += 1
    included, excluded = _partition_types(entry_filter.min_severity)

    return LogSummary(
        buffer_id=buffer_id,
        max_level=entry_filter.max_level,
        min_severity=entry_filter.min_severity,
        total=len(admitted),
        first_timestamp=first,
        last_timestamp=last,
        duration=_duration_between(first, last, on_duration_error),
        counts_by_type={name: by_type[name] for name in sorted(by_type)},
        counts_by_severity=by_severity,
        included_types=included,
        excluded_types=excluded,
    )


__all__ = ["LogSummary", "summarize"]

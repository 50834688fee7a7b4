from __future__ import annotations

import pytest

from lib_log_buffers.domain import categories
from lib_log_buffers.domain.categories import LogCategory, SeverityThreshold, SeverityTier


@pytest.mark.parametrize(
    "category, rank",
    [
        (LogCategory.ADD, 1),
        (LogCategory.INFO, 1),
        (LogCategory.SUCCESS, 1),
        (LogCategory.SUB, 1),
        (LogCategory.QUESTION, 1),
        (LogCategory.RAW, 1),
        (LogCategory.WARNING, 2),
        (LogCategory.ERROR, 3),
    ],
)
def test_severity_table(category: LogCategory, rank: int) -> None:
    """Each category maps to its severity rank."""

    assert category.severity == rank


@pytest.mark.parametrize(
    "category, tier",
    [
        (LogCategory.ADD, SeverityTier.DEBUG),
        (LogCategory.RAW, SeverityTier.DEBUG),
        (LogCategory.WARNING, SeverityTier.WARNING),
        (LogCategory.ERROR, SeverityTier.ERROR),
    ],
)
def test_tier_follows_severity(category: LogCategory, tier: SeverityTier) -> None:
    """Summary tiers follow the severity rank."""

    assert category.tier is tier


def test_raw_has_no_icon_and_others_do() -> None:
    """Only ``Raw`` renders without an icon."""

    assert LogCategory.RAW.icon == ""
    for category in LogCategory:
        if category is not LogCategory.RAW:
            assert category.icon


@pytest.mark.parametrize("name, expected", [("add", LogCategory.ADD), ("ERROR", LogCategory.ERROR), (" Sub ", LogCategory.SUB)])
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogCategory) -> None:
    """Category names match regardless of case."""

    assert LogCategory.from_name(name) is expected


def test_from_name_rejects_unknown_category() -> None:
    """Unknown category names raise ``ValueError``."""

    with pytest.raises(ValueError, match="Unknown log category"):
        LogCategory.from_name("Verbose")


def test_coerce_rejects_non_strings() -> None:
    """Only categories and strings are coerced."""

    with pytest.raises(ValueError):
        LogCategory.coerce(3)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "threshold, rank",
    [
        (SeverityThreshold.ALL, 1),
        (SeverityThreshold.INFO, 1),
        (SeverityThreshold.WARNING, 2),
        (SeverityThreshold.ERROR, 3),
    ],
)
def test_threshold_ranks(threshold: SeverityThreshold, rank: int) -> None:
    """Thresholds map to their minimum ranks."""

    assert threshold.min_rank == rank


def test_threshold_from_name_rejects_unknown() -> None:
    """Unknown threshold names raise ``ValueError``."""

    with pytest.raises(ValueError, match="Unknown severity threshold"):
        SeverityThreshold.from_name("Critical")


def test_tier_from_rank_rejects_out_of_range() -> None:
    """Ranks outside 1..3 have no tier."""

    with pytest.raises(ValueError):
        SeverityTier.from_rank(4)


@pytest.mark.parametrize(
    "table, members",
    [
        (categories._SEVERITY_TABLE, LogCategory),
        (categories._ICON_TABLE, LogCategory),
        (categories._THRESHOLD_RANKS, SeverityThreshold),
        (categories._TIER_RANKS, SeverityTier),
    ],
)
def test_lookup_tables_cover_every_member(table, members) -> None:
    """Every enum member has an entry in its lookup table."""

    categories._require_exhaustive(table, members, "lookup")


def test_partial_table_raises_runtime_error() -> None:
    """A table missing members names them in the error."""

    partial = {member: 1 for member in SeverityTier if member is not SeverityTier.ERROR}

    with pytest.raises(RuntimeError, match="tier table is missing: Error"):
        categories._require_exhaustive(partial, SeverityTier, "tier")

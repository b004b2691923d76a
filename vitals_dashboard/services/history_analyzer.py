"""
Diagnosis history analysis.

Responsible for:
- Picking the most recent history entry (year, then calendar month)
- Grouping blood pressure readings by year and averaging them

Both functions are pure and visualization-agnostic; the chart and view
renderers consume their output.
"""

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from vitals_dashboard.schemas import HistoryEntry

MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class YearlyMean:
    """Rounded mean blood pressure for one year."""
    mean_systolic: int
    mean_diastolic: int


YearlyAggregate = Dict[int, YearlyMean]


def month_index(month: Optional[str]) -> int:
    """Zero-based calendar index of a month name, -1 when unknown."""
    try:
        return MONTHS.index(month)
    except ValueError:
        return -1


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, .5 moving away from zero (82.5 -> 83)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _recency_key(entry: HistoryEntry) -> Tuple[bool, int, int]:
    # Ascending sort on this key puts the latest entry first;
    # entries without a year sort after every dated entry.
    year = entry.year
    return (year is None, -(year or 0), -month_index(entry.month))


def most_recent(history: Optional[Sequence[HistoryEntry]]) -> Optional[HistoryEntry]:
    """
    Return the latest entry by year, then calendar month.

    sorted() is stable, so among identical (year, month) pairs the entry that
    appears first in the input wins. Empty or missing history returns None.
    """
    if not history:
        return None
    return sorted(history, key=_recency_key)[0]


def aggregate_by_year(history: Optional[Sequence[HistoryEntry]]) -> YearlyAggregate:
    """
    Average systolic and diastolic readings per year.

    Entries missing the year, the systolic value or the diastolic value are
    skipped. Means are rounded half away from zero. Keys are returned in
    ascending numeric year order.
    """
    systolic_by_year: Dict[int, List[float]] = defaultdict(list)
    diastolic_by_year: Dict[int, List[float]] = defaultdict(list)

    for entry in history or ():
        systolic = entry.systolic_value
        diastolic = entry.diastolic_value
        if entry.year is None or systolic is None or diastolic is None:
            continue
        systolic_by_year[entry.year].append(systolic)
        diastolic_by_year[entry.year].append(diastolic)

    return {
        year: YearlyMean(
            mean_systolic=round_half_away_from_zero(sum(systolic_by_year[year]) / len(systolic_by_year[year])),
            mean_diastolic=round_half_away_from_zero(sum(diastolic_by_year[year]) / len(diastolic_by_year[year])),
        )
        for year in sorted(systolic_by_year)
    }

"""Date bucketing for the month chart and the rolling historical chart.

Buckets are inclusive ``[start, end]`` ranges compared at day granularity and
are always returned oldest first, i.e. left-to-right on a chart.
"""
from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Tuple

from domain.errors import InvalidParameter

PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIODS = (PERIOD_WEEK, PERIOD_MONTH)

# Fixed English abbreviations, independent of the process locale.
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class Bucket:
    label: str
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iso_week(day: date) -> Tuple[int, int]:
    """Return ``(iso_year, iso_week)`` for ``day``.

    The date is moved to the Thursday of its Monday-based week; that Thursday's
    year is the ISO year and its day-of-year gives the week number.
    """
    thursday = day + timedelta(days=4 - day.isoweekday())
    year_start = date(thursday.year, 1, 1)
    week = math.ceil(((thursday - year_start).days + 1) / 7)
    return thursday.year, week


def iso_week_number(day: date) -> int:
    return iso_week(day)[1]


def week_label(start: date) -> str:
    year, week = iso_week(start)
    return f"W{week}-{year % 100:02d}"


def month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBR[month - 1]}-{year % 100:02d}"


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move ``offset`` months (negative = back) from ``year``/``month``."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def current_month_buckets(today: date) -> List[Bucket]:
    """One bucket per calendar day of the month containing ``today``."""
    buckets = []
    for day in range(1, days_in_month(today.year, today.month) + 1):
        current = date(today.year, today.month, day)
        buckets.append(Bucket(label=f"{day:02d}", start=current, end=current))
    return buckets


def validate_historical(period: str, count: int, max_count: int | None = None) -> None:
    if period not in PERIODS:
        raise InvalidParameter(f"period must be one of {', '.join(PERIODS)}, got {period!r}")
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidParameter(f"count must be a positive integer, got {count!r}")
    if max_count is not None and count > max_count:
        raise InvalidParameter(f"count must not exceed {max_count}, got {count}")


def historical_buckets(period: str, count: int, today: date) -> List[Bucket]:
    """Last ``count`` weeks or months ending at ``today``.

    Weeks are trailing 7-day windows anchored on ``today`` (bucket ``i`` ends
    ``7 * i`` days back), not Monday-aligned ISO weeks. Months are whole
    calendar months.
    """
    validate_historical(period, count)

    buckets: List[Bucket] = []
    for i in range(count):
        if period == PERIOD_MONTH:
            year, month = shift_month(today.year, today.month, -i)
            start = date(year, month, 1)
            end = date(year, month, days_in_month(year, month))
            label = month_label(year, month)
        else:
            end = today - timedelta(days=7 * i)
            start = end - timedelta(days=6)
            label = week_label(start)
        buckets.append(Bucket(label=label, start=start, end=end))
    buckets.reverse()
    return buckets


def span(buckets: List[Bucket]) -> Tuple[date, date]:
    """Smallest ``(start, end)`` covering every bucket."""
    return min(b.start for b in buckets), max(b.end for b in buckets)

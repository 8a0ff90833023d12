"""Derived report structures; never persisted."""
from __future__ import annotations

from dataclasses import dataclass, field

from .visit import AgeGroupCounts


@dataclass
class DailySummary:
    total_visitors: int = 0
    individual_visits: int = 0
    group_visits: int = 0
    age_breakdown: AgeGroupCounts = field(default_factory=AgeGroupCounts)

    def to_dict(self) -> dict:
        return {
            "total_visitors": self.total_visitors,
            "individual_visits": self.individual_visits,
            "group_visits": self.group_visits,
            "age_breakdown": self.age_breakdown.to_dict(),
        }


@dataclass
class ChartDataPoint:
    """One bar of a chart: a day, a trailing week or a calendar month."""

    label: str
    children: int = 0
    adults: int = 0
    seniors: int = 0
    students: int = 0

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "children": self.children,
            "adults": self.adults,
            "seniors": self.seniors,
            "students": self.students,
        }

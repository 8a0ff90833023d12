"""Fold visit records into summary / chart structures.

Both folds are plain sums, so the result never depends on record order.
"""
from __future__ import annotations

from typing import Iterable

from domain.report import ChartDataPoint, DailySummary
from domain.visit import Visit, VisitType


def summarize(records: Iterable[Visit]) -> DailySummary:
    summary = DailySummary()
    breakdown = summary.age_breakdown
    for visit in records:
        breakdown.children_count += visit.children_count
        breakdown.adults_count += visit.adults_count
        breakdown.seniors_count += visit.seniors_count
        breakdown.students_count += visit.students_count
        summary.total_visitors += visit.total_visitors
        if visit.visit_type == VisitType.INDIVIDUAL:
            summary.individual_visits += 1
        elif visit.visit_type == VisitType.GROUP:
            summary.group_visits += 1
    return summary


def to_point(label: str, records: Iterable[Visit]) -> ChartDataPoint:
    point = ChartDataPoint(label=label)
    for visit in records:
        point.children += visit.children_count
        point.adults += visit.adults_count
        point.seniors += visit.seniors_count
        point.students += visit.students_count
    return point

"""Museum visit domain model."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import List, Optional


class VisitType(str, Enum):
    INDIVIDUAL = "individual"
    GROUP = "group"


AGE_GROUP_KEYS = ("children_count", "adults_count", "seniors_count", "students_count")


@dataclass(frozen=True)
class EventType:
    id: int
    name: str


INITIAL_EVENT_TYPES: List[EventType] = [
    EventType(1, "Meeting with writer"),
    EventType(2, "Excursion"),
    EventType(3, "Concert"),
    EventType(4, "Workshop"),
    EventType(5, "Exhibition opening"),
    EventType(6, "Lecture"),
    EventType(7, "Film screening"),
    EventType(8, "Children's program"),
]


@dataclass
class AgeGroupCounts:
    children_count: int = 0
    adults_count: int = 0
    seniors_count: int = 0
    students_count: int = 0

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in AGE_GROUP_KEYS}


@dataclass
class Visit:
    """A single recorded visit; `id` and `created_at` belong to the store."""

    date: date
    visit_type: VisitType
    event_type_id: int
    children_count: int = 0
    adults_count: int = 0
    seniors_count: int = 0
    students_count: int = 0
    group_description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def total_visitors(self) -> int:
        return self.children_count + self.adults_count + self.seniors_count + self.students_count

    def with_identity(self, visit_id: Optional[int], created_at: Optional[datetime]) -> "Visit":
        return replace(self, id=visit_id, created_at=created_at)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "visit_type": self.visit_type.value,
            "group_description": self.group_description,
            "children_count": self.children_count,
            "adults_count": self.adults_count,
            "seniors_count": self.seniors_count,
            "students_count": self.students_count,
            "event_type_id": self.event_type_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


def list_view_order(visits: List[Visit]) -> List[Visit]:
    """Default list ordering: newest date first, ties broken by newest id."""
    return sorted(visits, key=lambda visit: (visit.date, visit.id or 0), reverse=True)

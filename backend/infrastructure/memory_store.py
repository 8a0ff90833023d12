"""In-memory data store intended for the prototype stage and tests."""
from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from domain.visit import INITIAL_EVENT_TYPES, EventType, Visit
from .repository import VisitRepository


class InMemoryVisitRepository(VisitRepository):
    def __init__(self, event_types: Optional[Iterable[EventType]] = None):
        self._visits: Dict[int, Visit] = {}
        self._event_types: Dict[int, EventType] = {
            et.id: et for et in (event_types if event_types is not None else INITIAL_EVENT_TYPES)
        }
        self._next_id = 1
        self._lock = threading.Lock()

    def add_visit(self, visit: Visit) -> Visit:
        with self._lock:
            stored = replace(visit, id=self._next_id)
            self._next_id += 1
            self._visits[stored.id] = stored
            return replace(stored)

    def update_visit(self, visit_id: int, visit: Visit) -> Optional[Visit]:
        with self._lock:
            current = self._visits.get(visit_id)
            if current is None:
                return None
            stored = replace(visit, id=visit_id, created_at=current.created_at)
            self._visits[visit_id] = stored
            return replace(stored)

    def delete_visit(self, visit_id: int) -> bool:
        with self._lock:
            return self._visits.pop(visit_id, None) is not None

    def get_visit(self, visit_id: int) -> Optional[Visit]:
        with self._lock:
            visit = self._visits.get(visit_id)
            return replace(visit) if visit else None

    def list_visits(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Visit]:
        with self._lock:
            return [
                replace(visit)
                for visit in self._visits.values()
                if (start is None or visit.date >= start) and (end is None or visit.date <= end)
            ]

    def list_event_types(self) -> Iterable[EventType]:
        with self._lock:
            return sorted(self._event_types.values(), key=lambda et: et.id)

    def get_event_type(self, event_type_id: int) -> Optional[EventType]:
        return self._event_types.get(event_type_id)

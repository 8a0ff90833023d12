"""Abstract repository interfaces for persistence."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List, Optional

from domain.visit import EventType, Visit


class VisitRepository(ABC):
    """Unified gateway so memory store / SQLite share the same API."""

    # Visits ----------------------------------------------------------------
    @abstractmethod
    def add_visit(self, visit: Visit) -> Visit:
        """Persist a new visit and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update_visit(self, visit_id: int, visit: Visit) -> Optional[Visit]:
        """Replace every field except id / created_at; None when unknown."""
        raise NotImplementedError

    @abstractmethod
    def delete_visit(self, visit_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_visit(self, visit_id: int) -> Optional[Visit]:
        raise NotImplementedError

    @abstractmethod
    def list_visits(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Visit]:
        """Snapshot of visits with ``start <= date <= end`` (open bounds when None).

        Implementations must return a fully materialised list read in one go so
        callers can fold it without seeing concurrent writes.
        """
        raise NotImplementedError

    # Event types -----------------------------------------------------------
    @abstractmethod
    def list_event_types(self) -> Iterable[EventType]:
        raise NotImplementedError

    @abstractmethod
    def get_event_type(self, event_type_id: int) -> Optional[EventType]:
        raise NotImplementedError

"""Visit CRUD workflow: validation on the way in, default ordering on the way out."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, TYPE_CHECKING

from domain.errors import InvalidVisit, VisitNotFound
from domain.visit import AGE_GROUP_KEYS, EventType, Visit, VisitType, list_view_order

if TYPE_CHECKING:
    from app.config import AppConfig
    from application.clock import Clock
    from infrastructure.repository import VisitRepository

logger = logging.getLogger(__name__)


class VisitService:
    def __init__(self, config: "AppConfig", repository: "VisitRepository", clock: "Clock"):
        self.config = config
        self.repo = repository
        self.clock = clock

    def update_config(self, config: "AppConfig") -> None:
        self.config = config

    def list_visits(self) -> List[Visit]:
        return list_view_order(self.repo.list_visits())

    def get_visit(self, visit_id: int) -> Visit:
        visit = self.repo.get_visit(visit_id)
        if visit is None:
            raise VisitNotFound(visit_id)
        return visit

    def list_event_types(self) -> List[EventType]:
        return list(self.repo.list_event_types())

    def create_visit(self, visit: Visit) -> Visit:
        candidate = self._validated(visit).with_identity(None, self.clock.utcnow())
        stored = self.repo.add_visit(candidate)
        logger.info("[visits] Created visit %s on %s (%d visitors)", stored.id, stored.date, stored.total_visitors)
        return stored

    def update_visit(self, visit_id: int, visit: Visit) -> Visit:
        stored = self.repo.update_visit(visit_id, self._validated(visit))
        if stored is None:
            raise VisitNotFound(visit_id)
        logger.info("[visits] Updated visit %s", visit_id)
        return stored

    def delete_visit(self, visit_id: int) -> bool:
        deleted = self.repo.delete_visit(visit_id)
        if deleted:
            logger.info("[visits] Deleted visit %s", visit_id)
        return deleted

    # Validation --------------------------------------------------------------
    def _validated(self, visit: Visit) -> Visit:
        """Return a normalised copy of ``visit`` or raise ``InvalidVisit``."""
        today = self.clock.today()
        if visit.date > today:
            raise InvalidVisit(f"Visit date {visit.date.isoformat()} is in the future")

        for key in AGE_GROUP_KEYS:
            if getattr(visit, key) < 0:
                raise InvalidVisit(f"{key} must not be negative")

        if self.repo.get_event_type(visit.event_type_id) is None:
            raise InvalidVisit(f"Unknown event type {visit.event_type_id}")

        description = (visit.group_description or "").strip() or None
        if visit.visit_type == VisitType.INDIVIDUAL:
            # 个人参观不保留团体描述
            description = None
        limit = self.config.max_group_description_length
        if description is not None and len(description) > limit:
            raise InvalidVisit(f"Group description exceeds {limit} characters")

        return replace(visit, group_description=description)

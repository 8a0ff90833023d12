"""Demo visits inserted into an empty store when `visits.seed_sample_visits` is on."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List

from domain.visit import Visit, VisitType
from .repository import VisitRepository

logger = logging.getLogger(__name__)


def sample_visits(today: date, created_at: datetime) -> List[Visit]:
    return [
        Visit(date=date(2024, 7, 15), visit_type=VisitType.INDIVIDUAL, event_type_id=2,
              children_count=2, adults_count=1, created_at=created_at),
        Visit(date=date(2024, 7, 15), visit_type=VisitType.GROUP, event_type_id=8,
              group_description="School Trip Grade 5", children_count=25, adults_count=2,
              created_at=created_at),
        Visit(date=date(2024, 7, 16), visit_type=VisitType.INDIVIDUAL, event_type_id=5,
              adults_count=2, seniors_count=1, created_at=created_at),
        Visit(date=today, visit_type=VisitType.INDIVIDUAL, event_type_id=1,
              children_count=1, adults_count=1, created_at=created_at),
    ]


def seed_if_empty(repository: VisitRepository, today: date, created_at: datetime) -> int:
    """Insert the demo visits unless the store already holds data; returns rows added."""
    if repository.list_visits():
        return 0
    visits = sample_visits(today, created_at)
    for visit in visits:
        repository.add_visit(visit)
    logger.info("[seed] Inserted %d sample visits", len(visits))
    return len(visits)

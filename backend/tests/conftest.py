"""Shared fixtures: memory backend, fixed clock, sample July 2024 visits."""
import os

# deps 在导入时按配置创建仓储，测试统一使用内存后端
os.environ["MUSEUM_STORAGE"] = "memory"

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from application.clock import Clock
from domain.visit import Visit, VisitType
from infrastructure.memory_store import InMemoryVisitRepository


class FixedClock(Clock):
    def __init__(self, today: date):
        super().__init__()
        self._today = today

    def now(self) -> datetime:
        return datetime(self._today.year, self._today.month, self._today.day, 12, 0, tzinfo=timezone.utc)


def make_visit(day: date, visit_type: VisitType = VisitType.INDIVIDUAL, event_type_id: int = 1, **counts) -> Visit:
    return Visit(date=day, visit_type=visit_type, event_type_id=event_type_id, **counts)


@pytest.fixture
def july_clock():
    return FixedClock(date(2024, 7, 20))


@pytest.fixture
def july_visits():
    return [
        make_visit(date(2024, 7, 15), event_type_id=2, children_count=2, adults_count=1),
        make_visit(date(2024, 7, 15), VisitType.GROUP, event_type_id=8,
                   group_description="School Trip Grade 5", children_count=25, adults_count=2),
        make_visit(date(2024, 7, 16), event_type_id=5, adults_count=2, seniors_count=1),
    ]


@pytest.fixture
def repository():
    return InMemoryVisitRepository()


@pytest.fixture
def seeded_repository(repository, july_visits):
    created_at = datetime(2024, 7, 20, 9, 30, tzinfo=timezone.utc)
    for visit in july_visits:
        repository.add_visit(visit.with_identity(None, created_at))
    return repository


@pytest.fixture
def client(seeded_repository, july_clock):
    from app.main import app
    from interfaces import deps

    deps.configure(new_repository=seeded_repository, new_clock=july_clock)
    with TestClient(app) as test_client:
        yield test_client

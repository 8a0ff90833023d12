from datetime import date

import pytest

from app.config import get_settings
from application.visit_service import VisitService
from domain.errors import InvalidVisit, VisitNotFound
from domain.visit import VisitType

from conftest import make_visit


@pytest.fixture
def service(repository, july_clock):
    return VisitService(get_settings(), repository, july_clock)


def test_create_assigns_id_and_created_at(service, july_clock):
    first = service.create_visit(make_visit(date(2024, 7, 1), adults_count=2))
    second = service.create_visit(make_visit(date(2024, 7, 2), adults_count=1))

    assert first.id == 1
    assert second.id == 2
    assert first.created_at == july_clock.utcnow()


def test_create_rejects_future_date(service):
    with pytest.raises(InvalidVisit, match="future"):
        service.create_visit(make_visit(date(2024, 7, 21)))


def test_today_is_allowed(service):
    assert service.create_visit(make_visit(date(2024, 7, 20))).id == 1


def test_create_rejects_unknown_event_type(service):
    with pytest.raises(InvalidVisit, match="event type"):
        service.create_visit(make_visit(date(2024, 7, 1), event_type_id=99))


def test_create_rejects_negative_counts(service):
    with pytest.raises(InvalidVisit):
        service.create_visit(make_visit(date(2024, 7, 1), seniors_count=-1))


def test_group_description_limit(service):
    ok = make_visit(date(2024, 7, 1), VisitType.GROUP, group_description="x" * 100)
    too_long = make_visit(date(2024, 7, 1), VisitType.GROUP, group_description="x" * 101)

    assert service.create_visit(ok).group_description == "x" * 100
    with pytest.raises(InvalidVisit, match="100"):
        service.create_visit(too_long)


def test_individual_visit_drops_group_description(service):
    visit = service.create_visit(make_visit(date(2024, 7, 1), group_description="ignored"))
    assert visit.group_description is None


def test_blank_description_normalises_to_none(service):
    visit = service.create_visit(make_visit(date(2024, 7, 1), VisitType.GROUP, group_description="   "))
    assert visit.group_description is None


def test_update_replaces_fields_but_keeps_identity(service):
    original = service.create_visit(make_visit(date(2024, 7, 1), adults_count=2))

    updated = service.update_visit(
        original.id,
        make_visit(date(2024, 7, 3), VisitType.GROUP, event_type_id=4, group_description="Book club", seniors_count=9),
    )

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.date == date(2024, 7, 3)
    assert updated.adults_count == 0
    assert updated.seniors_count == 9
    assert updated.group_description == "Book club"


def test_get_visit(service):
    created = service.create_visit(make_visit(date(2024, 7, 1), seniors_count=3))

    assert service.get_visit(created.id) == created
    with pytest.raises(VisitNotFound):
        service.get_visit(created.id + 1)


def test_update_unknown_visit(service):
    with pytest.raises(VisitNotFound):
        service.update_visit(42, make_visit(date(2024, 7, 1)))


def test_update_is_validated(service):
    original = service.create_visit(make_visit(date(2024, 7, 1)))
    with pytest.raises(InvalidVisit):
        service.update_visit(original.id, make_visit(date(2030, 1, 1)))


def test_delete(service):
    visit = service.create_visit(make_visit(date(2024, 7, 1)))

    assert service.delete_visit(visit.id) is True
    assert service.delete_visit(visit.id) is False
    assert service.list_visits() == []


def test_list_orders_by_date_desc_then_id_desc(service):
    service.create_visit(make_visit(date(2024, 7, 1)))
    service.create_visit(make_visit(date(2024, 7, 5)))
    service.create_visit(make_visit(date(2024, 7, 1)))

    assert [v.id for v in service.list_visits()] == [2, 3, 1]


def test_event_types_are_seeded(service):
    names = [et.name for et in service.list_event_types()]
    assert len(names) == 8
    assert names[0] == "Meeting with writer"
    assert names[-1] == "Children's program"

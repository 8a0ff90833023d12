"""SQLite-backed repository implementation."""
from __future__ import annotations

import contextlib
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional

from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from domain.errors import StoreUnavailable
from domain.visit import EventType, Visit, VisitType
from .repository import VisitRepository
from .database import create_db_engine, init_db
from .models import EventTypeModel, VisitModel

logger = logging.getLogger(__name__)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite 的 DATETIME 列不保存时区，读写时统一按 UTC 处理
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLiteVisitRepository(VisitRepository):
    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.engine = create_db_engine(db_path)
        with self._store_errors("init"):
            init_db(self.engine)

    @contextlib.contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except OperationalError as exc:
            logger.error("[sqlite] %s failed on %s: %s", action, self.db_path, exc)
            raise StoreUnavailable(f"Visit store unavailable during {action}") from exc

    # Visits ----------------------------------------------------------------
    def add_visit(self, visit: Visit) -> Visit:
        with self._store_errors("insert"), Session(self.engine) as session:
            model = VisitModel(created_at=_as_utc(visit.created_at))
            self._populate_visit_model(model, visit)
            session.add(model)
            session.commit()
            session.refresh(model)
            return self._visit_from_model(model)

    def update_visit(self, visit_id: int, visit: Visit) -> Optional[Visit]:
        with self._store_errors("update"), Session(self.engine) as session:
            model = session.get(VisitModel, visit_id)
            if not model:
                return None
            self._populate_visit_model(model, visit)
            session.add(model)
            session.commit()
            session.refresh(model)
            return self._visit_from_model(model)

    def delete_visit(self, visit_id: int) -> bool:
        with self._store_errors("delete"), Session(self.engine) as session:
            model = session.get(VisitModel, visit_id)
            if not model:
                return False
            session.delete(model)
            session.commit()
            return True

    def get_visit(self, visit_id: int) -> Optional[Visit]:
        with self._store_errors("read"), Session(self.engine) as session:
            model = session.get(VisitModel, visit_id)
            if not model:
                return None
            return self._visit_from_model(model)

    def list_visits(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Visit]:
        with self._store_errors("scan"), Session(self.engine) as session:
            statement = select(VisitModel)
            if start is not None:
                statement = statement.where(VisitModel.date >= start)
            if end is not None:
                statement = statement.where(VisitModel.date <= end)
            models = session.exec(statement).all()
            return [self._visit_from_model(model) for model in models]

    # Event types -----------------------------------------------------------
    def list_event_types(self) -> List[EventType]:
        with self._store_errors("read"), Session(self.engine) as session:
            models = session.exec(select(EventTypeModel).order_by(EventTypeModel.id)).all()
            return [EventType(id=model.id, name=model.name) for model in models]

    def get_event_type(self, event_type_id: int) -> Optional[EventType]:
        with self._store_errors("read"), Session(self.engine) as session:
            model = session.get(EventTypeModel, event_type_id)
            if not model:
                return None
            return EventType(id=model.id, name=model.name)

    # Helpers ---------------------------------------------------------------
    def _populate_visit_model(self, model: VisitModel, visit: Visit) -> None:
        model.date = visit.date
        model.visit_type = visit.visit_type.value
        model.group_description = visit.group_description
        model.children_count = visit.children_count
        model.adults_count = visit.adults_count
        model.seniors_count = visit.seniors_count
        model.students_count = visit.students_count
        model.event_type_id = visit.event_type_id

    def _visit_from_model(self, model: VisitModel) -> Visit:
        return Visit(
            id=model.id,
            date=model.date,
            visit_type=VisitType(model.visit_type),
            group_description=model.group_description,
            children_count=model.children_count,
            adults_count=model.adults_count,
            seniors_count=model.seniors_count,
            students_count=model.students_count,
            event_type_id=model.event_type_id,
            created_at=_as_utc(model.created_at),
        )

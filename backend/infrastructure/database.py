"""SQLModel database configuration."""
from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine, select

from domain.visit import INITIAL_EVENT_TYPES


def database_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


def create_db_engine(db_path: Path) -> Engine:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        database_url(db_path),
        echo=False,
        connect_args={"check_same_thread": False},
    )


def _seed_event_types(engine: Engine) -> None:
    """Insert the reference event types the first time the schema is created."""
    from .models import EventTypeModel

    with Session(engine) as session, session.begin():
        existing = set(session.exec(select(EventTypeModel.id)).all())
        for event_type in INITIAL_EVENT_TYPES:
            if event_type.id not in existing:
                session.add(EventTypeModel(id=event_type.id, name=event_type.name))


def init_db(engine: Engine) -> None:
    """Create tables if they do not exist and seed reference data."""
    from . import models  # noqa: F401  # ensure SQLModel metadata is loaded

    SQLModel.metadata.create_all(engine)
    _seed_event_types(engine)

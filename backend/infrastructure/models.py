"""SQLModel ORM tables mirroring the domain entities."""
from __future__ import annotations

import datetime as dt
from typing import Optional

from sqlmodel import SQLModel, Field


class EventTypeModel(SQLModel, table=True):
    id: int = Field(primary_key=True)
    name: str


class VisitModel(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    date: dt.date = Field(index=True)
    visit_type: str = Field(default="individual")
    group_description: Optional[str] = Field(default=None, max_length=100)
    children_count: int = 0
    adults_count: int = 0
    seniors_count: int = 0
    students_count: int = 0
    event_type_id: int = Field(foreign_key="eventtypemodel.id")
    created_at: Optional[dt.datetime] = None  # 创建时写入，之后不再修改

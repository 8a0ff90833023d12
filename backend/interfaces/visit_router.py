"""Routers for visit records: CRUD, event types and CSV export."""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from application.csv_exporter import MEDIA_TYPE
from domain.errors import InvalidVisit, NoData, VisitNotFound
from domain.visit import Visit, VisitType
from interfaces import deps

router = APIRouter(tags=["visits"])


class VisitRequest(BaseModel):
    """Form payload; id / created_at are assigned by the server."""
    date: dt.date = Field(..., description="Visit date, YYYY-MM-DD, not in the future")
    visit_type: VisitType = Field(VisitType.INDIVIDUAL)
    group_description: Optional[str] = Field(None, description="Group visits only; at most 100 characters")
    children_count: int = Field(0, ge=0)
    adults_count: int = Field(0, ge=0)
    seniors_count: int = Field(0, ge=0)
    students_count: int = Field(0, ge=0)
    event_type_id: int = Field(..., ge=1)

    def to_domain(self) -> Visit:
        return Visit(
            date=self.date,
            visit_type=self.visit_type,
            group_description=self.group_description,
            children_count=self.children_count,
            adults_count=self.adults_count,
            seniors_count=self.seniors_count,
            students_count=self.students_count,
            event_type_id=self.event_type_id,
        )


@router.get("/visits")
def list_visits() -> List[Dict[str, Any]]:
    return [visit.to_dict() for visit in deps.visit_service.list_visits()]


@router.post("/visits")
def create_visit(payload: VisitRequest) -> Dict[str, Any]:
    try:
        visit = deps.visit_service.create_visit(payload.to_domain())
    except InvalidVisit as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return visit.to_dict()


@router.put("/visits/{visit_id}")
def update_visit(visit_id: int, payload: VisitRequest) -> Dict[str, Any]:
    try:
        visit = deps.visit_service.update_visit(visit_id, payload.to_domain())
    except VisitNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidVisit as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return visit.to_dict()


@router.delete("/visits/{visit_id}")
def delete_visit(visit_id: int) -> bool:
    return deps.visit_service.delete_visit(visit_id)


@router.get("/event-types")
def list_event_types() -> List[Dict[str, Any]]:
    return [{"id": et.id, "name": et.name} for et in deps.visit_service.list_event_types()]


@router.get("/visits/export")
def export_visits() -> Response:
    """
    导出全部参观记录（CSV）

    返回格式: text/csv；无数据时 404 + "No data to export."
    """
    try:
        document = deps.report_service.export_visits_csv()
    except NoData as exc:
        return PlainTextResponse(str(exc), status_code=404)

    filename = f"{deps.settings.export_filename_prefix}_{deps.clock.today().isoformat()}.csv"
    return Response(
        content=document.render(),
        media_type=MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


# 必须在 /visits/export 之后声明，否则 "export" 会被当作 visit_id 解析
@router.get("/visits/{visit_id}")
def get_visit(visit_id: int) -> Dict[str, Any]:
    try:
        visit = deps.visit_service.get_visit(visit_id)
    except VisitNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return visit.to_dict()

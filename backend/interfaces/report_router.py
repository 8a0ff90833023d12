"""报表接口：当日汇总、本月逐日统计、历史周/月趋势（Reports）。"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query

from domain.errors import InvalidParameter
from interfaces import deps

router = APIRouter(tags=["report"])


@router.get("/summary/today")
def get_today_summary() -> Dict[str, Any]:
    return deps.report_service.get_today_summary().to_dict()


@router.get("/chart/month")
def get_current_month_chart() -> List[Dict[str, Any]]:
    """One data point per calendar day of the current month, labelled "01".."31"."""
    return [point.to_dict() for point in deps.report_service.get_current_month_series()]


@router.get("/chart/historical")
def get_historical_chart(
    period: Optional[str] = Query(None),
    count: Optional[str] = Query(None),
) -> List[Dict[str, Any]]:
    """Last `count` trailing weeks or calendar months, oldest first."""
    if count is None or count == "":
        parsed_count = deps.settings.default_historical_count
    else:
        try:
            parsed_count = int(count)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="count must be an integer") from exc

    try:
        series = deps.report_service.get_historical_series(period, parsed_count)
    except InvalidParameter as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [point.to_dict() for point in series]

"""Reporting service: one store scan, then bucket and fold in memory."""
from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING

from application import aggregator, period_bucketer
from application.csv_exporter import CsvDocument, export_visits
from domain.errors import InvalidParameter
from domain.report import ChartDataPoint, DailySummary
from domain.visit import Visit, list_view_order

if TYPE_CHECKING:
    from app.config import AppConfig
    from application.clock import Clock
    from infrastructure.repository import VisitRepository

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, config: "AppConfig", repository: "VisitRepository", clock: "Clock"):
        self.config = config
        self.repo = repository
        self.clock = clock

    def update_config(self, config: "AppConfig") -> None:
        self.config = config

    def get_today_summary(self) -> DailySummary:
        today = self.clock.today()
        return aggregator.summarize(self.repo.list_visits(start=today, end=today))

    def get_current_month_series(self) -> List[ChartDataPoint]:
        buckets = period_bucketer.current_month_buckets(self.clock.today())
        return self._fold_buckets(buckets)

    def get_historical_series(self, period: str, count: int) -> List[ChartDataPoint]:
        """报表历史趋势：最近 N 周 / N 月，按时间先后排列。"""
        try:
            period_bucketer.validate_historical(period, count, self.config.max_historical_count)
        except InvalidParameter as exc:
            logger.warning("[report] Rejected historical request: %s", exc)
            raise
        buckets = period_bucketer.historical_buckets(period, count, self.clock.today())
        return self._fold_buckets(buckets)

    def export_visits_csv(self) -> CsvDocument:
        visits = list_view_order(self.repo.list_visits())
        # 事件类型是只读参考数据，单独读取，不计入参观记录的单次快照
        names = {et.id: et.name for et in self.repo.list_event_types()}
        document = export_visits(visits, names.get)
        logger.info("[report] Exported %d visits to CSV", len(document))
        return document

    def _fold_buckets(self, buckets: List[period_bucketer.Bucket]) -> List[ChartDataPoint]:
        start, end = period_bucketer.span(buckets)
        # single snapshot for the whole series
        visits: List[Visit] = self.repo.list_visits(start=start, end=end)
        return [
            aggregator.to_point(bucket.label, (v for v in visits if bucket.contains(v.date)))
            for bucket in buckets
        ]

"""Shared singletons for settings, repository, clock, and services.

根据 app_config.yaml 中的 storage 配置，自动选择记录存储的后端实现。
"""
from __future__ import annotations

import logging
from typing import Optional

from app.config import AppConfig, get_settings
from application.clock import Clock
from application.report_service import ReportService
from application.visit_service import VisitService

from infrastructure.memory_store import InMemoryVisitRepository
from infrastructure.repository import VisitRepository
from infrastructure.seed import seed_if_empty
from infrastructure.sqlite_repo import SQLiteVisitRepository

logger = logging.getLogger(__name__)

settings = get_settings()


def _create_repository(config: AppConfig) -> VisitRepository:
    """根据配置创建记录仓储实例"""
    backend = config.database_backend
    if backend == "memory":
        return InMemoryVisitRepository()
    elif backend == "sqlite":
        return SQLiteVisitRepository(config.sqlite_path)
    else:
        raise ValueError(f"Unknown database backend: {backend}. Supported: sqlite, memory")


repository: VisitRepository = _create_repository(settings)
clock = Clock(settings.timezone)
visit_service = VisitService(settings, repository, clock)
report_service = ReportService(settings, repository, clock)

if settings.seed_sample_visits:
    seed_if_empty(repository, clock.today(), clock.utcnow())

logger.info("[deps] Database backend: %s", settings.database_backend)
logger.info("[deps] Reporting timezone: %s", settings.timezone or "local")


def configure(
    new_repository: Optional[VisitRepository] = None,
    new_clock: Optional[Clock] = None,
) -> None:
    """Swap the repository and/or clock and rebuild the services around them."""
    global repository, clock, visit_service, report_service
    if new_repository is not None:
        repository = new_repository
    if new_clock is not None:
        clock = new_clock
    visit_service = VisitService(settings, repository, clock)
    report_service = ReportService(settings, repository, clock)


def apply_settings(new_settings: AppConfig) -> None:
    """Update global settings reference and refresh dependent singletons."""
    global settings
    settings = new_settings
    visit_service.update_config(new_settings)
    report_service.update_config(new_settings)


def reload_settings_from_disk() -> AppConfig:
    """Force re-read of app_config.yaml and propagate changes."""
    get_settings.cache_clear()
    fresh = get_settings()
    apply_settings(fresh)
    return fresh

"""Configuration loader that keeps all runtime constants centralized."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parent / "app_config.yaml"
BACKEND_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class AppConfig:
    """Strongly-typed wrapper over the raw YAML document."""

    raw: Dict[str, Any]

    @property
    def version(self) -> str:
        return str(self.raw.get("version", "v1"))

    @property
    def storage(self) -> Dict[str, Any]:
        return self.raw.get("storage") or {}

    @property
    def reporting(self) -> Dict[str, Any]:
        return self.raw.get("reporting") or {}

    @property
    def visits(self) -> Dict[str, Any]:
        return self.raw.get("visits") or {}

    @property
    def export(self) -> Dict[str, Any]:
        return self.raw.get("export") or {}

    @property
    def logging(self) -> Dict[str, Any]:
        return self.raw.get("logging") or {}

    @property
    def cors(self) -> Dict[str, Any]:
        return self.raw.get("cors") or {}

    # Derived settings ----------------------------------------------------
    @property
    def database_backend(self) -> str:
        """`MUSEUM_STORAGE` wins over the YAML value so tests can force memory."""
        return os.environ.get("MUSEUM_STORAGE") or str(self.storage.get("database", "sqlite"))

    @property
    def sqlite_path(self) -> Path:
        override = os.environ.get("MUSEUM_DB_PATH")
        path = Path(override or self.storage.get("sqlite_path", "museum_visits.db"))
        if not path.is_absolute():
            path = BACKEND_ROOT / path
        return path

    @property
    def timezone(self) -> Optional[str]:
        value = self.reporting.get("timezone")
        return str(value) if value else None

    @property
    def default_historical_count(self) -> int:
        return int(self.reporting.get("default_historical_count", 4))

    @property
    def max_historical_count(self) -> int:
        return int(self.reporting.get("max_historical_count", 120))

    @property
    def max_group_description_length(self) -> int:
        return int(self.visits.get("max_group_description_length", 100))

    @property
    def seed_sample_visits(self) -> bool:
        return bool(self.visits.get("seed_sample_visits", False))

    @property
    def export_filename_prefix(self) -> str:
        return str(self.export.get("filename_prefix", "museum_visits"))

    @property
    def log_level(self) -> str:
        return str(self.logging.get("level", "INFO")).upper()

    @property
    def allow_origins(self) -> List[str]:
        return list(self.cors.get("allow_origins") or [])


@lru_cache(maxsize=1)
def get_settings(path: Path | None = None) -> AppConfig:
    """Load configuration once per process."""

    config_path = path or CONFIG_PATH
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):  # pragma: no cover - invalid file guard
        raise ValueError("Configuration file must define a mapping at the top level.")
    return AppConfig(raw=data)

from datetime import date, datetime, timezone

from app.config import BACKEND_ROOT, AppConfig, get_settings
from application.clock import Clock


def test_defaults_from_yaml():
    settings = get_settings()

    assert settings.version == "v1"
    assert settings.default_historical_count == 4
    assert settings.max_group_description_length == 100
    assert settings.export_filename_prefix == "museum_visits"


def test_storage_env_override(monkeypatch):
    config = AppConfig(raw={"storage": {"database": "sqlite"}})

    monkeypatch.setenv("MUSEUM_STORAGE", "memory")
    assert config.database_backend == "memory"
    monkeypatch.delenv("MUSEUM_STORAGE")
    assert config.database_backend == "sqlite"


def test_sqlite_path_resolution(monkeypatch, tmp_path):
    monkeypatch.delenv("MUSEUM_DB_PATH", raising=False)
    assert AppConfig(raw={}).sqlite_path == BACKEND_ROOT / "museum_visits.db"

    monkeypatch.setenv("MUSEUM_DB_PATH", str(tmp_path / "x.db"))
    assert AppConfig(raw={}).sqlite_path == tmp_path / "x.db"


def test_missing_sections_fall_back():
    config = AppConfig(raw={})

    assert config.timezone is None
    assert config.max_historical_count == 120
    assert config.log_level == "INFO"
    assert config.allow_origins == []
    assert config.seed_sample_visits is False


def test_clock_with_timezone():
    clock = Clock("Pacific/Kiritimati")

    assert clock.now().utcoffset().total_seconds() == 14 * 3600
    assert clock.utcnow().tzinfo == timezone.utc
    assert isinstance(clock.today(), date)


def test_local_clock_is_aware():
    now = Clock().now()
    assert isinstance(now, datetime)
    assert now.tzinfo is not None

import json

import pytest

import usecase_reports


@pytest.fixture(autouse=True)
def _restore_globals():
    saved = (usecase_reports.BASE_URL, usecase_reports.VISIT_PRESETS, usecase_reports.HISTORICAL, usecase_reports.DRY_RUN)
    yield
    (usecase_reports.BASE_URL, usecase_reports.VISIT_PRESETS,
     usecase_reports.HISTORICAL, usecase_reports.DRY_RUN) = saved


def test_load_config_yaml(tmp_path):
    config = tmp_path / "visits.yaml"
    config.write_text(
        "baseUrl: http://museum:9000/\n"
        "historical:\n  period: month\n"
        "visits:\n  - {date: '2024-07-01', visit_type: individual, adults_count: 1, event_type_id: 1}\n",
        encoding="utf-8",
    )

    usecase_reports.load_config(str(config))

    assert usecase_reports.BASE_URL == "http://museum:9000"
    assert usecase_reports.HISTORICAL == {"period": "month", "count": 4}
    assert len(usecase_reports.VISIT_PRESETS) == 1


def test_load_config_json(tmp_path):
    config = tmp_path / "visits.json"
    config.write_text(json.dumps({"historical": {"count": 8}}), encoding="utf-8")

    usecase_reports.load_config(str(config))

    assert usecase_reports.HISTORICAL["count"] == 8


def test_load_config_missing_file():
    with pytest.raises(FileNotFoundError):
        usecase_reports.load_config("/nonexistent/visits.yaml")


def test_chart_table_skips_empty_rows():
    points = [
        {"label": "01", "children": 0, "adults": 0, "seniors": 0, "students": 0},
        {"label": "15", "children": 27, "adults": 3, "seniors": 0, "students": 0},
    ]

    table = usecase_reports._chart_table("July", points, skip_empty=True)

    assert table.row_count == 1


def test_dry_run_sends_nothing(monkeypatch):
    usecase_reports.DRY_RUN = True

    def _fail(*args, **kwargs):
        raise AssertionError("no HTTP call expected in dry-run mode")

    monkeypatch.setattr(usecase_reports.SESSION, "get", _fail)
    monkeypatch.setattr(usecase_reports.SESSION, "post", _fail)

    usecase_reports.seed_visits(usecase_reports.VISIT_PRESETS)
    usecase_reports.show_today_summary()
    usecase_reports.show_historical_chart("week", 4)
    usecase_reports.export_csv("unused.csv")

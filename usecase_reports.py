"""Script to seed visits and print the reports via HTTP APIs.

Usage examples:

- Default (uses built-in presets):
    `python usecase_reports.py`

- Provide a JSON/YAML config with your own visits:
    `python usecase_reports.py --config ./my_visits.yaml`

- Preview without sending requests:
    `python usecase_reports.py --dry-run`

- Download the CSV export after printing the reports:
    `python usecase_reports.py --export visits.csv`

The config file may define `baseUrl`, `visits`, and `historical`
(`{"period": "month", "count": 6}`).
"""
from __future__ import annotations

import argparse
import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests
import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

BASE_URL = "http://localhost:8000"
SESSION = requests.Session()
DRY_RUN = False
CONSOLE = Console()

AGE_GROUPS = ("children", "adults", "seniors", "students")

# ---------------------------------------------------------------------------
# 1) 预置参观记录：与后端演示数据一致，最后一条落在今天。
VISIT_PRESETS: List[Dict[str, Any]] = [
    {"date": "2024-07-15", "visit_type": "individual", "children_count": 2, "adults_count": 1,
     "seniors_count": 0, "students_count": 0, "event_type_id": 2},
    {"date": "2024-07-15", "visit_type": "group", "group_description": "School Trip Grade 5",
     "children_count": 25, "adults_count": 2, "seniors_count": 0, "students_count": 0, "event_type_id": 8},
    {"date": "2024-07-16", "visit_type": "individual", "children_count": 0, "adults_count": 2,
     "seniors_count": 1, "students_count": 0, "event_type_id": 5},
    {"date": "today", "visit_type": "individual", "children_count": 1, "adults_count": 1,
     "seniors_count": 0, "students_count": 0, "event_type_id": 1},
]

# ---------------------------------------------------------------------------
# 2) 历史报表参数：period 取 week / month。
HISTORICAL: Dict[str, Any] = {"period": "week", "count": 4}


def load_config(path: Optional[str]) -> None:
    """Load external config to override baseUrl, visits, and historical settings.

    Supported formats: JSON (.json) and YAML (.yml/.yaml).
    """
    global BASE_URL, VISIT_PRESETS, HISTORICAL
    if not path:
        return

    file = Path(path)
    if not file.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    content: Dict[str, Any]
    if file.suffix.lower() in (".yml", ".yaml"):
        content = yaml.safe_load(file.read_text(encoding="utf-8")) or {}
    else:
        content = json.loads(file.read_text(encoding="utf-8")) or {}

    if "baseUrl" in content and isinstance(content["baseUrl"], str):
        BASE_URL = content["baseUrl"].rstrip("/")
    if "visits" in content and isinstance(content["visits"], list):
        VISIT_PRESETS = content["visits"]
    if "historical" in content and isinstance(content["historical"], dict):
        HISTORICAL = {**HISTORICAL, **content["historical"]}


def main() -> None:
    args = parse_args()
    load_config(args.config)
    global DRY_RUN
    DRY_RUN = bool(args.dry_run)
    if args.base_url:
        update_base_url(args.base_url)

    period = args.period or HISTORICAL.get("period", "week")
    count = args.count or int(HISTORICAL.get("count", 4))

    if not args.skip_seed:
        seed_visits(VISIT_PRESETS)
    show_today_summary()
    show_month_chart()
    show_historical_chart(period, count)
    if args.export:
        export_csv(args.export)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed museum visits and print the reports")
    parser.add_argument("--config", type=str, default=None, help="Path to JSON/YAML config with visits")
    parser.add_argument("--dry-run", action="store_true", help="Print requests without sending")
    parser.add_argument("--base-url", type=str, default=None, help="Override backend base URL (e.g. http://localhost:8000)")
    parser.add_argument("--period", choices=("week", "month"), default=None, help="Historical bucket size")
    parser.add_argument("--count", type=int, default=None, help="Number of historical buckets")
    parser.add_argument("--export", type=str, default=None, help="Write the CSV export to this path")
    parser.add_argument("--skip-seed", action="store_true", help="Do not POST the preset visits")
    return parser.parse_args()


def update_base_url(url: str) -> None:
    global BASE_URL
    BASE_URL = url.rstrip("/")

# --- HTTP helpers ---------------------------------------------------------

def _resolve_date(value: str) -> str:
    return date.today().isoformat() if value == "today" else value


def seed_visits(presets: Iterable[Dict[str, Any]]) -> None:
    for preset in presets:
        payload = {**preset, "date": _resolve_date(str(preset["date"]))}
        if DRY_RUN:
            CONSOLE.print(Panel.fit(f"[DRY] POST {BASE_URL}/visits\n{json.dumps(payload)}", title="Dry Run", border_style="magenta"))
            continue
        resp = SESSION.post(f"{BASE_URL}/visits", json=payload, timeout=5)
        if resp.status_code >= 400:
            CONSOLE.print(f"[yellow]⚠ Visit on {payload['date']} rejected ({resp.status_code}): {resp.text}[/]")
            continue
        visit = resp.json()
        CONSOLE.print(f"[green]✔ Created visit #{visit['id']} on {visit['date']}[/]")


def _get_json(path: str, **params: Any) -> Optional[Any]:
    if DRY_RUN:
        CONSOLE.print(Panel.fit(f"[DRY] GET {BASE_URL}{path} {params or ''}", title="Dry Run", border_style="magenta"))
        return None
    try:
        resp = SESSION.get(f"{BASE_URL}{path}", params=params or None, timeout=5)
        resp.raise_for_status()
    except requests.RequestException as exc:
        CONSOLE.print(f"[red]✘ GET {path} failed: {exc}[/]")
        return None
    return resp.json()


def _chart_table(title: str, points: List[Dict[str, Any]], skip_empty: bool = False) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Bucket")
    for group in AGE_GROUPS:
        table.add_column(group.capitalize(), justify="right")
    table.add_column("Total", justify="right")
    for point in points:
        total = sum(int(point.get(group, 0)) for group in AGE_GROUPS)
        if skip_empty and total == 0:
            continue
        table.add_row(
            str(point["label"]),
            *(str(point.get(group, 0)) for group in AGE_GROUPS),
            f"[bold]{total}[/]",
        )
    return table


def show_today_summary() -> None:
    summary = _get_json("/summary/today")
    if summary is None:
        return
    table = Table(title="Today", box=box.SIMPLE, show_header=False)
    table.add_row("[bold cyan]Total visitors[/]", str(summary["total_visitors"]))
    table.add_row("[bold cyan]Individual visits[/]", str(summary["individual_visits"]))
    table.add_row("[bold cyan]Group visits[/]", str(summary["group_visits"]))
    for key, value in summary["age_breakdown"].items():
        table.add_row(key.replace("_count", "").capitalize(), str(value))
    CONSOLE.print(table)


def show_month_chart() -> None:
    points = _get_json("/chart/month")
    if points is None:
        return
    # 只展示有人数的日期，避免 31 行全是 0
    CONSOLE.print(_chart_table(f"Current month ({len(points)} days, non-empty only)", points, skip_empty=True))


def show_historical_chart(period: str, count: int) -> None:
    points = _get_json("/chart/historical", period=period, count=count)
    if points is None:
        return
    CONSOLE.print(_chart_table(f"Last {count} {period}s", points))


def export_csv(path: str) -> None:
    if DRY_RUN:
        CONSOLE.print(Panel.fit(f"[DRY] GET {BASE_URL}/visits/export -> {path}", title="Dry Run", border_style="magenta"))
        return
    resp = SESSION.get(f"{BASE_URL}/visits/export", timeout=10)
    if resp.status_code == 404:
        CONSOLE.print(f"[yellow]⚠ {resp.text}[/]")
        return
    resp.raise_for_status()
    Path(path).write_text(resp.text, encoding="utf-8")
    CONSOLE.print(f"[green]✔ CSV exported: {path}[/]")


if __name__ == "__main__":
    main()

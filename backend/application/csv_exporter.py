"""CSV serialization of the visit record set.

Fields are joined with a bare comma: commas or newlines inside
``group_description`` are written as-is and are NOT quoted. Consumers that
split naively on ``,`` will see extra columns for such rows; this matches the
files produced by earlier releases and is kept for compatibility.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from domain.errors import NoData
from domain.visit import AGE_GROUP_KEYS, Visit

CSV_COLUMNS = [
    "id",
    "date",
    "visit_type",
    "group_description",
    *AGE_GROUP_KEYS,
    "event_type_id",
    "created_at",
]
DELIMITER = ","
LINE_SEPARATOR = "\n"
MEDIA_TYPE = "text/csv"

EventTypeLookup = Callable[[int], Optional[str]]


@dataclass
class CsvDocument:
    columns: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def render(self) -> str:
        lines = [DELIMITER.join(self.columns)]
        lines.extend(DELIMITER.join(row) for row in self.rows)
        return LINE_SEPARATOR.join(lines)

    def __len__(self) -> int:
        return len(self.rows)


def _event_type_cell(visit: Visit, lookup: Optional[EventTypeLookup]) -> Union[str, int]:
    if lookup is not None:
        name = lookup(visit.event_type_id)
        if name:
            return name
    return visit.event_type_id


def _row(visit: Visit, lookup: Optional[EventTypeLookup]) -> List[str]:
    values = [
        visit.id,
        visit.date.isoformat(),
        visit.visit_type.value,
        visit.group_description or "",
        visit.children_count,
        visit.adults_count,
        visit.seniors_count,
        visit.students_count,
        _event_type_cell(visit, lookup),
        visit.created_at.isoformat() if visit.created_at else "",
    ]
    return ["" if value is None else str(value) for value in values]


def export_visits(records: Sequence[Visit], event_type_lookup: Optional[EventTypeLookup] = None) -> CsvDocument:
    """Serialize ``records`` in the order given.

    Raises ``NoData`` for an empty collection instead of emitting a header-only file.
    """
    if not records:
        raise NoData()
    return CsvDocument(
        columns=list(CSV_COLUMNS),
        rows=[_row(visit, event_type_lookup) for visit in records],
    )

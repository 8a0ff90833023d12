"""Error taxonomy shared by the services and the HTTP layer."""
from __future__ import annotations


class ReportError(Exception):
    """Base class for every error raised by the visit/report services."""


class InvalidParameter(ReportError):
    """Malformed bucketing request (unknown period, count out of range)."""


class NoData(ReportError):
    """Export requested against an empty record set."""

    def __init__(self, message: str = "No data to export."):
        super().__init__(message)


class StoreUnavailable(ReportError):
    """The record store could not be read or written."""


class VisitNotFound(ReportError):
    def __init__(self, visit_id: int):
        super().__init__(f"Visit {visit_id} not found")
        self.visit_id = visit_id


class InvalidVisit(ReportError):
    """Visit payload breaks a business rule (future date, unknown event type...)."""

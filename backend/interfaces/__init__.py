from .report_router import router as report_router
from .visit_router import router as visit_router

__all__ = [
    "report_router",
    "visit_router",
]

"""
DayBoard REST routers.
"""

from dayboard.api.routes.auth import router as auth_router
from dayboard.api.routes.day_records import router as day_records_router
from dayboard.api.routes.tasks import router as tasks_router

__all__ = [
    "auth_router",
    "day_records_router",
    "tasks_router",
]

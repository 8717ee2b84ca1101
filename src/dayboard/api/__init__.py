"""
DayBoard REST API Package.

Endpoints are grouped by resource:
    - Auth (register, login, logout, profile)
    - Tasks (create, list, public list, update, progress, delete)
    - Day records (end day, get day, calendar, public calendar, users)
"""

from dayboard.api.app import create_app

__all__ = [
    "create_app",
]

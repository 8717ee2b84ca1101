"""
DayBoard constants.
"""

from __future__ import annotations

from enum import Enum


class ProductivityLabel(str, Enum):
    """Tier a day's overall productivity falls into."""

    NOT_PRODUCTIVE = "Not Productive"
    MODERATELY_PRODUCTIVE = "Moderately Productive"
    PRODUCTIVE = "Productive"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


# Lower bounds (inclusive) of each label, highest first
PRODUCTIVE_THRESHOLD = 80
MODERATELY_PRODUCTIVE_THRESHOLD = 50

COMPLETE_PERCENTAGE = 100

# Length of generated record ids (hex characters)
ID_LENGTH = 24

TASK_TITLE_MAX_LENGTH = 200
TASK_TEXT_MAX_LENGTH = 2000
SUMMARY_MAX_LENGTH = 5000

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6

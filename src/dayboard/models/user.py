"""
User models.

Users belong to the auth collaborator; the tracker only reads them to scope
records and to gate public visibility.
"""

from __future__ import annotations

from dayboard.constants import UserRole
from dayboard.models.base import DayBoardModel, UTCDateTime


class User(DayBoardModel):
    """A registered user (never carries the password hash)."""

    id: str
    username: str
    email: str
    role: UserRole = UserRole.USER
    profile_visible: bool = True
    created_at: UTCDateTime


class PublicUser(DayBoardModel):
    """What other users may see of a visible profile."""

    id: str
    username: str
    profile_visible: bool = True

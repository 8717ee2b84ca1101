"""
FastAPI dependencies: the service handle and the authenticated caller.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dayboard.exceptions import DayBoardAuthenticationError
from dayboard.models import User
from dayboard.service import DayBoardService

bearer_scheme = HTTPBearer(auto_error=False)


def get_service(request: Request) -> DayBoardService:
    """Get the service the application was created with."""
    return request.app.state.service


ServiceDep = Annotated[DayBoardService, Depends(get_service)]
BearerDep = Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)]


def get_token(credentials: BearerDep) -> str:
    if credentials is None or not credentials.credentials:
        raise DayBoardAuthenticationError("Not authorized, no token")
    return credentials.credentials


TokenDep = Annotated[str, Depends(get_token)]


async def get_current_user(service: ServiceDep, token: TokenDep) -> User:
    return await service.authenticate(token)


CurrentUser = Annotated[User, Depends(get_current_user)]

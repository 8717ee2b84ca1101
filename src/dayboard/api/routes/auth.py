"""
Auth endpoints: /api/auth
"""

from __future__ import annotations

from fastapi import APIRouter

from dayboard.api.deps import CurrentUser, ServiceDep, TokenDep
from dayboard.api.inputs import LoginInput, ProfileUpdateInput, RegisterInput
from dayboard.api.responses import AuthResponse, MessageResponse
from dayboard.models import User

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register(params: RegisterInput, service: ServiceDep) -> AuthResponse:
    session = await service.register(params.username, params.email, params.password)
    return AuthResponse(token=session.token, user=session.user)


@router.post("/login", response_model=AuthResponse)
async def login(params: LoginInput, service: ServiceDep) -> AuthResponse:
    session = await service.login(params.email, params.password)
    return AuthResponse(token=session.token, user=session.user)


@router.post("/logout", response_model=MessageResponse)
async def logout(token: TokenDep, service: ServiceDep) -> MessageResponse:
    await service.logout(token)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=User)
async def me(user: CurrentUser) -> User:
    return user


@router.put("/profile", response_model=User)
async def update_profile(params: ProfileUpdateInput, user: CurrentUser, service: ServiceDep) -> User:
    return await service.update_profile(user.id, profile_visible=params.profile_visible)

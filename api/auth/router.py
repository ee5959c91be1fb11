"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service

router = APIRouter()


@router.post("/api/login", response_model=schemas.LoginResponse)
async def login(request: schemas.LoginRequest) -> schemas.LoginResponse:
    return await service.login(request)


@router.get("/api/me", response_model=schemas.UserResponse)
async def me(access_token: str = Depends(dependencies.require_token)) -> schemas.UserResponse:
    return await service.me(access_token)

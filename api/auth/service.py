"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        email=str(user_row["email"]),
        created_at=user_row.get("created_at"),
    )


async def login(payload: schemas.LoginRequest) -> schemas.LoginResponse:
    email = (payload.email or "").strip()
    password = payload.password or ""
    if not email or not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )

    user_row = await repository.get_user_by_email(email)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    is_valid = security.verify_password(password, str(user_row.get("password") or ""))
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    token = security.build_access_token(user_id=int(user_row["id"]), email=str(user_row["email"]))
    logger.info("User %s logged in", user_row["id"])
    return schemas.LoginResponse(token=token)


async def register(*, email: str, password: str) -> schemas.UserResponse:
    await repository.ensure_users_table()
    existing = await repository.get_user_by_email(email)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )

    password_hash = security.hash_password(password)
    user_row = await repository.create_user(email=email, password_hash=password_hash)
    return _to_user_response(user_row)


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    user_row = await repository.get_user_by_id(int(payload["userId"]))
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    return user_row


async def me(access_token: str) -> schemas.UserResponse:
    user_row = await get_user_from_access_token(access_token)
    return _to_user_response(user_row)

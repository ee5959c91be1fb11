"""
FastAPI dependencies built on the request guard.

Data routes answer 401; page routes raise `guard.LoginRequired`, which the app
turns into a redirect to /login.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from . import guard


async def require_token(request: Request) -> str:
    # Bearer header first, then the `token` cookie.
    token = guard.context_from_request(request).token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing access token.",
        )
    return token


async def require_api_access(request: Request) -> guard.AuthContext:
    context = guard.context_from_request(request)
    if not guard.is_authenticated(context):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
        )
    return context


async def require_page_access(request: Request) -> guard.AuthContext:
    context = guard.context_from_request(request)
    if not guard.is_authenticated(context):
        raise guard.LoginRequired(context.path)
    return context

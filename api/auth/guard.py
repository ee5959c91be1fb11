"""
Single authentication boundary for pages and data routes.

A request is allowed when any of these hold:
- the path is public (`/login`)
- it carries a valid, unexpired JWT (bearer header or `token` cookie)
- the legacy shared password is configured and the `password` cookie matches it
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from . import security

PUBLIC_PATHS = frozenset({"/login"})
LOGIN_PATH = "/login"
TOKEN_COOKIE = "token"
PASSWORD_COOKIE = "password"


@dataclass(frozen=True)
class AuthContext:
    path: str
    token: str | None = None
    legacy_password: str | None = None


class LoginRequired(Exception):
    """
    Raised by page dependencies; the app turns it into a redirect to /login
    that also clears the stored credentials.
    """

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path


def _bearer_token(authorization: str | None) -> str | None:
    parts = (authorization or "").strip().split(" ", 1)
    if len(parts) != 2 or parts[0].strip().lower() != "bearer":
        return None
    return parts[1].strip() or None


def context_from_request(request: Request) -> AuthContext:
    token = _bearer_token(request.headers.get("authorization")) or request.cookies.get(TOKEN_COOKIE)
    return AuthContext(
        path=request.url.path,
        token=token or None,
        legacy_password=request.cookies.get(PASSWORD_COOKIE) or None,
    )


def is_authenticated(context: AuthContext) -> bool:
    if context.path in PUBLIC_PATHS:
        return True

    if context.token:
        try:
            security.decode_access_token(context.token)
        except security.AuthSecurityError:
            pass
        else:
            return True

    return security.matches_legacy_password(context.legacy_password)

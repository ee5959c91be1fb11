"""
Auth security helpers.
"""

from __future__ import annotations

import hmac
import time
from typing import Any

import bcrypt
import jwt

from core import config

BCRYPT_ROUNDS = 10
DEFAULT_JWT_SECRET = "litigation-analytics-dev-secret"


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    secret = config.env_str("JWT_SECRET", "") or config.env_str("NEXT_PUBLIC_JWT_SECRET", "")
    return secret or DEFAULT_JWT_SECRET


def jwt_algorithm() -> str:
    return config.env_str("JWT_ALG", "HS256") or "HS256"


def access_token_expire_days() -> int:
    return config.env_int("JWT_EXPIRE_DAYS", 7)


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, user_id: int, email: str) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (access_token_expire_days() * 24 * 60 * 60)

    payload = {
        "userId": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if not isinstance(payload.get("userId"), int):
        raise AuthSecurityError("Access token has no user id.")
    return payload


def matches_legacy_password(candidate: str | None) -> bool:
    expected = config.legacy_password()
    if not expected or not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))

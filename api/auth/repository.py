"""
Auth persistence helpers.
"""

from __future__ import annotations

from core import db


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def ensure_users_table() -> None:
    await db.execute(
        """
        CREATE TABLE IF NOT EXISTS users (
            id INT AUTO_INCREMENT PRIMARY KEY,
            email VARCHAR(255) UNIQUE NOT NULL,
            password VARCHAR(255) NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


async def create_user(*, email: str, password_hash: str) -> dict:
    email = normalize_email(email)
    await db.execute(
        """
        INSERT INTO users (email, password)
        VALUES (%s, %s)
        """,
        email,
        password_hash,
    )
    row = await get_user_by_email(email)
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, password, created_at
        FROM users
        WHERE lower(email) = lower(%s)
        """,
        normalize_email(email),
    )


async def get_user_by_id(user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, password, created_at
        FROM users
        WHERE id = %s
        """,
        user_id,
    )

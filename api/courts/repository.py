"""
Court lookups (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_court(court_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name
        FROM courts
        WHERE id = %s
        """,
        court_id,
    )


async def court_name(court_id: int) -> str | None:
    row = await get_court(court_id)
    if row is None:
        return None
    return str(row["name"])

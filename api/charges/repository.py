"""
Charge catalogue queries (raw SQL).

Only active charges (`is_active = 1`) are listed, counted or looked up for
the catalogue. Search terms match literally; LIKE wildcards are escaped.
"""

from __future__ import annotations

from core import db


async def list_charges() -> list[dict]:
    """
    One row per charge name. When several charge ids share a name, the
    lowest id (and its severity) wins.
    """
    return await db.fetch_all(
        """
        SELECT c.name, c.charge_id, c.severity
        FROM charges c
        JOIN (
            SELECT name, MIN(charge_id) AS charge_id
            FROM charges
            WHERE is_active = 1
            GROUP BY name
        ) first_by_name
          ON first_by_name.charge_id = c.charge_id
        ORDER BY c.name ASC
        """
    )


async def search_charges(*, search: str, limit: int, offset: int) -> list[dict]:
    term = db.escape_like((search or "").strip())
    return await db.fetch_all(
        """
        SELECT c.name, c.charge_id, c.severity
        FROM charges c
        JOIN (
            SELECT name, MIN(charge_id) AS charge_id
            FROM charges
            WHERE is_active = 1
              AND (%s = '' OR name LIKE CONCAT('%%', %s, '%%'))
            GROUP BY name
        ) first_by_name
          ON first_by_name.charge_id = c.charge_id
        ORDER BY c.name ASC
        LIMIT %s OFFSET %s
        """,
        term,
        term,
        limit,
        offset,
    )


async def count_charges(*, search: str) -> int:
    term = db.escape_like((search or "").strip())
    row = await db.fetch_one(
        """
        SELECT COUNT(DISTINCT name) AS total
        FROM charges
        WHERE is_active = 1
          AND (%s = '' OR name LIKE CONCAT('%%', %s, '%%'))
        """,
        term,
        term,
    )
    return int(row["total"]) if row is not None else 0


async def get_charge(charge_id: int, *, active_only: bool = True) -> dict | None:
    # /api/charge and title lookups also resolve retired charges.
    active_filter = "AND is_active = 1" if active_only else ""
    return await db.fetch_one(
        f"""
        SELECT name, charge_id, severity
        FROM charges
        WHERE charge_id = %s
        {active_filter}
        LIMIT 1
        """,
        charge_id,
    )

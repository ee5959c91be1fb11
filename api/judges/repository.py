"""
Judge lookups (raw SQL).
"""

from __future__ import annotations

from core import db

_JUDGE_COLUMNS = "judge_id AS id, CONCAT_WS(' ', first, middle, last) AS name"


async def list_judges() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_JUDGE_COLUMNS}
        FROM judges
        ORDER BY total_cases DESC
        """
    )


async def search_judges(*, search: str, limit: int, offset: int) -> list[dict]:
    term = db.escape_like((search or "").strip())
    return await db.fetch_all(
        f"""
        SELECT {_JUDGE_COLUMNS}
        FROM judges
        WHERE %s = ''
           OR first LIKE CONCAT('%%', %s, '%%')
           OR middle LIKE CONCAT('%%', %s, '%%')
           OR last LIKE CONCAT('%%', %s, '%%')
        ORDER BY total_cases DESC
        LIMIT %s OFFSET %s
        """,
        term,
        term,
        term,
        term,
        limit,
        offset,
    )


async def count_judges(*, search: str) -> int:
    term = db.escape_like((search or "").strip())
    row = await db.fetch_one(
        """
        SELECT COUNT(*) AS total
        FROM judges
        WHERE %s = ''
           OR first LIKE CONCAT('%%', %s, '%%')
           OR middle LIKE CONCAT('%%', %s, '%%')
           OR last LIKE CONCAT('%%', %s, '%%')
        """,
        term,
        term,
        term,
        term,
    )
    return int(row["total"]) if row is not None else 0


async def get_judge(judge_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_JUDGE_COLUMNS}
        FROM judges
        WHERE judge_id = %s
        """,
        judge_id,
    )

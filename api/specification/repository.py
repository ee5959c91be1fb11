"""
Specification and motion statistics (raw SQL).
"""

from __future__ import annotations

from core import db

MIN_TOTAL_CASES = 100


async def list_specifications(*, court_id: int, judge_id: int, charge_id: int) -> list[dict]:
    # One row per trial category for the (court, judge, charge) key.
    return await db.fetch_all(
        """
        SELECT *
        FROM specification
        WHERE court_id = %s
          AND judge_id = %s
          AND charge_id = %s
        """,
        court_id,
        judge_id,
        charge_id,
    )


async def list_motion_data(specification_ids: list[int]) -> list[dict]:
    if not specification_ids:
        return []
    placeholders = ", ".join(["%s"] * len(specification_ids))
    return await db.fetch_all(
        f"""
        SELECT *
        FROM motion_data
        WHERE specification_id IN ({placeholders})
        """,
        *specification_ids,
    )


async def most_relevant_specification(*, court_id: int, judge_id: int, charge_id: int) -> dict | None:
    """
    Most specific 'any' trial-category row with at least MIN_TOTAL_CASES.

    Preference order:
    1) judge + charge
    2) court + charge
    3) charge
    4) judge
    5) court
    6) global
    """
    return await db.fetch_one(
        """
        SELECT *,
          CASE
            WHEN judge_id = %(judge)s AND charge_id = %(charge)s AND court_id = 0
                 AND %(judge)s > 0 AND %(charge)s > 0 THEN 1
            WHEN court_id = %(court)s AND charge_id = %(charge)s AND judge_id = 0
                 AND %(court)s > 0 AND %(charge)s > 0 THEN 2
            WHEN charge_id = %(charge)s AND court_id = 0 AND judge_id = 0
                 AND %(charge)s > 0 THEN 3
            WHEN judge_id = %(judge)s AND charge_id = 0 AND court_id = 0
                 AND %(judge)s > 0 THEN 4
            WHEN court_id = %(court)s AND charge_id = 0 AND judge_id = 0
                 AND %(court)s > 0 THEN 5
            WHEN court_id = 0 AND charge_id = 0 AND judge_id = 0 THEN 6
            ELSE 7
          END AS relevance_rank
        FROM specification
        WHERE trial_category = 'any'
          AND total_cases >= %(min_cases)s
        HAVING relevance_rank < 7
        ORDER BY relevance_rank
        LIMIT 1
        """,
        {"court": court_id, "judge": judge_id, "charge": charge_id, "min_cases": MIN_TOTAL_CASES},
    )

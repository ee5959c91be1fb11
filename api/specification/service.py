"""
Specification statistics orchestration.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException

from . import repository

logger = logging.getLogger(__name__)


def motion_source_id(rows: list[dict]) -> int:
    any_row = next((row for row in rows if row.get("trial_category") == "any"), None)
    return int((any_row or rows[0])["specification_id"])


async def specification_bundle(*, court_id: int, judge_id: int, charge_id: int) -> dict:
    logger.debug("specification court=%s judge=%s charge=%s", court_id, judge_id, charge_id)
    rows = await repository.list_specifications(
        court_id=court_id,
        judge_id=judge_id,
        charge_id=charge_id,
    )
    if not rows:
        return {"specification": [], "motion_data": []}

    motion_rows = await repository.list_motion_data([motion_source_id(rows)])
    return {"specification": rows, "motion_data": motion_rows}


async def relevant_specification(*, court_id: int, judge_id: int, charge_id: int) -> dict:
    row = await repository.most_relevant_specification(
        court_id=court_id,
        judge_id=judge_id,
        charge_id=charge_id,
    )
    if row is None:
        raise HTTPException(status_code=404, detail="No specification with sufficient data found.")

    row.pop("relevance_rank", None)
    motion_rows = await repository.list_motion_data([int(row["specification_id"])])
    return {
        "specification": [row],
        "motion_data": motion_rows,
        "usedParams": {
            "courtId": int(row["court_id"]),
            "judgeId": int(row["judge_id"]),
            "chargeId": int(row["charge_id"]),
        },
    }

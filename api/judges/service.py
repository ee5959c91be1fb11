"""
Judge lookup logic.
"""

from __future__ import annotations

from fastapi import HTTPException

from . import repository

DEFAULT_PAGE_SIZE = 20


def _to_judge(row: dict) -> dict:
    return {"id": int(row["id"]), "name": str(row["name"] or "").strip()}


async def all_judges() -> list[dict]:
    return [_to_judge(row) for row in await repository.list_judges()]


async def judge_page(*, search: str = "", limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> dict:
    if limit < 1 or offset < 0:
        raise HTTPException(status_code=400, detail="Invalid pagination parameters")

    rows = await repository.search_judges(search=search, limit=limit, offset=offset)
    total = await repository.count_judges(search=search)
    return {"judges": [_to_judge(row) for row in rows], "total": total}


async def judge_by_id(judge_id: int) -> dict:
    row = await repository.get_judge(judge_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Judge not found")
    return _to_judge(row)


async def judge_name(judge_id: int) -> str | None:
    row = await repository.get_judge(judge_id)
    if row is None:
        return None
    return _to_judge(row)["name"] or None

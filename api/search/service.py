"""
Entity search orchestration.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException

from . import repository

logger = logging.getLogger(__name__)


def _to_result(row: dict) -> dict:
    return {
        "id": int(row["id"]),
        "name": str(row["name"] or "").strip(),
        "total_case_dispositions": int(row["total_case_dispositions"] or 0),
    }


def _clean_selected_id(selected_category: str | None, selected_id: str | None) -> str | None:
    raw = (selected_id or "").strip()
    if not raw or not selected_category:
        return None
    if selected_category == "Trial Category":
        return raw
    if not raw.lstrip("-").isdigit():
        raise HTTPException(status_code=400, detail="Invalid selectedId")
    return raw


async def search(
    *,
    search_category: str | None,
    search_term: str = "",
    selected_category: str | None = None,
    selected_id: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> list[dict]:
    entity = repository.ENTITIES.get(search_category or "")
    if entity is None:
        raise HTTPException(status_code=400, detail="Invalid searchCategory")

    selected_id = _clean_selected_id(selected_category, selected_id)
    logger.debug(
        "search category=%s term=%r selected=%s:%s",
        search_category,
        search_term,
        selected_category,
        selected_id,
    )
    rows = await repository.search(
        entity,
        term=search_term,
        selected_category=selected_category,
        selected_id=selected_id,
        limit=max(1, limit),
        offset=max(0, offset),
    )
    return [_to_result(row) for row in rows]

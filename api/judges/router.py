"""
Judge lookup endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from core import db

from . import service

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_access)])


@router.get("/api/judges")
async def get_judges(
    judge_id: int | None = Query(default=None, alias="judgeId"),
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
    search: str | None = Query(default=None, max_length=200),
):
    try:
        if judge_id is not None:
            return await service.judge_by_id(judge_id)
        if limit is not None or offset is not None or (search or "").strip():
            return await service.judge_page(
                search=search or "",
                limit=service.DEFAULT_PAGE_SIZE if limit is None else limit,
                offset=0 if offset is None else offset,
            )
        return await service.all_judges()
    except db.DatabaseError:
        logger.exception("get_judges failed")
        return JSONResponse(status_code=500, content={"error": "Error retrieving judge data"})

"""
Entity search endpoint.
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


@router.get("/api/search")
async def search(
    search_category: str | None = Query(default=None, alias="searchCategory"),
    search_term: str = Query(default="", alias="searchTerm", max_length=200),
    selected_category: str | None = Query(default=None, alias="selectedCategory"),
    selected_id: str | None = Query(default=None, alias="selectedId"),
    limit: int = Query(default=20, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
):
    try:
        return await service.search(
            search_category=search_category,
            search_term=search_term,
            selected_category=selected_category,
            selected_id=selected_id,
            limit=limit,
            offset=offset,
        )
    except db.DatabaseError:
        logger.exception("search failed")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

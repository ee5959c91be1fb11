"""
Results endpoints.

GET  /results?selections=<token>     page model (title + bail/cost charts)
POST /api/selections/encode          selections -> token + results URL
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service
from .charts import DisplayMode
from .formatters import ViewMode

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/results", dependencies=[Depends(auth_dependencies.require_page_access)])
async def results_page(
    token: str = Query(default="", alias="selections"),
    view_mode: ViewMode = Query(default=ViewMode.OBJECTIVE, alias="viewMode"),
    display_mode: DisplayMode = Query(default=DisplayMode.FREQUENCY, alias="displayMode"),
):
    try:
        return await service.build_results_page(
            token,
            view_mode=view_mode,
            display_mode=display_mode,
        )
    except db.DatabaseError:
        logger.exception("results_page failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch data. Please try again."},
        )


@router.post(
    "/api/selections/encode",
    response_model=schemas.EncodeSelectionsResponse,
    dependencies=[Depends(auth_dependencies.require_api_access)],
)
async def encode_selections(request: schemas.EncodeSelectionsRequest) -> dict:
    return service.encode_request(request.selections)

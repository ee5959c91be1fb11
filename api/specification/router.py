"""
Specification statistics endpoints.
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


@router.get("/api/specification")
async def get_specification(
    court_id: int = Query(default=0, alias="courtId", ge=0),
    judge_id: int = Query(default=0, alias="judgeId", ge=0),
    charge_id: int = Query(default=0, alias="chargeId", ge=0),
):
    try:
        return await service.specification_bundle(
            court_id=court_id,
            judge_id=judge_id,
            charge_id=charge_id,
        )
    except db.DatabaseError:
        logger.exception("get_specification failed")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch specification data"})


@router.get("/api/relevant_specification")
async def get_relevant_specification(
    court_id: int = Query(default=0, alias="courtId", ge=0),
    judge_id: int = Query(default=0, alias="judgeId", ge=0),
    charge_id: int = Query(default=0, alias="chargeId", ge=0),
):
    try:
        return await service.relevant_specification(
            court_id=court_id,
            judge_id=judge_id,
            charge_id=charge_id,
        )
    except db.DatabaseError:
        logger.exception("get_relevant_specification failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch relevant specification data"},
        )

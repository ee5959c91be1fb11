"""
Charge catalogue endpoints.

GET /api/charges                      -> [{name, charge_id, severity}, ...]
GET /api/charges?limit=&offset=&search= -> {charges, total}
GET /api/charges?chargeId=N           -> {name, charge_id, severity}
GET /api/charge?chargeId=N            -> {name, charge_id, severity}
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


@router.get("/api/charges")
async def get_charges(
    charge_id: int | None = Query(default=None, alias="chargeId"),
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
    search: str | None = Query(default=None, max_length=200),
):
    try:
        if charge_id is not None:
            return await service.charge_by_id(charge_id)
        if limit is not None or offset is not None or (search or "").strip():
            return await service.charge_page(
                search=search or "",
                limit=service.DEFAULT_PAGE_SIZE if limit is None else limit,
                offset=0 if offset is None else offset,
            )
        return await service.all_charges()
    except db.DatabaseError:
        logger.exception("get_charges failed")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch charges"})


@router.get("/api/charge")
async def get_charge(charge_id: int = Query(default=0, alias="chargeId")):
    try:
        return await service.charge_by_id(charge_id, active_only=False)
    except db.DatabaseError:
        logger.exception("get_charge failed")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch charge"})

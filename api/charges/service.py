"""
Charge catalogue business logic.
"""

from __future__ import annotations

from fastapi import HTTPException

from . import repository

DEFAULT_PAGE_SIZE = 20


def _to_charge(row: dict) -> dict:
    return {
        "name": str(row["name"]),
        "charge_id": int(row["charge_id"]),
        "severity": int(row["severity"]) if row.get("severity") is not None else None,
    }


async def all_charges() -> list[dict]:
    rows = await repository.list_charges()
    return [_to_charge(row) for row in rows]


async def charge_page(*, search: str = "", limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> dict:
    if limit < 1 or offset < 0:
        raise HTTPException(status_code=400, detail="Invalid pagination parameters")

    rows = await repository.search_charges(search=search, limit=limit, offset=offset)
    total = await repository.count_charges(search=search)
    return {"charges": [_to_charge(row) for row in rows], "total": total}


async def charge_by_id(charge_id: int, *, active_only: bool = True) -> dict:
    row = await repository.get_charge(charge_id, active_only=active_only)
    if row is None:
        raise HTTPException(status_code=404, detail="Charge not found")
    return _to_charge(row)


async def charge_name(charge_id: int) -> str | None:
    row = await repository.get_charge(charge_id, active_only=False)
    if row is None:
        return None
    return str(row["name"])

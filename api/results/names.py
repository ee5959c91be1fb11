"""
Entity name resolution for result titles.

Lookups are tracked per (kind, id) in a LatestRequestState: each lookup takes
a ticket, and its answer is stored only if no newer lookup for the same key
has started since, so a slow, stale response never overwrites a fresher
cached name. Each caller still gets the name its own lookup returned; the
cache only backs up callers whose lookup failed.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable

from charges import service as charges_service
from core import db
from courts import repository as courts_repository
from judges import service as judges_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestTicket:
    key: Hashable
    serial: int


class LatestRequestState:
    def __init__(self) -> None:
        self._serials = itertools.count(1)
        self._latest: dict[Hashable, int] = {}
        self._values: dict[Hashable, Any] = {}

    def begin(self, key: Hashable) -> RequestTicket:
        ticket = RequestTicket(key=key, serial=next(self._serials))
        self._latest[key] = ticket.serial
        return ticket

    def is_current(self, ticket: RequestTicket) -> bool:
        return self._latest.get(ticket.key) == ticket.serial

    def resolve(self, ticket: RequestTicket, value: Any) -> bool:
        if not self.is_current(ticket):
            return False
        self._values[ticket.key] = value
        return True

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._values.get(key, default)

    def clear(self) -> None:
        self._latest.clear()
        self._values.clear()


NAME_STATE = LatestRequestState()

NameLookup = Callable[[int], Awaitable[str | None]]

LOOKUPS: dict[str, NameLookup] = {
    "court": courts_repository.court_name,
    "judge": judges_service.judge_name,
    "charge": charges_service.charge_name,
}


async def _resolve(kind: str, entity_id: int, state: LatestRequestState) -> str | None:
    if entity_id == 0:
        return None

    key = (kind, entity_id)
    ticket = state.begin(key)
    try:
        name = await LOOKUPS[kind](entity_id)
    except db.DatabaseError:
        logger.warning("Name lookup failed for %s %s", kind, entity_id)
        return state.get(key)

    if not state.resolve(ticket, name):
        logger.debug("Not caching stale name for %s %s", kind, entity_id)
    return name


async def resolve_names(
    court_id: int,
    judge_id: int,
    charge_id: int,
    *,
    state: LatestRequestState | None = None,
) -> dict[str, str | None]:
    state = state or NAME_STATE
    court, judge, charge = await asyncio.gather(
        _resolve("court", court_id, state),
        _resolve("judge", judge_id, state),
        _resolve("charge", charge_id, state),
    )
    return {"court": court, "judge": judge, "charge": charge}

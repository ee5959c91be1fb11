"""
Async database access helpers (raw SQL) using aiomysql.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- aiomysql uses format placeholders: %s, %s, ...
- pass a single dict instead to use named placeholders: %(name)s
- a literal percent sign in SQL must be written as %%
"""

from __future__ import annotations

import logging
from typing import Any

import aiomysql

from . import config

logger = logging.getLogger(__name__)

_pool: aiomysql.Pool | None = None


class DatabaseError(RuntimeError):
    pass


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await aiomysql.create_pool(
        host=config.db_host(),
        user=config.db_user(),
        password=config.db_password(),
        db=config.db_name(),
        port=config.db_port(),
        minsize=1,
        maxsize=config.db_pool_max(),
        autocommit=True,
        cursorclass=aiomysql.DictCursor,
    )
    logger.info("DB pool ready on %s:%s/%s", config.db_host(), config.db_port(), config.db_name())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    _pool.close()
    await _pool.wait_closed()
    _pool = None


def pool() -> aiomysql.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def escape_like(term: str) -> str:
    """
    Escape LIKE wildcards so user input matches literally (MySQL's default
    escape character is the backslash).
    """
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _query_args(args: tuple[Any, ...]) -> Any:
    if not args:
        return None
    # A single mapping selects %(name)s placeholders.
    if len(args) == 1 and isinstance(args[0], dict):
        return args[0]
    return args


async def _run(sql: str, args: tuple[Any, ...], *, fetch: str | None) -> Any:
    try:
        async with pool().acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(sql, _query_args(args))
                if fetch == "one":
                    return await cur.fetchone()
                if fetch == "all":
                    return await cur.fetchall()
                return None
    except aiomysql.Error as exc:
        logger.exception("Database query error")
        raise DatabaseError("Database query failed") from exc


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await _run(sql, args, fetch="one")
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await _run(sql, args, fetch="all")
    return [dict(r) for r in rows or ()]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await _run(sql, args, fetch=None)

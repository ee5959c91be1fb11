"""
Entity search SQL.

Each search joins an entity table to `specification` and sums
`total_case_dispositions` over the specification rows whose composite key
matches. The composite key is (judge_id, charge_id, court_id, trial_category):
- the searched entity's key follows the entity row
- the selected entity's key (if any) is pinned to the selected id
- every other key is pinned to its "any" value (0 or 'any')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core import db

FULLTEXT_MIN_CHARS = 3


@dataclass(frozen=True)
class SearchEntity:
    table: str
    alias: str
    id_column: str
    name_sql: str
    fulltext_columns: tuple[str, ...]
    spec_key: str
    type_filter: str = ""


ENTITIES: dict[str, SearchEntity] = {
    "Judges": SearchEntity(
        table="judges",
        alias="j",
        id_column="judge_id",
        name_sql="CONCAT_WS(' ', j.first, j.middle, j.last)",
        fulltext_columns=("first", "middle", "last"),
        spec_key="judge_id",
    ),
    "Courts": SearchEntity(
        table="courts",
        alias="c",
        id_column="id",
        name_sql="c.name",
        fulltext_columns=("name",),
        spec_key="court_id",
    ),
    "Charges": SearchEntity(
        table="charge_options",
        alias="c",
        id_column="id",
        name_sql="c.name",
        fulltext_columns=("name",),
        spec_key="charge_id",
        type_filter="AND c.type = 'charge'",
    ),
    "Charge Groups": SearchEntity(
        table="charge_options",
        alias="cg",
        id_column="id",
        name_sql="cg.name",
        fulltext_columns=("name",),
        spec_key="charge_id",
        type_filter="AND cg.type != 'charge'",
    ),
}

# Selection category -> specification key it pins.
SELECTED_KEYS: dict[str, str] = {
    "Judges": "judge_id",
    "Courts": "court_id",
    "Charges": "charge_id",
    "Charge Groups": "charge_id",
    "Trial Category": "trial_category",
}

COMPOSITE_KEYS: tuple[tuple[str, str], ...] = (
    ("judge_id", "0"),
    ("charge_id", "0"),
    ("court_id", "0"),
    ("trial_category", "'any'"),
)


def composite_key_filter(
    entity: SearchEntity,
    *,
    selected_category: str | None,
    selected_id: str | None,
) -> tuple[str, list[Any]]:
    selected_key = SELECTED_KEYS.get(selected_category or "") if selected_id else None
    clauses: list[str] = []
    params: list[Any] = []
    for key, any_value in COMPOSITE_KEYS:
        if key == entity.spec_key:
            clauses.append(f"AND s.{key} = {entity.alias}.{entity.id_column}")
        elif key == selected_key:
            clauses.append(f"AND s.{key} = %s")
            params.append(selected_id if key == "trial_category" else int(selected_id))
        else:
            clauses.append(f"AND s.{key} = {any_value}")
    return "\n        ".join(clauses), params


def term_filter(entity: SearchEntity, term: str) -> tuple[str, list[Any]]:
    term = (term or "").strip()
    if not term:
        return "", []
    columns = [f"{entity.alias}.{col}" for col in entity.fulltext_columns]
    if len(term) >= FULLTEXT_MIN_CHARS:
        return f"AND MATCH({', '.join(columns)}) AGAINST(%s IN NATURAL LANGUAGE MODE)", [term]
    like = f"%{db.escape_like(term)}%"
    return "AND (" + " OR ".join(f"{col} LIKE %s" for col in columns) + ")", [like] * len(columns)


def build_search_query(
    entity: SearchEntity,
    *,
    term: str,
    selected_category: str | None,
    selected_id: str | None,
    limit: int,
    offset: int,
) -> tuple[str, list[Any]]:
    term_sql, term_params = term_filter(entity, term)
    key_sql, key_params = composite_key_filter(
        entity,
        selected_category=selected_category,
        selected_id=selected_id,
    )
    a = entity.alias
    sql = f"""
        SELECT
          {a}.{entity.id_column} AS id,
          {entity.name_sql} AS name,
          COALESCE(SUM(s.total_case_dispositions), 0) AS total_case_dispositions
        FROM {entity.table} {a}
        JOIN specification s ON s.{entity.spec_key} = {a}.{entity.id_column}
        WHERE {a}.{entity.id_column} != 0
        {entity.type_filter}
        {term_sql}
        {key_sql}
        GROUP BY {a}.{entity.id_column}
        ORDER BY total_case_dispositions DESC
        LIMIT %s OFFSET %s
    """
    return sql, [*term_params, *key_params, limit, offset]


async def search(
    entity: SearchEntity,
    *,
    term: str,
    selected_category: str | None,
    selected_id: str | None,
    limit: int,
    offset: int,
) -> list[dict]:
    sql, params = build_search_query(
        entity,
        term=term,
        selected_category=selected_category,
        selected_id=selected_id,
        limit=limit,
        offset=offset,
    )
    return await db.fetch_all(sql, *params)

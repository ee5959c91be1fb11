"""
Helpers for reading specification rows and comparing against an average.
"""

from __future__ import annotations

from typing import Any, Mapping

ANY_CATEGORY = "any"


def number(row: Mapping[str, Any] | None, field: str | None) -> float:
    # NULL, missing and non-numeric columns all read as 0.
    if row is None or field is None:
        return 0.0
    value = row.get(field)
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def any_row(rows: list[dict[str, Any]]) -> dict[str, Any]:
    """The 'any' trial-category row, or the first row when there is none."""
    return next((row for row in rows if row.get("trial_category") == ANY_CATEGORY), rows[0])


def ratio_to_average(value: float, average: float) -> float:
    # Either side at zero reads as "same as average".
    if average > 0 and value > 0:
        return value / average
    return 1.0

"""
Tooltip text for bail chart values.

Charts only hand back the displayed number, so the formatter has to find the
row it came from. In the comparative view the chart shows
`(ratio - 1) * 100`; the value is mapped back with `value / 100 + 1`
before matching. Rows are matched within MATCH_TOLERANCE because displayed
values have been through float formatting.

One formatter serves the percentage, cost and bucket series; only the row
field and the objective-view template differ.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Sequence

MATCH_TOLERANCE = 0.01
SAME_AS_AVERAGE_THRESHOLD = 0.01

PERCENT_TEMPLATE = "{value:.1f}% | {count} Bail Decisions"
COST_TEMPLATE = "${value:,.0f} average cost | {count} Bail Decisions"
BUCKET_TEMPLATE = "{value:.1f}% of bail costs | {count} Bail Decisions"


class ViewMode(str, Enum):
    OBJECTIVE = "objective"
    COMPARATIVE = "comparative"


def invert_display_value(value: float, view_mode: ViewMode) -> float:
    if view_mode == ViewMode.COMPARATIVE:
        return value / 100 + 1
    return value


def find_matching_row(
    rows: Sequence[Any],
    value: float,
    *,
    field: str,
    view_mode: ViewMode,
    tolerance: float = MATCH_TOLERANCE,
) -> Any | None:
    target = invert_display_value(value, view_mode)
    for row in rows:
        candidate = getattr(row, field, None)
        if candidate is None:
            continue
        if abs(float(candidate) - target) < tolerance:
            return row
    return None


def format_count(count: int | float | None) -> str:
    return f"{int(count or 0):,}"


def format_comparative(value: float, count: int | float | None) -> str:
    decisions = f"{format_count(count)} Bail Decisions"
    if abs(value) < SAME_AS_AVERAGE_THRESHOLD:
        return f"Same as average | {decisions}"
    direction = "above" if value > 0 else "below"
    return f"{abs(value):.1f}% {direction} average | {decisions}"


def format_bail_value(
    value: float | None,
    rows: Sequence[Any],
    *,
    field: str,
    view_mode: ViewMode,
    objective_template: str = PERCENT_TEMPLATE,
    tolerance: float = MATCH_TOLERANCE,
) -> str:
    if value is None or not math.isfinite(value):
        return ""

    row = find_matching_row(rows, value, field=field, view_mode=view_mode, tolerance=tolerance)
    if row is None:
        return ""

    count = getattr(row, "count", 0)
    if view_mode == ViewMode.COMPARATIVE:
        return format_comparative(value, count)
    return objective_template.format(value=value, count=format_count(count))

"""
Result page titles.
"""

from __future__ import annotations

GLOBAL_TITLE = "Global"
TITLE_SEPARATOR = " | "


def format_specification_title(
    court_id: int,
    judge_id: int,
    charge_id: int,
    charge_name: str | None = None,
    *,
    court_name: str | None = None,
    judge_name: str | None = None,
) -> str:
    """
    Title for a (court, judge, charge) specification; 0 means unspecified.

    Segments always run judge, court, charge regardless of argument order.
    """
    if court_id == 0 and judge_id == 0 and charge_id == 0:
        return GLOBAL_TITLE

    segments = []
    if judge_id != 0:
        segments.append(judge_name or "Unknown Judge")
    if court_id != 0:
        segments.append(court_name or "Unknown Court")
    if charge_id != 0:
        segments.append(charge_name or f"Charge #{charge_id}")
    return TITLE_SEPARATOR.join(segments)

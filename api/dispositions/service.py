"""
Charge disposition shaping.

Counts come from the 'any' trial-category row; the bench and jury rows only
supply the per-trial-type totals used by the breakdown.
"""

from __future__ import annotations

import logging
from typing import Any

from core.stats import any_row, number, ratio_to_average

from .schemas import DispositionData, TrialTypeSplit

logger = logging.getLogger(__name__)

TOTAL_FIELD = "total_charges_disposed"

# (column prefix, label). "aquittals" is the column's spelling.
DISPOSITION_TYPES: tuple[tuple[str, str], ...] = (
    ("aquittals", "Acquittal"),
    ("guilty", "Guilty"),
    ("guilty_plea", "Guilty Plea"),
    ("guilty_file", "Guilty File"),
    ("dismissals", "Dismissal"),
    ("conditional_dismissals", "Conditional Dismissal"),
    ("dismissed_lack_of_prosecution", "DLOP"),
    ("no_probable_cause", "No Probable Cause"),
    ("nolle_prosequis", "Nolle Prosequi"),
    ("cwof", "CWOF"),
    ("not_responsible", "Not Responsible"),
    ("responsible", "Responsible"),
)


def _category_row(rows: list[dict[str, Any]], category: str) -> dict[str, Any] | None:
    return next((row for row in rows if row.get("trial_category") == category), None)


def _share(count: float, total: float) -> float:
    return count / total if total > 0 else 0.0


def transform_dispositions_data(rows: list[dict[str, Any]]) -> list[DispositionData]:
    if not rows:
        logger.warning("No specification rows available for disposition transformation")
        return []

    base = any_row(rows)
    total = number(base, TOTAL_FIELD)
    if total == 0:
        logger.warning("Specification %s has no disposed charges", base.get("specification_id"))
        return []

    bench_row = _category_row(rows, "bench_trial")
    jury_row = _category_row(rows, "jury_trial")
    bench_total = number(bench_row, TOTAL_FIELD)
    jury_total = number(jury_row, TOTAL_FIELD)
    untried_total = total - bench_total - jury_total

    result = []
    for field, label in DISPOSITION_TYPES:
        count = number(base, field)
        bench = number(bench_row, field)
        jury = number(jury_row, field)
        untried = count - bench - jury
        result.append(
            DispositionData(
                type=label,
                count=int(count),
                ratio=count / total,
                trial_type_counts=TrialTypeSplit(bench=bench, jury=jury, none=untried),
                trial_type_breakdown=TrialTypeSplit(
                    bench=_share(bench, bench_total),
                    jury=_share(jury, jury_total),
                    none=_share(untried, untried_total),
                ),
            )
        )
    return result


def compare_dispositions_data(
    data: list[DispositionData],
    average_data: list[DispositionData],
) -> list[DispositionData]:
    by_type = {item.type: item for item in average_data}

    compared = []
    for item in data:
        average = by_type.get(item.type)
        if average is None:
            compared.append(
                item.model_copy(
                    update={"ratio": 1.0, "trial_type_breakdown": TrialTypeSplit(bench=1.0, jury=1.0, none=1.0)}
                )
            )
            continue
        breakdown = item.trial_type_breakdown
        average_breakdown = average.trial_type_breakdown
        compared.append(
            DispositionData(
                type=item.type,
                count=item.count,
                ratio=ratio_to_average(item.ratio, average.ratio),
                trial_type_counts=item.trial_type_counts,
                trial_type_breakdown=TrialTypeSplit(
                    bench=ratio_to_average(breakdown.bench, average_breakdown.bench),
                    jury=ratio_to_average(breakdown.jury, average_breakdown.jury),
                    none=ratio_to_average(breakdown.none, average_breakdown.none),
                ),
            )
        )
    return compared

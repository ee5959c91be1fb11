"""
Bail decision shaping.

`transform_bail_data` turns specification rows into one BailDecisionData per
decision type. `compare_bail_data` rewrites those values as ratios against an
average (global) set of rows, which is what the comparative view charts.
"""

from __future__ import annotations

import logging
from typing import Any

from core.stats import any_row, number, ratio_to_average

from .schemas import BailBucket, BailDecisionData

logger = logging.getLogger(__name__)

CASH_BAIL = "Cash Bail"

BAIL_TYPES: tuple[tuple[str, str, str | None], ...] = (
    ("Personal Recognizance", "free_bail", None),
    (CASH_BAIL, "cost_bail", "total_bail_cost"),
    ("Denied", "denied_bail", None),
)

BAIL_BUCKETS: tuple[tuple[str, str], ...] = (
    ("bail_500", "$500"),
    ("bail_1000", "$1,000"),
    ("bail_2000", "$2,000"),
    ("bail_3000", "$3,000"),
    ("bail_5000", "$5,000"),
    ("bail_10000", "$10,000"),
    ("bail_15000", "$15,000"),
    ("bail_20000", "$20,000"),
    ("bail_30000", "$30,000"),
    ("bail_40000", "$40,000"),
    ("bail_50000", "$50,000"),
    ("bail_50000_plus", "$50,000+"),
)


def _bail_buckets(row: dict[str, Any]) -> list[BailBucket]:
    total_cash_bail = number(row, "cost_bail")
    buckets = []
    for field, amount in BAIL_BUCKETS:
        count = number(row, field)
        percentage = count / total_cash_bail * 100 if total_cash_bail > 0 else 0.0
        buckets.append(BailBucket(amount=amount, count=int(count), percentage=percentage))
    return buckets


def transform_bail_data(rows: list[dict[str, Any]]) -> list[BailDecisionData]:
    if not rows:
        logger.warning("No specification rows available for bail transformation")
        return []

    total_decisions = sum(
        number(row, "free_bail") + number(row, "cost_bail") + number(row, "denied_bail") for row in rows
    )

    result = []
    for bail_type, count_field, cost_field in BAIL_TYPES:
        count = sum(number(row, count_field) for row in rows)
        total_cost = sum(number(row, cost_field) for row in rows) if cost_field else 0.0

        item = BailDecisionData(
            type=bail_type,
            count=int(count),
            percentage=count / total_decisions * 100 if total_decisions > 0 else 0.0,
            average_cost=total_cost / count if count > 0 and cost_field else 0.0,
        )
        if bail_type == CASH_BAIL:
            item.bail_buckets = _bail_buckets(any_row(rows))
        result.append(item)
    return result


def _compare_buckets(
    buckets: list[BailBucket] | None,
    average_buckets: list[BailBucket] | None,
) -> list[BailBucket] | None:
    if buckets is None or average_buckets is None:
        return buckets

    by_amount = {bucket.amount: bucket for bucket in average_buckets}
    compared = []
    for bucket in buckets:
        average = by_amount.get(bucket.amount)
        if average is None or average.count == 0:
            compared.append(bucket.model_copy(update={"percentage": 1.0}))
            continue
        compared.append(
            BailBucket(
                amount=bucket.amount,
                count=bucket.count,
                percentage=(
                    ratio_to_average(bucket.percentage, average.percentage) if bucket.count > 0 else 1.0
                ),
            )
        )
    return compared


def compare_bail_data(
    data: list[BailDecisionData],
    average_data: list[BailDecisionData],
) -> list[BailDecisionData]:
    by_type = {item.type: item for item in average_data}

    compared = []
    for item in data:
        average = by_type.get(item.type)
        if average is None or average.count == 0:
            compared.append(item)
            continue
        compared.append(
            BailDecisionData(
                type=item.type,
                count=item.count,
                percentage=ratio_to_average(item.percentage, average.percentage),
                average_cost=ratio_to_average(item.average_cost, average.average_cost),
                bail_buckets=_compare_buckets(item.bail_buckets, average.bail_buckets),
            )
        )
    return compared

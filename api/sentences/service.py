"""
Sentence shaping: fines, fees, probation, incarceration and license
suspensions, each with its distribution buckets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.stats import any_row, number, ratio_to_average

from .schemas import SentenceBucket, SentenceData

logger = logging.getLogger(__name__)

MONEY_BUCKETS: tuple[tuple[str, str], ...] = (
    ("50", "$50"),
    ("100", "$100"),
    ("200", "$200"),
    ("300", "$300"),
    ("500", "$500"),
    ("1000", "$1,000"),
    ("2000", "$2,000"),
    ("3000", "$3,000"),
    ("4000", "$4,000"),
    ("5000", "$5,000"),
    ("5000_plus", "$5,000+"),
)

MONTH_BUCKETS: tuple[tuple[str, str], ...] = tuple(
    (str(months), "1 month" if months == 1 else f"{months} months")
    for months in (1, 2, 3, 4, 6, 8, 10, 12, 15, 18, 21, 24)
) + (("24_plus", "24+ months"),)


@dataclass(frozen=True)
class SentenceType:
    label: str
    count_field: str
    prefix: str
    buckets: tuple[tuple[str, str], ...]
    total_field: str | None = None
    days_field: str | None = None


SENTENCE_TYPES: tuple[SentenceType, ...] = (
    SentenceType("Fine", "fine_count", "fine_", MONEY_BUCKETS, total_field="total_fine"),
    SentenceType("Fee", "fee_count", "fee_", MONEY_BUCKETS, total_field="total_fee"),
    SentenceType("Probation", "probation_count", "probation_", MONTH_BUCKETS, days_field="total_probation_days"),
    SentenceType("Incarceration", "hoc_count", "hoc_", MONTH_BUCKETS, days_field="total_hoc_days"),
    SentenceType(
        "License Suspension",
        "license_lost_count",
        "license_lost_",
        MONTH_BUCKETS,
        days_field="total_license_lost_days",
    ),
)


def _sentence(row: dict[str, Any], sentence_type: SentenceType, total_disposed: float) -> SentenceData:
    count = number(row, sentence_type.count_field)
    buckets = []
    for suffix, label in sentence_type.buckets:
        bucket_count = number(row, sentence_type.prefix + suffix)
        buckets.append(
            SentenceBucket(
                label=label,
                count=int(bucket_count),
                percentage=bucket_count / count * 100 if count > 0 else 0.0,
            )
        )
    return SentenceData(
        type=sentence_type.label,
        count=int(count),
        percentage=count / total_disposed * 100 if total_disposed > 0 else 0.0,
        average_days=number(row, sentence_type.days_field) / count if count > 0 else 0.0,
        average_cost=number(row, sentence_type.total_field) / count if count > 0 else 0.0,
        sentence_buckets=buckets,
    )


def transform_sentences_data(rows: list[dict[str, Any]]) -> list[SentenceData]:
    """
    Counts and buckets come from the 'any' row; the denominator is the
    disposed-charge total summed over every trial category.
    """
    if not rows:
        logger.warning("No specification rows available for sentence transformation")
        return []

    total_disposed = sum(number(row, "total_charges_disposed") for row in rows)
    base = any_row(rows)
    return [_sentence(base, sentence_type, total_disposed) for sentence_type in SENTENCE_TYPES]


def _compare_buckets(buckets: list[SentenceBucket], average_buckets: list[SentenceBucket]) -> list[SentenceBucket]:
    by_label = {bucket.label: bucket for bucket in average_buckets}
    compared = []
    for bucket in buckets:
        average = by_label.get(bucket.label)
        if average is None or average.count == 0 or average.percentage == 0 or bucket.count == 0:
            compared.append(bucket.model_copy(update={"percentage": 1.0}))
            continue
        compared.append(bucket.model_copy(update={"percentage": bucket.percentage / average.percentage}))
    return compared


def compare_sentences_data(data: list[SentenceData], average_data: list[SentenceData]) -> list[SentenceData]:
    by_type = {item.type: item for item in average_data}

    compared = []
    for item in data:
        average = by_type.get(item.type)
        if average is None:
            compared.append(item)
            continue
        compared.append(
            SentenceData(
                type=item.type,
                count=item.count,
                percentage=ratio_to_average(item.percentage, average.percentage),
                average_days=ratio_to_average(item.average_days, average.average_days),
                average_cost=ratio_to_average(item.average_cost, average.average_cost),
                sentence_buckets=_compare_buckets(item.sentence_buckets, average.sentence_buckets),
            )
        )
    return compared

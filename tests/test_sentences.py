"""Tests for sentence shaping and comparison."""

from decimal import Decimal

import pytest

from sentences.service import MONTH_BUCKETS, compare_sentences_data, transform_sentences_data


def _rows(**overrides) -> list[dict]:
    any_row = {
        "trial_category": "any",
        "total_charges_disposed": 80,
        "fine_count": 10,
        "total_fine": Decimal("2500"),
        "fine_100": 4,
        "fine_500": 6,
        "hoc_count": 4,
        "total_hoc_days": 360,
        "hoc_3": 4,
    }
    any_row.update(overrides)
    return [any_row, {"trial_category": "jury_trial", "total_charges_disposed": 20, "fine_count": 99}]


def _by_type(items) -> dict:
    return {item.type: item for item in items}


def _buckets(item) -> dict:
    return {bucket.label: bucket for bucket in item.sentence_buckets}


def test_transform_empty_rows() -> None:
    assert transform_sentences_data([]) == []


def test_transform_percentages_and_averages() -> None:
    data = _by_type(transform_sentences_data(_rows()))

    assert list(data) == ["Fine", "Fee", "Probation", "Incarceration", "License Suspension"]
    fine = data["Fine"]
    # Counts from the 'any' row, denominator summed over all rows.
    assert fine.count == 10
    assert fine.percentage == pytest.approx(10.0)
    assert fine.average_cost == pytest.approx(250.0)
    assert fine.average_days == 0.0
    incarceration = data["Incarceration"]
    assert incarceration.average_days == pytest.approx(90.0)
    assert incarceration.average_cost == 0.0
    assert data["Fee"].count == 0
    assert data["Fee"].percentage == 0.0


def test_transform_buckets() -> None:
    data = _by_type(transform_sentences_data(_rows()))

    fine = _buckets(data["Fine"])
    assert fine["$100"].percentage == pytest.approx(40.0)
    assert fine["$500"].count == 6
    assert fine["$5,000+"].percentage == 0.0
    probation = [bucket.label for bucket in data["Probation"].sentence_buckets]
    assert probation == [label for _, label in MONTH_BUCKETS]
    assert probation[0] == "1 month"
    assert probation[-1] == "24+ months"


def test_compare_against_average() -> None:
    current = transform_sentences_data(_rows())
    average = transform_sentences_data(_rows(fine_count=20, total_fine=Decimal("10000"), fine_100=4, fine_500=16))

    fine = _by_type(compare_sentences_data(current, average))["Fine"]

    assert fine.count == 10
    assert fine.percentage == pytest.approx(0.5)
    assert fine.average_cost == pytest.approx(0.5)
    # No days on either side.
    assert fine.average_days == 1.0
    buckets = _buckets(fine)
    assert buckets["$100"].percentage == pytest.approx(2.0)
    assert buckets["$100"].count == 4
    assert buckets["$500"].percentage == pytest.approx(0.75)
    assert buckets["$50"].percentage == 1.0


def test_compare_bucket_without_current_count() -> None:
    current = transform_sentences_data(_rows(fine_100=0, fine_500=10))
    average = transform_sentences_data(_rows())

    buckets = _buckets(_by_type(compare_sentences_data(current, average))["Fine"])
    assert buckets["$100"].count == 0
    assert buckets["$100"].percentage == 1.0


def test_compare_without_average_type() -> None:
    current = transform_sentences_data(_rows())
    assert compare_sentences_data(current, []) == current

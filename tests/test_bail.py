"""Tests for bail decision shaping and comparison."""

from decimal import Decimal

import pytest

from bail.service import BAIL_BUCKETS, CASH_BAIL, compare_bail_data, transform_bail_data


def _spec_row(**overrides) -> dict:
    row = {
        "trial_category": "any",
        "free_bail": 60,
        "cost_bail": 30,
        "denied_bail": 10,
        "total_bail_cost": Decimal("30000"),
        "bail_500": 15,
        "bail_1000": 15,
    }
    row.update(overrides)
    return row


def _by_type(items) -> dict:
    return {item.type: item for item in items}


def _by_type_amount(items) -> dict:
    cash = _by_type(items)[CASH_BAIL]
    return {bucket.amount: bucket for bucket in cash.bail_buckets}


def test_transform_empty_rows() -> None:
    assert transform_bail_data([]) == []


def test_transform_percentages_and_costs() -> None:
    data = _by_type(transform_bail_data([_spec_row()]))

    assert list(data) == ["Personal Recognizance", CASH_BAIL, "Denied"]
    assert data["Personal Recognizance"].percentage == pytest.approx(60.0)
    assert data[CASH_BAIL].percentage == pytest.approx(30.0)
    assert data["Denied"].percentage == pytest.approx(10.0)
    assert data[CASH_BAIL].count == 30
    assert data[CASH_BAIL].average_cost == pytest.approx(1000.0)
    assert data["Denied"].average_cost == 0.0
    assert data["Denied"].bail_buckets is None


def test_transform_cash_bail_buckets() -> None:
    buckets = _by_type_amount(transform_bail_data([_spec_row()]))

    assert len(buckets) == len(BAIL_BUCKETS)
    assert buckets["$500"].percentage == pytest.approx(50.0)
    assert buckets["$1,000"].percentage == pytest.approx(50.0)
    assert buckets["$50,000+"].count == 0
    assert buckets["$50,000+"].percentage == 0.0


def test_transform_handles_null_and_zero_counts() -> None:
    row = _spec_row(free_bail=None, cost_bail=0, denied_bail=0, total_bail_cost=None)
    data = _by_type(transform_bail_data([row]))

    assert all(item.percentage == 0.0 for item in data.values())
    assert data[CASH_BAIL].average_cost == 0.0
    assert all(bucket.percentage == 0.0 for bucket in data[CASH_BAIL].bail_buckets)


def test_transform_buckets_come_from_any_row() -> None:
    rows = [
        _spec_row(trial_category="bench", bail_500=0, bail_1000=30),
        _spec_row(),
    ]
    buckets = _by_type_amount(transform_bail_data(rows))
    assert buckets["$500"].percentage == pytest.approx(50.0)


def test_compare_against_average() -> None:
    data = transform_bail_data([_spec_row()])
    average = transform_bail_data(
        [_spec_row(free_bail=50, cost_bail=40, total_bail_cost=80000, bail_500=10, bail_1000=30)]
    )
    compared = _by_type(compare_bail_data(data, average))

    assert compared["Personal Recognizance"].percentage == pytest.approx(60 / 50)
    assert compared[CASH_BAIL].percentage == pytest.approx(30 / 40)
    assert compared[CASH_BAIL].average_cost == pytest.approx(1000 / 2000)
    # No cost on either side reads as "same as average".
    assert compared["Denied"].average_cost == 1.0
    assert compared[CASH_BAIL].count == 30


def test_compare_buckets() -> None:
    data = transform_bail_data([_spec_row()])
    average = transform_bail_data([_spec_row(bail_500=10, bail_1000=20)])
    buckets = _by_type_amount(compare_bail_data(data, average))

    assert buckets["$500"].percentage == pytest.approx(50.0 / (10 / 30 * 100))
    # Buckets empty in the average default to 1.0.
    assert buckets["$2,000"].percentage == 1.0


def test_compare_keeps_items_without_average() -> None:
    data = transform_bail_data([_spec_row()])
    assert compare_bail_data(data, []) == data

"""
Chart-ready bail series.

Dataset `data` holds displayed values: raw in the objective view and
`(value - 1) * 100` (percent above/below average) in the comparative view.
Each point carries its tooltip, built by the shared bail formatter.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, Field

from bail.schemas import BailDecisionData
from bail.service import CASH_BAIL

from . import formatters
from .formatters import ViewMode

BAIL_COLOR = "#ff926b"
BUCKET_COLOR = "#f9f871"
COST_COLOR = "#3182CE"

# Smallest axis extent, so an all-zero chart still has a visible range.
MIN_AXIS_EXTENT = 0.25
MIN_BAR_SHARE = 0.05


class DisplayMode(str, Enum):
    FREQUENCY = "frequency"
    SEVERITY = "severity"


class DomainParameters(BaseModel):
    base_buffer: float = 0.6
    min_buffer: float = 0.1
    decay_factor: float = 0.4
    threshold_value: float = 0.5
    safeguard_min: float | None = None


class AxisDomain(BaseModel):
    min: float
    max: float


class ChartDataset(BaseModel):
    label: str = ""
    color: str
    data: list[float | None] = Field(default_factory=list)
    tooltips: list[str] = Field(default_factory=list)


class ChartData(BaseModel):
    labels: list[str] = Field(default_factory=list)
    datasets: list[ChartDataset] = Field(default_factory=list)
    layout: str = "horizontal"
    axis_label: str = ""
    domain: AxisDomain | None = None


def display_value(value: float | None, view_mode: ViewMode) -> float | None:
    if value is None:
        return None
    if view_mode == ViewMode.COMPARATIVE:
        return (value - 1) * 100
    return value


def calculate_dynamic_domain(
    max_value: float,
    params: DomainParameters,
    *,
    comparative: bool,
) -> AxisDomain:
    """
    Axis domain that leaves a buffer past the longest bar. The buffer starts
    at `base_buffer` and decays exponentially towards `min_buffer` once the
    value passes `threshold_value` (scaled by 100 in the comparative view,
    whose values are percentages).
    """
    threshold = params.threshold_value * 100 if comparative else params.threshold_value

    buffer = params.base_buffer
    if max_value > threshold:
        buffer = params.min_buffer + (params.base_buffer - params.min_buffer) * math.exp(
            -params.decay_factor * (max_value - threshold) / threshold
        )

    domain_max = max_value / max(1 - buffer, MIN_BAR_SHARE)
    if comparative:
        return AxisDomain(min=-domain_max, max=domain_max)
    return AxisDomain(min=params.safeguard_min or 0.0, max=domain_max)


def _max_abs(values: Sequence[float | None]) -> float:
    finite = [abs(v) for v in values if v is not None and math.isfinite(v)]
    return max([*finite, MIN_AXIS_EXTENT])


def _dataset(
    rows: Sequence[Any],
    *,
    field: str,
    view_mode: ViewMode,
    color: str,
    template: str,
) -> ChartDataset:
    data = [display_value(getattr(row, field), view_mode) for row in rows]
    tooltips = [
        formatters.format_bail_value(
            value,
            rows,
            field=field,
            view_mode=view_mode,
            objective_template=template,
        )
        for value in data
    ]
    return ChartDataset(color=color, data=data, tooltips=tooltips)


def bail_axis_label(view_mode: ViewMode, display_mode: DisplayMode) -> str:
    if view_mode == ViewMode.COMPARATIVE:
        if display_mode == DisplayMode.FREQUENCY:
            return "Bail Decision Ratio Relative to Average"
        return "Bail Percentage Relative to Average"
    if display_mode == DisplayMode.FREQUENCY:
        return "Percent of Cases"
    return "Percent of Cash Bail Cases"


def build_bail_chart(
    rows: list[BailDecisionData],
    view_mode: ViewMode,
    display_mode: DisplayMode = DisplayMode.FREQUENCY,
) -> ChartData:
    layout = "vertical" if display_mode == DisplayMode.SEVERITY else "horizontal"
    axis_label = bail_axis_label(view_mode, display_mode)

    if display_mode == DisplayMode.FREQUENCY:
        labels = [row.type for row in rows]
        dataset = _dataset(
            rows,
            field="percentage",
            view_mode=view_mode,
            color=BAIL_COLOR,
            template=formatters.PERCENT_TEMPLATE,
        )
    else:
        cash = next((row for row in rows if row.type == CASH_BAIL), None)
        buckets = cash.bail_buckets if cash is not None else None
        if not buckets:
            return ChartData(layout=layout, axis_label=axis_label)
        labels = [bucket.amount for bucket in buckets]
        dataset = _dataset(
            buckets,
            field="percentage",
            view_mode=view_mode,
            color=BUCKET_COLOR,
            template=formatters.BUCKET_TEMPLATE,
        )

    if not labels:
        return ChartData(layout=layout, axis_label=axis_label)

    if view_mode == ViewMode.OBJECTIVE:
        domain = AxisDomain(min=0.0, max=100.0)
    else:
        domain = calculate_dynamic_domain(_max_abs(dataset.data), DomainParameters(), comparative=True)

    return ChartData(
        labels=labels,
        datasets=[dataset],
        layout=layout,
        axis_label=axis_label,
        domain=domain,
    )


def build_cost_chart(rows: list[BailDecisionData], view_mode: ViewMode) -> ChartData:
    axis_label = "Cost Relative to Average" if view_mode == ViewMode.COMPARATIVE else "Average Cost ($)"
    costed = sorted(
        (row for row in rows if row.average_cost > 0),
        key=lambda row: row.average_cost,
        reverse=True,
    )
    if not costed:
        return ChartData(axis_label=axis_label)

    dataset = _dataset(
        costed,
        field="average_cost",
        view_mode=view_mode,
        color=COST_COLOR,
        template=formatters.COST_TEMPLATE,
    )
    domain = calculate_dynamic_domain(
        _max_abs(dataset.data),
        DomainParameters(),
        comparative=view_mode == ViewMode.COMPARATIVE,
    )
    return ChartData(
        labels=[row.type for row in costed],
        datasets=[dataset],
        axis_label=axis_label,
        domain=domain,
    )

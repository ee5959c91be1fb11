"""
Bail decision models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BailBucket(BaseModel):
    amount: str
    count: int = 0
    percentage: float = 0.0


class BailDecisionData(BaseModel):
    type: str
    count: int = 0
    # Raw share (objective) or ratio to the average (comparative).
    percentage: float = 0.0
    average_cost: float = 0.0
    bail_buckets: list[BailBucket] | None = Field(default=None)

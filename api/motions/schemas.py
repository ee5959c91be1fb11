"""
Motion models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MotionOutcome(BaseModel):
    granted: int = 0
    denied: int = 0
    other: int = 0


class ComparativeRatios(BaseModel):
    overall: float = 1.0
    prosecution: float = 1.0
    defense: float = 1.0


class MotionData(BaseModel):
    type: str
    label: str
    count: int = 0
    # All parties.
    status: MotionOutcome = Field(default_factory=MotionOutcome)
    # Motions filed by the commonwealth.
    party_filed: MotionOutcome = Field(default_factory=MotionOutcome)
    # Granted share against the average; only set in the comparative view.
    comparative_ratios: ComparativeRatios | None = None

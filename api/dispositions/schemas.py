"""
Disposition models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TrialTypeSplit(BaseModel):
    bench: float = 0.0
    jury: float = 0.0
    none: float = 0.0


class DispositionData(BaseModel):
    type: str
    count: int = 0
    # Share of all disposed charges (objective) or ratio to the average.
    ratio: float = 0.0
    trial_type_counts: TrialTypeSplit = Field(default_factory=TrialTypeSplit)
    # Share of each trial type's disposed charges (objective) or ratio to the average.
    trial_type_breakdown: TrialTypeSplit = Field(default_factory=TrialTypeSplit)

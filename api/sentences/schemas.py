"""
Sentence models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SentenceBucket(BaseModel):
    label: str
    count: int = 0
    percentage: float = 0.0


class SentenceData(BaseModel):
    type: str
    count: int = 0
    # Percent of disposed charges (objective) or ratio to the average.
    percentage: float = 0.0
    average_days: float = 0.0
    average_cost: float = 0.0
    sentence_buckets: list[SentenceBucket] = Field(default_factory=list)

"""
Pydantic schemas for the results endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .selections import MAX_SELECTIONS, Selection


class EncodeSelectionsRequest(BaseModel):
    selections: list[Selection | None] = Field(default_factory=list, max_length=MAX_SELECTIONS)


class EncodeSelectionsResponse(BaseModel):
    token: str
    url: str

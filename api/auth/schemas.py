"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # Blank values are rejected by the service with a 400, not by validation.
    email: str = Field(default="", max_length=320)
    password: str = Field(default="", max_length=128)


class LoginResponse(BaseModel):
    message: str = "Authentication successful"
    token: str


class UserResponse(BaseModel):
    id: int
    email: str
    created_at: datetime | None = None

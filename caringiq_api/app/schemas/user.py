"""
Pydantic models for user accounts.

Users are not exposed through any endpoint yet; the models exist so
the submission store can hold accounts once sign‑in is added.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["ada"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class User(UserCreate):
    """A stored user account with its assigned ID."""

    id: int

    model_config = {
        "frozen": True,
    }

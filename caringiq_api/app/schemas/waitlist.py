"""
Pydantic schemas for waitlist signups.

A signup carries the visitor's name and email.  The ID and the
creation timestamp are assigned by the submission store.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class WaitlistSignupCreate(BaseModel):
    """Schema for joining the waitlist."""

    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: str = Field(..., min_length=1, examples=["ada@example.com"])


class WaitlistSignup(WaitlistSignupCreate):
    """A stored waitlist signup."""

    id: int
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }

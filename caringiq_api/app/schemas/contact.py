"""
Pydantic schemas for contact form messages.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ContactMessageCreate(BaseModel):
    """Schema for submitting the contact form.

    ``reason`` is the free‑form text the visitor types into the form.
    Unlike waitlist signups, the same email may submit any number of
    messages.
    """

    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: str = Field(..., min_length=1, examples=["ada@example.com"])
    reason: str = Field(..., min_length=1, examples=["I would like a demo for my family."])


class ContactMessage(ContactMessageCreate):
    """A stored contact message."""

    id: int
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }

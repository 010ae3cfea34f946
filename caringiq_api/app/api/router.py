"""
Top‑level API router.

Aggregates the form routers under a single router.  Each form router
defines its paths relative to its own prefix.
"""

from fastapi import APIRouter

from .endpoints import contact, health, waitlist

router = APIRouter()

router.include_router(waitlist.router, prefix="/waitlist", tags=["waitlist"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(health.router, prefix="/health", tags=["health"])

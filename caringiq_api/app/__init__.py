"""
Application package initializer.

This package contains the main entrypoint for the landing page API and
its submodules.  Each form (waitlist, contact) has its own schema,
service and router; all of them share the in‑memory submission store
defined in ``core.storage``.
"""

from .main import app  # noqa: F401

"""
Top‑level package for the CaringIQ landing API.

This file makes ``caringiq_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``caringiq_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

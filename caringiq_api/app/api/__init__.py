"""
API package containing the HTTP routes.

``router.py`` aggregates the per‑form routers from ``endpoints`` into a
single router that ``main.create_app`` mounts under the configured
prefix.
"""

"""
API package.

``router`` aggregates the per-entity routers from ``endpoints``; the
application factory mounts it under ``/api``.
"""

"""
Top‑level router.

Aggregates the route modules.  The string routes are mounted at the
root (``POST /uppercase``, ``POST /count``) to keep the wire paths
stable for existing clients.
"""

from fastapi import APIRouter

from .endpoints import metrics, strings

router = APIRouter()

router.include_router(strings.router, tags=["strings"])
router.include_router(metrics.router, tags=["metrics"])

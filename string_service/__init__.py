"""
Top‑level package for the String Service.

The service exposes two string operations (``uppercase`` and
``count``) through decorated, transport‑independent endpoints.  All
functionality lives in submodules under ``app``; run the HTTP server
with::

    uvicorn string_service.app.main:app
"""

__all__ = []

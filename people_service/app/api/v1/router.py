"""
Top-level router for version 1 of the API.

This router aggregates resource routers under their prefixes.  The
person routes are published at the application root (``/persons``)
rather than under a version prefix because existing clients call them
there.
"""

from fastapi import APIRouter

from .endpoints import persons

router = APIRouter()

router.include_router(persons.router, prefix="/persons", tags=["persons"])

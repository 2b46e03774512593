"""
Top‑level router.

Aggregates the record routes under ``/api/<collection>``, the statistics
route under ``/api`` and the root information route.  The record and
statistics routes are built for the configured profile.
"""

from fastapi import APIRouter

from record_store_api.app.services.profiles import EntityProfile
from .endpoints import info, records, stats


def build_router(profile: EntityProfile) -> APIRouter:
    router = APIRouter()
    router.include_router(info.router, tags=["info"])
    router.include_router(
        records.create_router(profile),
        prefix=f"/api/{profile.collection}",
        tags=[profile.collection],
    )
    router.include_router(stats.create_router(profile), prefix="/api", tags=["stats"])
    return router

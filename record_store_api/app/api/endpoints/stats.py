"""
Statistics endpoint.

``GET /api/stats`` returns the aggregates of the configured profile
(user count and average age, or product stock and value figures).
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from record_store_api.app.api.deps import get_store
from record_store_api.app.services.profiles import EntityProfile
from record_store_api.app.services.record_store import RecordStore


def create_router(profile: EntityProfile) -> APIRouter:
    router = APIRouter()

    @router.get("/stats", response_model=profile.stats_model, summary=f"{profile.label.capitalize()} statistics")
    async def get_stats(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
        """Return aggregates over the current records.

        Averages over an empty store are not guarded and come back as
        ``null``.
        """
        return store.stats()

    return router

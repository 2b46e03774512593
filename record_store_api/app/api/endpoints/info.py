"""
Root information endpoint.

``GET /`` tells a human (or a frontend) which record type this instance
serves, how many records it holds and which routes are available.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from record_store_api.app.api.deps import get_store
from record_store_api.app.schemas.record import ServiceInfo
from record_store_api.app.services.record_store import RecordStore

router = APIRouter()


@router.get("/", response_model=ServiceInfo)
async def get_info(request: Request, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    collection = store.profile.collection
    base = f"/api/{collection}"
    routes = [
        {"method": "GET", "path": base, "summary": f"all {collection}"},
        {"method": "GET", "path": f"{base}/{{id}}", "summary": f"one {store.profile.label} by id"},
        {"method": "POST", "path": base, "summary": f"create a {store.profile.label}"},
        {"method": "PATCH", "path": f"{base}/{{id}}", "summary": f"update a {store.profile.label}"},
        {"method": "DELETE", "path": f"{base}/{{id}}", "summary": f"delete a {store.profile.label}"},
        {"method": "GET", "path": "/api/stats", "summary": "statistics"},
    ]
    if store.profile.searchable:
        routes.append({"method": "GET", "path": f"{base}/search/{{query}}", "summary": "search"})
    return {
        "message": f"{request.app.title} is running",
        "collection": collection,
        "count": len(store),
        "routes": routes,
    }

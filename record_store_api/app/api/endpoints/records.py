"""
CRUD and search endpoints for the configured record type.

The routes are the same for users and products; only the response
models and the presence of the search route depend on the profile, so
the router is built by ``create_router``.  Handlers call the store and
return its result.  Store errors (``InvalidInput``, ``RecordNotFound``)
propagate to the exception handlers registered in ``main``, which turn
them into ``{"error": ...}`` bodies.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from record_store_api.app.api.deps import get_store
from record_store_api.app.schemas.record import ErrorResponse
from record_store_api.app.services.profiles import EntityProfile
from record_store_api.app.services.record_store import RecordStore


def create_router(profile: EntityProfile) -> APIRouter:
    """Build the record routes for ``profile``.

    Mount the result under ``/api/<collection>``.
    """
    router = APIRouter()
    read_model = profile.read_model
    not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
    invalid = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

    @router.get("", response_model=List[read_model], summary=f"List {profile.collection}")
    async def list_records(store: RecordStore = Depends(get_store)) -> List[Dict[str, Any]]:
        """Return every record in insertion order."""
        return store.list()

    @router.post(
        "",
        response_model=read_model,
        status_code=status.HTTP_201_CREATED,
        responses=invalid,
        summary=f"Create a {profile.label}",
    )
    async def create_record(
        payload: Optional[Dict[str, Any]] = Body(None),
        store: RecordStore = Depends(get_store),
    ) -> Dict[str, Any]:
        """Create a record from the posted fields.

        Strings are trimmed and numbers coerced; a fresh id is assigned.
        """
        return store.create(payload)

    if profile.searchable:

        @router.get(
            "/search/{query}",
            response_model=List[read_model],
            summary=f"Search {profile.collection}",
        )
        async def search_records(query: str, store: RecordStore = Depends(get_store)) -> List[Dict[str, Any]]:
            """Case‑insensitive substring search over the searchable fields."""
            return store.search(query)

    @router.get("/{record_id}", response_model=read_model, responses=not_found, summary=f"Get a {profile.label}")
    async def get_record(record_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
        return store.get(record_id)

    @router.patch(
        "/{record_id}",
        response_model=read_model,
        responses={**invalid, **not_found},
        summary=f"Update a {profile.label}",
    )
    async def update_record(
        record_id: str,
        payload: Optional[Dict[str, Any]] = Body(None),
        store: RecordStore = Depends(get_store),
    ) -> Dict[str, Any]:
        """Update only the fields present in the body."""
        return store.update(record_id, payload)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=not_found,
        summary=f"Delete a {profile.label}",
    )
    async def delete_record(record_id: str, store: RecordStore = Depends(get_store)) -> Response:
        store.delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

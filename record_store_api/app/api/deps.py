"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request

from record_store_api.app.services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the store owned by the running application."""
    return request.app.state.store

"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  A single in‑memory store holds the records of one entity
type (users or products); the entity type is chosen at deployment time
through ``RECORD_TYPE`` and described by a profile in
``services/profiles.py``.  Routes live in ``api/endpoints`` and only
translate store results into HTTP responses.
"""

from .main import app  # noqa: F401

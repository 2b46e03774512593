"""
In‑memory record store.

``RecordStore`` holds the records of one entity profile as an ordered
list of dicts.  New records are appended and the order is never changed
otherwise.  Nothing is persisted; the store lives as long as the
process.

One instance is created by the application factory and handed to the
routes through a FastAPI dependency.  Every operation runs under a
re‑entrant lock, so each call completes before the next one observes
the store, whether callers share the event loop or run in threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from record_store_api.app.core.errors import InvalidInput, RecordNotFound, RecordStoreError
from record_store_api.app.core.ids import IdFactory, make_id_factory
from record_store_api.app.services.coercion import is_truthy, to_number
from record_store_api.app.services.profiles import (
    NUMBER,
    PRESENT,
    TRUTHY,
    EntityProfile,
    FieldSpec,
    Record,
)

logger = logging.getLogger(__name__)

# Attempts at drawing an id that no live record uses.
MAX_ID_ATTEMPTS = 10


def is_supplied(payload: Mapping[str, Any], name: str, policy: str) -> bool:
    """Return whether ``payload`` supplies field ``name`` under ``policy``."""
    if name not in payload:
        return False
    if policy == PRESENT:
        return True
    if policy == TRUTHY:
        return is_truthy(payload[name])
    raise ValueError(f"Unknown field policy {policy!r}")


class RecordStore:
    """Ordered in‑memory collection of records of one profile."""

    def __init__(
        self,
        profile: EntityProfile,
        id_factory: Optional[IdFactory] = None,
        records: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> None:
        self.profile = profile
        self._id_factory = id_factory or make_id_factory()
        self._lock = threading.RLock()
        self._records: List[Record] = []
        for record in records or ():
            self._records.append(self._seed_record(record))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list(self) -> List[Record]:
        """Return every record in insertion order."""
        with self._lock:
            return [dict(record) for record in self._records]

    def get(self, record_id: str) -> Record:
        """Return the record with ``record_id`` or raise ``RecordNotFound``."""
        with self._lock:
            return dict(self._find(record_id))

    def search(self, query: str) -> List[Record]:
        """Return records whose searchable fields contain ``query``, ignoring case."""
        if not self.profile.searchable:
            raise InvalidInput(f"search is not supported for {self.profile.collection}")
        needle = query.lower()
        with self._lock:
            return [
                dict(record)
                for record in self._records
                if any(needle in str(record[name]).lower() for name in self.profile.search_fields)
            ]

    def stats(self) -> Dict[str, Any]:
        """Return the profile's aggregates over the current records."""
        with self._lock:
            return self.profile.stats(self._records)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, payload: Optional[Mapping[str, Any]]) -> Record:
        """Validate ``payload``, append a new record and return it.

        Raises ``InvalidInput`` when a required field is missing; nothing
        is stored in that case.
        """
        payload = payload or {}
        for spec in self.profile.fields:
            if not is_supplied(payload, spec.name, spec.create_policy):
                raise InvalidInput(self.profile.missing_fields_message)
        values = {spec.name: self._normalize(spec, payload[spec.name]) for spec in self.profile.fields}

        with self._lock:
            record: Record = {"id": self._new_id()}
            record.update(values)
            self._records.append(record)
            logger.info("Created %s %s (id=%s)", self.profile.label, record.get("name"), record["id"])
            return dict(record)

    def update(self, record_id: str, payload: Optional[Mapping[str, Any]]) -> Record:
        """Apply the supplied fields of ``payload`` to a record and return it.

        Raises ``RecordNotFound`` for an unknown id and ``InvalidInput``
        when ``payload`` contains none of the profile's fields.  Fields
        are applied according to their update policy; ``id`` is never
        changed.
        """
        payload = payload or {}
        with self._lock:
            record = self._find(record_id)
            if not any(name in payload for name in self.profile.field_names):
                raise InvalidInput("nothing to update")

            changes = {
                spec.name: self._normalize(spec, payload[spec.name])
                for spec in self.profile.fields
                if is_supplied(payload, spec.name, spec.update_policy)
            }
            record.update(changes)
            logger.info(
                "Updated %s %s (id=%s, fields=%s)",
                self.profile.label,
                record.get("name"),
                record["id"],
                ", ".join(changes) or "-",
            )
            return dict(record)

    def delete(self, record_id: str) -> None:
        """Remove the record with ``record_id``; raise ``RecordNotFound`` if absent."""
        with self._lock:
            record = self._find(record_id)
            self._records = [item for item in self._records if item["id"] != record_id]
            logger.info("Deleted %s %s (id=%s)", self.profile.label, record.get("name"), record_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _find(self, record_id: str) -> Record:
        for record in self._records:
            if record["id"] == record_id:
                return record
        raise RecordNotFound(self.profile.not_found_message)

    def _new_id(self) -> str:
        live = {record["id"] for record in self._records}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in live:
                return candidate
        raise RecordStoreError("could not allocate a unique record id")

    def _seed_record(self, data: Mapping[str, Any]) -> Record:
        record: Record = {"id": data.get("id") or self._new_id()}
        for spec in self.profile.fields:
            record[spec.name] = self._normalize(spec, data[spec.name])
        return record

    @staticmethod
    def _normalize(spec: FieldSpec, value: Any) -> Any:
        if spec.kind == NUMBER:
            return to_number(value)
        if not isinstance(value, str):
            raise InvalidInput(f"{spec.name} must be a string")
        return value.strip()

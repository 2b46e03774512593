"""Record Store API client.

A thin wrapper around the REST API served by ``record_store_api``.  The
client uses the ``requests`` library internally and exposes one method
per route:

* :meth:`list_records` – return every record of the collection.
* :meth:`get_record` – fetch a single record by its identifier.
* :meth:`create_record` – create a record from a dict of fields.
* :meth:`update_record` – partially update a record.
* :meth:`delete_record` – delete a record.
* :meth:`search_records` – substring search (products only).
* :meth:`get_stats` – collection statistics.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a dict with
keys ``status_code`` and ``message`` (the server's ``error`` text when
it sent one).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecordStoreClient:
    """Client for one collection (``users`` or ``products``) of the API."""

    def __init__(
        self,
        *,
        base_url: str,
        collection: str = "products",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:3000``.
            collection: Collection served by the API, ``users`` or
                ``products``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.collection = collection.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # Response objects are falsy for 4xx/5xx, so compare with None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _record_path(self, record_id: Any = None) -> str:
        path = f"/api/{self.collection}"
        if record_id is not None:
            path = f"{path}/{quote(str(record_id), safe='')}"
        return path

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def list_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._record_path())
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_record(self, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._record_path(record_id))

    def create_record(self, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record; the server assigns its id."""
        return self._request("POST", self._record_path(), json_body=fields)

    def update_record(
        self, record_id: Any, fields: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send only the fields to change."""
        return self._request("PATCH", self._record_path(record_id), json_body=fields)

    def delete_record(self, record_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._record_path(record_id))
        if error:
            return False, error
        return True, None

    def search_records(self, query: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        path = f"{self._record_path()}/search/{quote(query, safe='')}"
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/stats")

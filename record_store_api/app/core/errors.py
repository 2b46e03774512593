"""
Error kinds raised by the record store.

Only two kinds reach clients as such: ``InvalidInput`` (HTTP 400) and
``RecordNotFound`` (HTTP 404).  Both carry a single human readable
message which the API returns as ``{"error": message}``.  Anything else
derived from ``RecordStoreError`` is an internal failure and is reported
as a generic 500.
"""


class RecordStoreError(Exception):
    """Base class for store errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(RecordStoreError):
    """Missing or unusable fields on a write."""

    status_code = 400


class RecordNotFound(RecordStoreError):
    """No record has the requested id."""

    status_code = 404

"""
Service layer.

``record_store`` holds the records and enforces validation, ``profiles``
describes the two record types the service can run with, and
``coercion`` implements the loose number/truthiness rules applied to
incoming JSON.  Swapping the in‑memory list for a database would only
touch ``record_store``.
"""

"""
Pydantic schema definitions for API responses.

Request bodies are accepted as plain JSON objects and validated by the
store itself (presence and coercion only), so only the shapes returned
to clients are declared here.
"""

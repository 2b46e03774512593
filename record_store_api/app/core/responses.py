"""
JSON response class used by every route.

Statistics over an empty store divide by zero and produce NaN or
Infinity.  Standard JSON has no representation for these values, so
they are rendered as ``null``, the same way browsers' ``JSON.stringify``
does.
"""

import json
import math
from typing import Any

from fastapi.responses import JSONResponse


def replace_non_finite(value: Any) -> Any:
    """Recursively replace NaN and ±Infinity floats with ``None``."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [replace_non_finite(item) for item in value]
    return value


class RecordJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(
            replace_non_finite(content),
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")

"""
Value coercion helpers for request payloads.

Clients send loosely typed JSON and the store accepts whatever coerces:
``"42"`` is a valid age, ``""`` counts as zero, and input that does not
parse becomes NaN rather than being rejected.  The helpers below follow
the browser ``Number()``/truthiness rules the API has always used, so
existing clients keep getting the same results.
"""

import math
import re
from typing import Any, Union

Number = Union[int, float]

NAN = float("nan")

# Largest integer that a float represents exactly.
_MAX_SAFE_INTEGER = 2 ** 53 - 1

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def _normalize(value: float) -> Number:
    if math.isfinite(value) and value.is_integer() and abs(value) <= _MAX_SAFE_INTEGER:
        return int(value)
    return value


def _from_int(value: int) -> Number:
    # Numbers are doubles: integers beyond 2**53 lose precision and
    # anything past the float range becomes ±Infinity.
    if abs(value) <= _MAX_SAFE_INTEGER:
        return value
    try:
        return _normalize(float(value))
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_number(text: str) -> Number:
    text = text.strip()
    if not text:
        return 0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if _PREFIXED_RE.match(text):
        return _from_int(int(text, 0))
    if _DECIMAL_RE.match(text):
        return _normalize(float(text))
    return NAN


def to_number(value: Any) -> Number:
    """Coerce ``value`` to a number the way ``Number(value)`` does.

    ``None``, ``""`` and ``[]`` become 0, booleans become 0/1, numeric
    strings are parsed (surrounding whitespace ignored) and everything
    else becomes NaN.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _from_int(value)
    if isinstance(value, float):
        return _normalize(value)
    if isinstance(value, str):
        return _parse_number(value)
    if isinstance(value, list):
        if not value:
            return 0
        if len(value) == 1 and not isinstance(value[0], (list, dict)):
            return to_number("" if value[0] is None else str(value[0]))
        return NAN
    return NAN


def is_truthy(value: Any) -> bool:
    """Return whether ``value`` counts as "filled in".

    ``None``, ``False``, ``0``, NaN and ``""`` are falsy.  Empty lists and
    objects are truthy.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def round_half_up(value: Number) -> Number:
    """Round to the nearest integer, halves towards +Infinity.

    Non‑finite values are returned unchanged.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def divide(numerator: Number, denominator: Number) -> float:
    """Divide without guarding against zero.

    ``0 / 0`` (or NaN / 0) is NaN and ``x / 0`` is ±Infinity, matching
    IEEE float division instead of raising ``ZeroDivisionError``.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        return math.copysign(math.inf, numerator)
    return numerator / denominator

# oilmart/core/forms.py
"""
Coercion helpers for raw form fields.

Admin forms post every field as the string the input currently holds.
These helpers turn them into numbers the way a browser form handler does:
the leading number is parsed and anything that does not start with one
is treated as "no value" (None) rather than rejected.
"""
import math
import re

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_float(raw: str | None) -> float | None:
    """
    Parse the leading decimal number of `raw`.

    "12.5" -> 12.5, "12abc" -> 12.0, "" -> None, "abc" -> None
    """
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return None
    value = float(match.group(1))
    if math.isinf(value):
        return None
    return value


def parse_int(raw: str | None) -> int | None:
    """
    Parse the leading integer of `raw`.

    "150" -> 150, "12.9" -> 12, "" -> None
    """
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(1))


def optional_float(raw: str | None) -> float | None:
    """Empty input means "not set"; otherwise parse like `parse_float`."""
    if raw is None or not raw.strip():
        return None
    return parse_float(raw)


def optional_text(raw: str | None) -> str | None:
    """Empty input means "not set"."""
    if raw is None or not raw.strip():
        return None
    return raw


def format_number(value: float) -> str:
    """
    Render a number without a trailing ".0" for whole values.

    50.0 -> "50", 12.5 -> "12.5"
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

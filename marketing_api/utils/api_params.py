"""Helpers for lenient API id parsing."""

from __future__ import annotations

import math
import re
from typing import Any, Optional


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """Parse ``value`` as a base-10 integer, returning ``None`` when it is not numeric.

    Strings are read up to the first non-digit, so ``"12abc"`` gives 12 while
    ``"abc"`` and ``""`` give ``None``. Finite floats are truncated toward zero.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_ids(values: list[Any]) -> list[int]:
    """Keep the numeric entries of ``values`` in order, silently dropping the rest."""
    parsed = []
    for value in values:
        number = parse_int(value)
        if number is not None:
            parsed.append(number)
    return parsed


def display_value(value: Any) -> str:
    """Render a raw request value the way it reads in an error message."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(display_value(v) for v in value)
    return str(value)

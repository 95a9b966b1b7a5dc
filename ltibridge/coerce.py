"""Lenient numeric coercion for values read from content records.

``get_long_null("")`` is ``-1`` while ``get_double_null("")`` is ``None``.
Callers rely on both, so the two stay different.
"""

from __future__ import annotations

import numbers
import re
from typing import Any

from ltibridge.exceptions import ValidationError

_LONG = re.compile(r"[+-]?\d+")


def get_long_null(value: Any) -> int | None:
    """Coerce to ``int``; ``None`` when that is not possible.

    Strings must be plain decimal digits with an optional sign: no blanks,
    no ``_`` separators.  Booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return None
    if isinstance(value, str):
        if value == "":
            return -1
        if not _LONG.fullmatch(value):
            return None
        return int(value)
    return None


def get_double_null(value: Any) -> float | None:
    """Coerce to ``float``; ``None`` when that is not possible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        if value == "" or value.lower() == "null" or "_" in value:
            return None
        try:
            return float(value)
        except ValueError:
            return None
    return None


def get_rounded_grade(grade: float, points: float) -> str:
    """Scale a 0..1 grade to ``points`` and round to two places."""
    if grade < 0.0 or grade > 1.0:
        raise ValidationError(f"Grade {grade} is outside 0.0 - 1.0")
    if points < 0.0:
        raise ValidationError(f"Points {points} must not be negative")
    return str(round(grade * points, 2))

"""Calendar date helpers."""

import math
from datetime import date


def days_between(start: date | None, end: date | None) -> int | None:
    """Whole calendar days from ``start`` to ``end``; None if either is missing."""
    if start is None or end is None:
        return None
    return (end - start).days


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)

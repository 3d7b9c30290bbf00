"""Numeric helpers shared by the analytics modules."""

from __future__ import annotations

import math


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, returning ``0.0`` when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (62.5 -> 63).

    Built-in :func:`round` rounds ties to even, which would shift grade
    boundaries for scores landing exactly on ``.5``.
    """
    return int(math.floor(value + 0.5))

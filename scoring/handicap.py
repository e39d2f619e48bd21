"""Handicap stroke allocation.

A player receives strokes on the hardest holes first, ranked by stroke
index (1 = hardest, 18 = easiest):

- handicap 13: 1 stroke on stroke-index holes 1-13, none on 14-18
- handicap 20: 1 stroke everywhere, plus a second on stroke-index 1-2
"""

from __future__ import annotations

import math

HOLES_PER_ROUND = 18


def round_handicap(value: float) -> int:
    """Round to the nearest whole stroke, halves away from zero (12.5 -> 13)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def effective_handicap(handicap: float, half_handicap: bool = False) -> int:
    """Whole-number playing handicap, optionally halved before rounding."""
    return round_handicap(handicap / 2.0 if half_handicap else handicap)


def strokes_for_hole(handicap: float, hole_handicap: int, half_handicap: bool = False) -> int:
    """Strokes received on a hole with the given stroke index."""
    playing = effective_handicap(handicap, half_handicap)

    if playing <= HOLES_PER_ROUND:
        return 1 if hole_handicap <= playing else 0

    remainder = playing % HOLES_PER_ROUND
    if remainder > 0 and hole_handicap <= remainder:
        return 2
    return 1


def net_score(gross: int, strokes: int) -> int:
    """Gross minus strokes received, never below zero."""
    return max(0, gross - strokes)

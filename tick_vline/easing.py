"""Segment easing helpers for the V-line glyph."""
from __future__ import annotations

import math


def clamped_remainder(p: float, i: int, n: int) -> float:
    return max(0.0, p - i / n)


def segment_share(p: float, i: int, n: int) -> float:
    """Share of progress ``p`` owned by segment ``i`` of ``n``, in [0, 1]."""
    return min(1 / n, clamped_remainder(p, i, n)) * n


def envelope(p: float) -> float:
    return math.sin(p * math.pi)

"""Immutable layout and timing configuration."""
from __future__ import annotations

from dataclasses import dataclass

from tick_vline.constants import (
    BACK_COLOR,
    FORE_COLOR,
    LINE_CAP,
    LINE_COUNT,
    NODE_COUNT,
    RADIUS_FACTOR,
    SCALE_GAP,
    SCREEN_H,
    SCREEN_W,
    SIZE_FACTOR,
    STROKE_FACTOR,
    TICK_PERIOD_MS,
)
from tick_vline.types import Color


@dataclass(frozen=True, slots=True)
class VLineConfig:
    """Surface size plus the fixed constants the glyph row is drawn with.

    Derived values (``gap``, ``size``, ``line_width``, ``radius``) are
    computed from the surface size the same way on every read.
    """

    width: float = SCREEN_W
    height: float = SCREEN_H
    node_count: int = NODE_COUNT
    lines: int = LINE_COUNT
    size_factor: float = SIZE_FACTOR
    stroke_factor: float = STROKE_FACTOR
    radius_factor: float = RADIUS_FACTOR
    scale_gap: float = SCALE_GAP
    tick_period: float = TICK_PERIOD_MS
    fore_color: Color = FORE_COLOR
    back_color: Color = BACK_COLOR
    line_cap: str = LINE_CAP

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface size must be positive")
        if self.node_count <= 0:
            raise ValueError("node_count must be positive")
        if self.lines <= 0:
            raise ValueError("lines must be positive")

    @classmethod
    def from_surface(cls, width: float, height: float) -> VLineConfig:
        return cls(width=width, height=height)

    @property
    def gap(self) -> float:
        return self.width / (self.node_count + 1)

    @property
    def size(self) -> float:
        return self.gap / self.size_factor

    @property
    def line_width(self) -> float:
        return min(self.width, self.height) / self.stroke_factor

    @property
    def radius(self) -> float:
        """Circle radius at full scale."""
        return self.size / self.radius_factor

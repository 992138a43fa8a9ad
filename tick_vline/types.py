"""Shared type aliases and protocols for tick-vline."""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

Color = tuple[int, int, int]

Callback = Callable[[], None]


@runtime_checkable
class RenderSink(Protocol):
    """Drawing surface the glyph row renders into.

    Implementations keep a local coordinate transform that ``translate``
    moves and ``save``/``restore`` push and pop, together with the current
    colors, line width and line cap.
    """

    def set_stroke_color(self, color: Color) -> None: ...
    def set_fill_color(self, color: Color) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_line_cap(self, cap: str) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def circle(self, x: float, y: float, r: float) -> None: ...
    def clear(self, color: Color) -> None: ...

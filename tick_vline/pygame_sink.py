"""RenderSink over a pygame Surface."""
from __future__ import annotations

from dataclasses import dataclass, replace

import pygame

from tick_vline.types import Color


@dataclass(frozen=True, slots=True)
class _DrawState:
    offset_x: float = 0.0
    offset_y: float = 0.0
    stroke: Color = (0, 0, 0)
    fill: Color = (0, 0, 0)
    line_width: float = 1.0
    line_cap: str = "butt"


class PygameSink:
    """Adds the canvas-style state stack pygame.draw does not have.

    ``translate`` shifts an offset applied to every primitive, ``save`` and
    ``restore`` push and pop the whole drawing state. ``"round"`` line caps
    are drawn as discs at both ends of the stroke.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._state = _DrawState()
        self._stack: list[_DrawState] = []

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def set_stroke_color(self, color: Color) -> None:
        self._state = replace(self._state, stroke=color)

    def set_fill_color(self, color: Color) -> None:
        self._state = replace(self._state, fill=color)

    def set_line_width(self, width: float) -> None:
        self._state = replace(self._state, line_width=width)

    def set_line_cap(self, cap: str) -> None:
        self._state = replace(self._state, line_cap=cap)

    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        s = self._state
        self._state = replace(s, offset_x=s.offset_x + dx, offset_y=s.offset_y + dy)

    def _to_surface(self, x: float, y: float) -> tuple[float, float]:
        return (x + self._state.offset_x, y + self._state.offset_y)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        s = self._state
        start = self._to_surface(x1, y1)
        end = self._to_surface(x2, y2)
        width = max(1, round(s.line_width))
        pygame.draw.line(self._surface, s.stroke, start, end, width)
        if s.line_cap == "round":
            cap_r = s.line_width / 2
            pygame.draw.circle(self._surface, s.stroke, start, cap_r)
            pygame.draw.circle(self._surface, s.stroke, end, cap_r)

    def circle(self, x: float, y: float, r: float) -> None:
        if r <= 0:
            return
        pygame.draw.circle(self._surface, self._state.fill, self._to_surface(x, y), r)

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

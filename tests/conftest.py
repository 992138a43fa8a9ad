from __future__ import annotations

import pytest

from tick_vline.config import VLineConfig


class RecordingSink:
    """RenderSink fake that records every call as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def set_stroke_color(self, color):
        self.calls.append(("stroke_color", color))

    def set_fill_color(self, color):
        self.calls.append(("fill_color", color))

    def set_line_width(self, width):
        self.calls.append(("line_width", width))

    def set_line_cap(self, cap):
        self.calls.append(("line_cap", cap))

    def save(self):
        self.calls.append(("save",))

    def restore(self):
        self.calls.append(("restore",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2))

    def circle(self, x, y, r):
        self.calls.append(("circle", x, y, r))

    def clear(self, color):
        self.calls.append(("clear", color))

    def of_kind(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def config() -> VLineConfig:
    return VLineConfig(width=600, height=400)

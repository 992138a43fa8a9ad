"""GlyphNode - one V-line-to-circle glyph in the row."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_vline.easing import envelope, segment_share
from tick_vline.progress import ProgressState
from tick_vline.types import Callback

if TYPE_CHECKING:
    from tick_vline.config import VLineConfig
    from tick_vline.types import RenderSink


class GlyphNode:
    __slots__ = ("index", "state", "prev", "next")

    def __init__(self, index: int, gap: float) -> None:
        self.index = index
        self.state = ProgressState(gap=gap)
        self.prev: GlyphNode | None = None
        self.next: GlyphNode | None = None

    def __repr__(self) -> str:
        return f"GlyphNode(index={self.index}, scale={self.state.scale:.2f})"

    def draw(self, sink: RenderSink, config: VLineConfig) -> None:
        """Draw this glyph at its slot in the row."""
        scale = self.state.scale
        size = config.size
        sink.set_fill_color(config.fore_color)
        sink.set_stroke_color(config.fore_color)
        sink.set_line_width(config.line_width)
        sink.set_line_cap(config.line_cap)
        sink.save()
        sink.translate(config.gap * (self.index + 1), config.height / 2)
        swing = envelope(scale)
        for i in range(config.lines):
            sf = segment_share(swing, i, config.lines)
            sink.line(0, 0, size * sf * (1 - 2 * i), -size * sf)
        sink.circle(0, 0, config.radius * scale)
        sink.restore()

    def update(self, on_complete: Callback | None = None) -> bool:
        return self.state.update(on_complete)

    def start_updating(self, on_start: Callback | None = None) -> bool:
        return self.state.start_updating(on_start)

    def neighbor(self, direction: int, on_boundary: Callback) -> GlyphNode:
        """Step one node in ``direction``; at an end, signal and stay put."""
        node = self.prev if direction == -1 else self.next
        if node is None:
            on_boundary()
            return self
        return node


def build_chain(count: int, gap: float) -> list[GlyphNode]:
    """Create ``count`` nodes with prev/next links wired in index order."""
    nodes = [GlyphNode(i, gap) for i in range(count)]
    for left, right in zip(nodes, nodes[1:]):
        left.next = right
        right.prev = left
    return nodes

"""GlyphSequence - picks which glyph toggles next."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_vline.nodes import GlyphNode, build_chain
from tick_vline.types import Callback

if TYPE_CHECKING:
    from tick_vline.config import VLineConfig
    from tick_vline.types import RenderSink

log = logging.getLogger(__name__)


class GlyphSequence:
    """Walks the glyph chain one toggle at a time, bouncing at either end.

    The current node finishes its own toggle before control passes to its
    neighbor. When there is no neighbor in the traversal direction, the
    direction reverses and the same node stays current, so it toggles back
    before the walk heads the other way.
    """

    def __init__(self, config: VLineConfig) -> None:
        self._config = config
        self._nodes = build_chain(config.node_count, config.scale_gap)
        self._current = self._nodes[0]
        self._direction = 1

    @property
    def nodes(self) -> tuple[GlyphNode, ...]:
        return tuple(self._nodes)

    @property
    def head(self) -> GlyphNode:
        return self._nodes[0]

    @property
    def current(self) -> GlyphNode:
        return self._current

    @property
    def current_index(self) -> int:
        return self._current.index

    @property
    def direction(self) -> int:
        return self._direction

    def draw(self, sink: RenderSink) -> None:
        node: GlyphNode | None = self.head
        while node is not None:
            node.draw(sink, self._config)
            node = node.next

    def start_updating(self, on_start: Callback | None = None) -> bool:
        started = self._current.start_updating(on_start)
        if started:
            log.debug(
                "node %d toggling, direction=%d",
                self._current.index,
                self._current.state.direction,
            )
        return started

    def _flip(self) -> None:
        self._direction *= -1
        log.debug(
            "boundary at node %d, traversal direction now %d",
            self._current.index,
            self._direction,
        )

    def update(self, on_complete: Callback | None = None) -> bool:
        def advance() -> None:
            self._current = self._current.neighbor(self._direction, self._flip)
            if on_complete is not None:
                on_complete()

        return self._current.update(advance)

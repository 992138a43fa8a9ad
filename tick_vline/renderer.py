"""Renderer - wires pointer input, the loop, and the glyph row together."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_vline.config import VLineConfig
from tick_vline.loop import LoopDriver
from tick_vline.sequence import GlyphSequence
from tick_vline.types import Callback

if TYPE_CHECKING:
    from tick_vline.types import RenderSink


class Renderer:
    def __init__(
        self,
        config: VLineConfig | None = None,
        loop: LoopDriver | None = None,
    ) -> None:
        self._config = config if config is not None else VLineConfig()
        self._sequence = GlyphSequence(self._config)
        self._loop = loop if loop is not None else LoopDriver(self._config.tick_period)

    @property
    def config(self) -> VLineConfig:
        return self._config

    @property
    def sequence(self) -> GlyphSequence:
        return self._sequence

    @property
    def loop(self) -> LoopDriver:
        return self._loop

    @property
    def is_animating(self) -> bool:
        return self._loop.running

    def render(self, sink: RenderSink) -> None:
        sink.clear(self._config.back_color)
        self._sequence.draw(sink)

    def on_interaction(self, redraw: Callback) -> None:
        """Run one full toggle of the current glyph, redrawing every tick.

        Ignored while the current glyph is still mid-toggle.
        """

        def on_complete() -> None:
            self._loop.stop()
            redraw()

        def tick() -> None:
            redraw()
            self._sequence.update(on_complete)

        self._sequence.start_updating(lambda: self._loop.start(tick))

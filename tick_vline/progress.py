"""Per-glyph animation progress."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from tick_vline.constants import SCALE_GAP
from tick_vline.types import Callback

log = logging.getLogger(__name__)


@dataclass
class ProgressState:
    """Eases ``scale`` between the resting values 0 and 1.

    ``direction`` is 0 while idle, in which case ``scale == settled``.
    A toggle moves ``scale`` by ``gap`` per update until it has travelled
    more than one unit from ``settled``, then snaps to the new resting value.
    """

    scale: float = 0.0
    direction: int = 0
    settled: float = 0.0
    gap: float = SCALE_GAP

    @property
    def animating(self) -> bool:
        return self.direction != 0

    def update(self, on_complete: Callback | None = None) -> bool:
        """Advance one step. Returns True on the step that completes the toggle."""
        self.scale += self.gap * self.direction
        if abs(self.scale - self.settled) > 1:
            self.scale = self.settled + self.direction
            self.direction = 0
            self.settled = self.scale
            log.debug("progress settled at %s", self.settled)
            if on_complete is not None:
                on_complete()
            return True
        return False

    def start_updating(self, on_start: Callback | None = None) -> bool:
        """Begin a toggle toward the opposite resting value.

        Ignored while a toggle is already in flight.
        """
        if self.direction != 0:
            return False
        self.direction = int(1 - 2 * self.settled)
        if on_start is not None:
            on_start()
        return True

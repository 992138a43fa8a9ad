"""LoopDriver - a start/stop-able fixed-period repeating timer."""
from __future__ import annotations

import logging
import time

from tick_vline.constants import TICK_PERIOD_MS
from tick_vline.types import Callback

log = logging.getLogger(__name__)


class LoopDriver:
    """Invokes one tick callback every ``period`` milliseconds while running.

    The host supplies time: either by calling ``advance`` with the elapsed
    milliseconds of each frame, or by blocking in ``run``. At most one
    callback is installed at a time; ``start`` and ``stop`` do nothing when
    the driver is already in the requested state.
    """

    def __init__(self, period: float = TICK_PERIOD_MS) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._period = period
        self._running = False
        self._tick: Callback | None = None
        self._handle: int | None = None
        self._next_handle = 1
        self._accumulator = 0.0
        self._tick_count = 0

    @property
    def period(self) -> float:
        return self._period

    @property
    def running(self) -> bool:
        return self._running

    @property
    def handle(self) -> int | None:
        """Identifier of the installed callback, None while stopped."""
        return self._handle

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def start(self, tick: Callback) -> None:
        if self._running:
            return
        self._running = True
        self._tick = tick
        self._handle = self._next_handle
        self._next_handle += 1
        self._accumulator = 0.0
        log.debug("loop %d started, period=%sms", self._handle, self._period)

    def stop(self) -> None:
        if not self._running:
            return
        log.debug("loop %d stopped after %d ticks", self._handle, self._tick_count)
        self._running = False
        self._tick = None
        self._handle = None
        self._accumulator = 0.0

    def _fire(self) -> None:
        self._tick_count += 1
        if self._tick is not None:
            self._tick()

    def advance(self, elapsed: float) -> int:
        """Feed ``elapsed`` milliseconds; fire every whole period that passed.

        Returns the number of ticks fired. A tick that stops the driver
        discards whatever time is left over.
        """
        if not self._running:
            return 0
        self._accumulator += elapsed
        fired = 0
        while self._running and self._accumulator >= self._period:
            self._accumulator -= self._period
            fired += 1
            self._fire()
        return fired

    def run(self) -> None:
        """Block, firing ticks at the period until a tick calls ``stop``."""
        period_s = self._period / 1000.0
        next_at = time.monotonic() + period_s
        while self._running:
            sleep_time = next_at - time.monotonic()
            if sleep_time > 0:
                time.sleep(sleep_time)
            next_at += period_s
            self._fire()

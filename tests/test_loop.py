"""Tests for LoopDriver start/stop and pacing."""
from unittest.mock import patch

import pytest

from tick_vline.loop import LoopDriver


# --- Construction ---

def test_default_period():
    assert LoopDriver().period == 30


@pytest.mark.parametrize("period", [0, -5])
def test_rejects_non_positive_period(period):
    with pytest.raises(ValueError):
        LoopDriver(period)


# --- start / stop ---

def test_start_installs_callback():
    driver = LoopDriver(30)
    driver.start(lambda: None)
    assert driver.running
    assert driver.handle is not None


def test_start_twice_installs_one_callback():
    """A second start neither doubles the rate nor replaces the callback."""
    driver = LoopDriver(30)
    first, second = [], []
    driver.start(lambda: first.append(1))
    handle = driver.handle
    driver.start(lambda: second.append(1))
    assert driver.handle == handle

    fired = driver.advance(300)
    assert fired == 10
    assert len(first) == 10
    assert second == []


def test_stop_clears_callback():
    driver = LoopDriver(30)
    calls = []
    driver.start(lambda: calls.append(1))
    driver.stop()
    assert not driver.running
    assert driver.handle is None
    assert driver.advance(300) == 0
    assert calls == []


def test_stop_when_stopped_is_no_op():
    driver = LoopDriver(30)
    driver.stop()
    driver.stop()
    assert not driver.running


def test_restart_gets_new_handle():
    driver = LoopDriver(30)
    driver.start(lambda: None)
    first = driver.handle
    driver.stop()
    driver.start(lambda: None)
    assert driver.handle != first


# --- advance ---

def test_advance_accumulates_partial_periods():
    driver = LoopDriver(30)
    calls = []
    driver.start(lambda: calls.append(1))
    assert driver.advance(20) == 0
    assert driver.advance(20) == 1
    assert driver.advance(20) == 1
    assert len(calls) == 2


def test_tick_that_stops_ends_the_burst():
    """Ticks stop firing as soon as a tick calls stop()."""
    driver = LoopDriver(10)
    calls = []

    def tick():
        calls.append(1)
        if len(calls) == 3:
            driver.stop()

    driver.start(tick)
    assert driver.advance(1000) == 3
    assert len(calls) == 3
    assert not driver.running


def test_tick_count_spans_runs():
    driver = LoopDriver(10)
    driver.start(lambda: None)
    driver.advance(50)
    driver.stop()
    driver.start(lambda: None)
    driver.advance(20)
    assert driver.tick_count == 7


# --- run ---

def test_run_stops_on_request():
    driver = LoopDriver(1)
    ticks = []

    def tick():
        ticks.append(len(ticks) + 1)
        if len(ticks) >= 5:
            driver.stop()

    driver.start(tick)
    driver.run()
    assert ticks == [1, 2, 3, 4, 5]


def test_run_when_stopped_returns_immediately():
    driver = LoopDriver(1000)
    with patch("tick_vline.loop.time.sleep") as sleep:
        driver.run()
    sleep.assert_not_called()
    assert driver.tick_count == 0


def test_run_sleeps_between_ticks():
    driver = LoopDriver(30)
    count = [0]

    def tick():
        count[0] += 1
        if count[0] >= 3:
            driver.stop()

    driver.start(tick)
    with patch("tick_vline.loop.time.sleep") as sleep:
        driver.run()
    assert count[0] == 3
    assert sleep.call_count >= 1
    assert 0 < sleep.call_args_list[0].args[0] <= 0.03

import pytest

from ffbwheel.timing import (
    IntervalTrigger,
    OneShotTrigger,
    monotonic_ms,
    monotonic_us,
)


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_monotonic_clocks_fit_in_32_bits():
    assert 0 <= monotonic_us() <= 0xFFFFFFFF
    assert 0 <= monotonic_ms() <= 0xFFFFFFFF


def test_interval_not_running_before_init():
    clock = FakeClock(1000)
    trigger = IntervalTrigger(100, clock)
    clock.now = 5000
    assert trigger.has_expired() is False


def test_interval_fires_at_boundary():
    clock = FakeClock(0)
    trigger = IntervalTrigger(100, clock)
    trigger.init()
    clock.now = 99
    assert trigger.has_expired() is False
    clock.now = 100
    assert trigger.has_expired() is True
    assert trigger.has_expired() is False


def test_interval_catches_up_missed_periods():
    clock = FakeClock(0)
    trigger = IntervalTrigger(100, clock)
    trigger.init()
    clock.now = 350
    fired = [trigger.has_expired() for _ in range(5)]
    assert fired == [True, True, True, False, False]


def test_interval_handles_clock_wraparound():
    clock = FakeClock(0xFFFFFFFF - 9)
    trigger = IntervalTrigger(100, clock)
    trigger.init()
    clock.now = 89
    assert trigger.has_expired() is False
    clock.now = 90
    assert trigger.has_expired() is True


def test_one_shot_fires_once():
    clock = FakeClock(0)
    shot = OneShotTrigger(50, clock)
    assert shot.has_expired() is False
    shot.start()
    assert shot.is_running() is True
    clock.now = 49
    assert shot.has_expired() is False
    clock.now = 50
    assert shot.has_expired() is True
    assert shot.is_running() is False
    clock.now = 500
    assert shot.has_expired() is False


def test_one_shot_stop_cancels():
    clock = FakeClock(0)
    shot = OneShotTrigger(50, clock)
    shot.start()
    shot.stop()
    clock.now = 100
    assert shot.has_expired() is False
    assert shot.is_running() is False


def test_one_shot_restart_measures_from_new_start():
    clock = FakeClock(0)
    shot = OneShotTrigger(50, clock)
    shot.start()
    clock.now = 60
    assert shot.has_expired() is True
    shot.start()
    clock.now = 100
    assert shot.has_expired() is False
    clock.now = 110
    assert shot.has_expired() is True


@pytest.mark.parametrize("start", [0, 0xFFFFFFF0])
def test_one_shot_across_wrap(start):
    clock = FakeClock(start)
    shot = OneShotTrigger(32, clock)
    shot.start()
    clock.now = (start + 32) & 0xFFFFFFFF
    assert shot.has_expired() is True
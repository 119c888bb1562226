# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import threading

import pytest

from companion.services.breathing_timer import (
    BreathingTicker,
    BreathingTimer,
    TICK_JOB_ID,
    breathing_state,
)

CYCLE = 19.0


class ManualClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class GatedClock(ManualClock):
    """Blocks the next read until released, to hold a tick mid-flight."""

    def __init__(self, now=100.0):
        super().__init__(now)
        self.gate = None
        self.entered = threading.Event()

    def hold(self):
        self.gate = threading.Event()

    def release(self):
        self.gate.set()

    def __call__(self):
        if self.gate is not None and not self.gate.is_set():
            self.entered.set()
            self.gate.wait(5)
        return self.now


class FakeScheduler:
    def __init__(self):
        self.jobs = {}
        self.running = False

    def add_job(self, func, trigger=None, id=None, **kwargs):
        self.jobs[id] = (func, trigger)

    def get_job(self, job_id):
        return self.jobs.get(job_id)

    def remove_job(self, job_id):
        del self.jobs[job_id]

    def start(self):
        self.running = True

    def shutdown(self, wait=True):
        self.running = False


@pytest.mark.parametrize("elapsed, phase", [
    (0.0, "inhale"),
    (0.1 * CYCLE, "inhale"),
    (0.3 * CYCLE, "hold"),
    (0.5 * CYCLE, "hold"),
    (0.6 * CYCLE, "exhale"),
    (0.9 * CYCLE, "exhale"),
    (CYCLE + 0.3 * CYCLE, "hold"),
])
def test_phase_by_elapsed_time(elapsed, phase):
    assert breathing_state(elapsed)[0] == phase


def test_cycle_wraps_at_nineteen_seconds():
    phase, progress = breathing_state(19.0)
    assert phase == "inhale"
    assert progress == 0.0
    assert breathing_state(9.5)[1] == pytest.approx(50.0)


def test_timer_follows_clock():
    clock = ManualClock()
    timer = BreathingTimer(clock=clock)
    timer.start()
    assert (timer.phase, timer.progress) == ("inhale", 0.0)

    clock.now += 0.3 * CYCLE
    timer.tick()
    assert timer.phase == "hold"
    assert timer.progress == pytest.approx(30.0)

    clock.now += 0.6 * CYCLE
    timer.tick()
    assert timer.phase == "exhale"


def test_stop_resets():
    clock = ManualClock()
    timer = BreathingTimer(clock=clock)
    timer.start()
    clock.now += 0.9 * CYCLE
    timer.tick()

    timer.stop()

    assert not timer.active
    assert (timer.phase, timer.progress) == ("inhale", 0.0)


def test_tick_ignored_while_stopped():
    clock = ManualClock()
    timer = BreathingTimer(clock=clock)
    clock.now += 0.5 * CYCLE
    timer.tick()

    assert (timer.phase, timer.progress) == ("inhale", 0.0)


def test_toggle():
    timer = BreathingTimer(clock=ManualClock())
    assert timer.toggle() is True
    assert timer.toggle() is False


def test_ticker_schedules_and_removes_tick_job():
    scheduler = FakeScheduler()
    clock = ManualClock()
    ticker = BreathingTicker(BreathingTimer(clock=clock), scheduler=scheduler)

    assert ticker.toggle() is True
    assert scheduler.running
    func, trigger = scheduler.jobs[TICK_JOB_ID]
    assert trigger.interval.total_seconds() == pytest.approx(0.1)

    clock.now += 0.3 * CYCLE
    func()
    assert ticker.timer.phase == "hold"

    assert ticker.toggle() is False
    assert TICK_JOB_ID not in scheduler.jobs
    assert ticker.timer.progress == 0.0


def test_ticker_shutdown():
    scheduler = FakeScheduler()
    ticker = BreathingTicker(BreathingTimer(clock=ManualClock()), scheduler=scheduler)
    ticker.start()

    ticker.shutdown()

    assert not scheduler.running
    assert not ticker.timer.active


def test_ticker_stop_without_start():
    scheduler = FakeScheduler()
    ticker = BreathingTicker(BreathingTimer(clock=ManualClock()), scheduler=scheduler)
    ticker.stop()

    assert scheduler.jobs == {}


def test_stop_wins_over_tick_in_flight():
    clock = GatedClock()
    timer = BreathingTimer(clock=clock)
    timer.start()
    clock.now += 0.9 * CYCLE
    clock.hold()

    worker = threading.Thread(target=timer.tick)
    worker.start()
    assert clock.entered.wait(5)

    timer.stop()
    clock.release()
    worker.join(5)

    assert not worker.is_alive()
    assert not timer.active
    assert (timer.phase, timer.progress) == ("inhale", 0.0)


def test_tick_from_previous_run_is_discarded():
    clock = GatedClock()
    timer = BreathingTimer(clock=clock)
    timer.start()
    clock.now += 0.9 * CYCLE
    clock.hold()

    worker = threading.Thread(target=timer.tick)
    worker.start()
    assert clock.entered.wait(5)

    timer.stop()
    clock.release()
    timer.start()
    worker.join(5)

    assert timer.active
    assert (timer.phase, timer.progress) == ("inhale", 0.0)

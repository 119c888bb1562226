# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import threading
import time
from typing import Callable, Tuple
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from companion.utils.config import BREATHING_CYCLE_SECONDS, BREATHING_TICK_SECONDS

logger = logging.getLogger(__name__)

# 4-7-8 breathing: phase boundaries as percent of one cycle
INHALE_END = 21
HOLD_END = 58

TICK_JOB_ID = "breathing-tick"


def breathing_phase(progress: float) -> str:
    if progress < INHALE_END:
        return "inhale"
    if progress < HOLD_END:
        return "hold"
    return "exhale"


def breathing_state(elapsed: float, cycle: float = BREATHING_CYCLE_SECONDS) -> Tuple[str, float]:
    """
    Returns (phase, progress percent) for a number of seconds since the exercise started.
    """
    progress = (elapsed % cycle) / cycle * 100
    return breathing_phase(progress), progress


class BreathingTimer:
    """
    Breathing exercise state. tick() may run on a scheduler thread, so every
    write happens under one lock and a tick from an earlier run is discarded.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, cycle: float = BREATHING_CYCLE_SECONDS):
        self._clock = clock
        self._lock = threading.Lock()
        self._run = 0
        self.cycle = cycle
        self.active = False
        self.phase = "inhale"
        self.progress = 0.0
        self._started_at = 0.0

    def start(self):
        started_at = self._clock()
        with self._lock:
            self._run += 1
            self.active = True
            self._started_at = started_at
        self.tick()

    def stop(self):
        with self._lock:
            self._run += 1
            self.active = False
            self.phase = "inhale"
            self.progress = 0.0

    def toggle(self) -> bool:
        if self.active:
            self.stop()
        else:
            self.start()
        return self.active

    def tick(self):
        with self._lock:
            if not self.active:
                return
            run, started_at = self._run, self._started_at

        # Clock read outside the lock so stop() never waits on it
        now = self._clock()

        with self._lock:
            if not self.active or self._run != run:
                return
            self.phase, self.progress = breathing_state(now - started_at, self.cycle)


class BreathingTicker:
    """
    Samples a BreathingTimer on a fixed interval while the exercise runs.
    """

    def __init__(self, timer: BreathingTimer, scheduler: BackgroundScheduler = None,
                 interval: float = BREATHING_TICK_SECONDS):
        self.timer = timer
        self.scheduler = scheduler or BackgroundScheduler(job_defaults={"misfire_grace_time": 1})
        self.interval = interval

    def start(self):
        self.timer.start()
        self.scheduler.add_job(
            self.timer.tick,
            trigger=IntervalTrigger(seconds=self.interval),
            id=TICK_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        if not self.scheduler.running:
            self.scheduler.start()
        logger.info("🌬️ Breathing exercise started")

    def stop(self):
        if self.scheduler.get_job(TICK_JOB_ID):
            self.scheduler.remove_job(TICK_JOB_ID)
        self.timer.stop()
        logger.info("🛑 Breathing exercise stopped")

    def toggle(self) -> bool:
        if self.timer.active:
            self.stop()
        else:
            self.start()
        return self.timer.active

    def shutdown(self):
        self.stop()
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

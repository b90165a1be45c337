#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Tempo Estimator Module (tempo_estimator.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."

# Common imports
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Sequence, Tuple, Union

# App imports
from taptempo import custom_logger as clog
from taptempo.modules.tempo_params import TempoParams

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
MILLIS_PER_MINUTE = 60_000


@dataclass(frozen=True)
class InsufficientData:
    """ Not enough distinct taps in the window to derive a tempo. """
    sample_count: int


@dataclass(frozen=True)
class Estimate:
    bpm: float
    sample_count: int


TapResult = Union[InsufficientData, Estimate]


def compute_bpm(samples: Sequence[int]) -> Optional[float]:
    """
        Tempo over a window of nanosecond timestamps, oldest first.

        The whole sample count is used as the beat count (n * 60000 / elapsed ms, not n - 1),
        which keeps the figures of earlier tap tempo releases. Returns None for windows with
        fewer than two taps or without elapsed time between first and last tap.
    """
    if len(samples) < 2:
        return None
    elapsed_millis = (samples[-1] - samples[0]) / NANOS_PER_MILLI
    if elapsed_millis <= 0:
        return None
    return len(samples) * MILLIS_PER_MINUTE / elapsed_millis


def format_bpm(bpm: float, precision: int) -> str:
    return f"{bpm:.{precision}f}"


class TempoEstimator:
    """
        Rolling window of tap timestamps. Taps older than sample_size are evicted first in,
        first out, and an idle gap of reset_time whole seconds restarts the window.
    """

    def __init__(self, params: TempoParams, clock: Callable[[], int] = time.monotonic_ns):
        self.params = params
        self.clock = clock
        self.hits: Deque[int] = deque()

    @property
    def sample_count(self) -> int:
        return len(self.hits)

    @property
    def samples(self) -> Tuple[int, ...]:
        return tuple(self.hits)

    def reset_time_elapsed(self, now: int) -> bool:
        if not self.hits:
            return False
        return (now - self.hits[-1]) // NANOS_PER_SECOND >= self.params.reset_time

    def reset(self):
        self.hits.clear()

    def tap(self) -> TapResult:
        return self.record_tap(self.clock())

    def record_tap(self, now: int) -> TapResult:
        if self.reset_time_elapsed(now):
            clog.info(f"No tap for at least {self.params.reset_time}s, restarting tempo computation.")
            self.hits.clear()
        self.hits.append(now)

        if len(self.hits) > self.params.sample_size:
            evicted = self.hits.popleft()
            clog.debug(f"Window full ({self.params.sample_size} taps), evicted tap at {evicted}ns.")

        bpm = compute_bpm(self.hits)
        if bpm is None:
            return InsufficientData(sample_count=len(self.hits))

        clog.debug(f"Tempo {bpm:.5f} bpm from {len(self.hits)} taps.")
        return Estimate(bpm=bpm, sample_count=len(self.hits))

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Tap Input Module (tap_input.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."

# Common imports
from typing import Iterator, TextIO

# App imports
from taptempo import custom_logger as clog
from taptempo.modules.tempo_estimator import Estimate, TempoEstimator, format_bpm

QUIT_COMMAND = "q"
BANNER = "Hit enter key for each beat (q to quit)."
ONE_MORE_TAP = "[Hit enter key one more time to start bpm computation...]"
FAREWELL = "Bye Bye!"


class TapInputError(Exception):
    """ Reading the next tap from the input stream failed. """


def tap_events(stream: TextIO) -> Iterator[str]:
    """
        Yield one line per tap until the quit command or the end of the input.
    """
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise TapInputError(str(e)) from e
        if not line:
            return
        line = line.rstrip("\r\n")
        if line == QUIT_COMMAND:
            return
        yield line


def tap_loop(estimator: TempoEstimator, stdin: TextIO, stdout: TextIO) -> int:
    """
        Drive the estimator from line input and print the tempo after each tap.
        Returns the number of taps processed.
    """
    print(BANNER, file=stdout, flush=True)
    taps = 0

    for _ in tap_events(stdin):
        result = estimator.tap()
        taps += 1

        if isinstance(result, Estimate):
            tempo = format_bpm(result.bpm, estimator.params.precision)
            print(f"Tempo: {tempo} bpm ", end="", file=stdout, flush=True)
        else:
            print(ONE_MORE_TAP, file=stdout, flush=True)

    clog.info(f"Tap session finished after {taps} taps.")
    print(FAREWELL, file=stdout, flush=True)
    return taps

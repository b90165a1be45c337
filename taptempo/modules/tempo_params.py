#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Tempo Parameters Module (tempo_params.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."


from dataclasses import dataclass

from taptempo.config import Config as cfg


@dataclass(frozen=True)
class TempoParams:
    """
        Settings of a tap session. Instances built through validate() are always in range:
        precision in [0, 5], reset_time >= 1 second and sample_size >= 1 tap.
    """
    precision: int = 0
    reset_time: int = 5
    sample_size: int = 5

    @classmethod
    def validate(cls, precision: int, reset_time: int, sample_size: int) -> "TempoParams":
        # Out of range values are clamped, never rejected
        return cls(
            precision=max(0, min(int(precision), cfg.TEMPO_PRECISION_MAX)),
            reset_time=max(int(reset_time), cfg.TEMPO_RESET_TIME_MIN),
            sample_size=max(int(sample_size), cfg.TEMPO_SAMPLE_SIZE_MIN),
        )

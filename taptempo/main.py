#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Main entry point for the tap tempo command line tool
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."


import argparse
import sys
from datetime import datetime
from typing import List, Optional

from taptempo.config import Config as cfg
from taptempo import custom_logger as clog

from taptempo.modules.tap_input import FAREWELL, TapInputError, tap_loop
from taptempo.modules.tempo_estimator import TempoEstimator
from taptempo.modules.tempo_params import TempoParams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='taptempo',
        description='Estimate a tempo in beats per minute by tapping the enter key',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  taptempo                  # 5 samples, reset after 5s, integer display
  taptempo -p 2             # Two decimals
  taptempo -s 8 -r 3        # Wider window, faster reset

Defaults can be set with TAPTEMPO_PRECISION, TAPTEMPO_RESET_TIME and
TAPTEMPO_SAMPLE_SIZE (also read from a .env-taptempo file).'''
    )

    parser.add_argument(
        '--precision', '-p',
        type=int,
        default=cfg.TEMPO_PRECISION,
        help=f'Set the decimal precision of the tempo display (max: {cfg.TEMPO_PRECISION_MAX})'
    )

    parser.add_argument(
        '--reset-time', '-r',
        type=int,
        default=cfg.TEMPO_RESET_TIME,
        help='Set the time in seconds to reset the computation (min: 1)'
    )

    parser.add_argument(
        '--sample-size', '-s',
        type=int,
        default=cfg.TEMPO_SAMPLE_SIZE,
        help='Set the number of samples needed to compute the tempo (min: 1)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug details to the console (stderr)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {cfg.APP_VERSION}'
    )

    return parser


# Main
def main(args: Optional[List[str]] = None) -> int:
    parsed = build_parser().parse_args(args)

    if parsed.verbose:
        clog.setLevelByEnum(clog.LogLevelEnum.DEBUG)

    params = TempoParams.validate(parsed.precision, parsed.reset_time, parsed.sample_size)
    started = datetime.now(cfg.TIME_ZONE).strftime(cfg.DATE_TIME_FORMAT)
    clog.info(f"Starting '{cfg.APP_NAME}' {cfg.APP_VERSION} at {started} in '{cfg.APP_ENV}' mode "
              f"with log-level set to '{clog.getLevel()}' and {params}.")

    estimator = TempoEstimator(params)
    try:
        tap_loop(estimator, sys.stdin, sys.stdout)
    except TapInputError as e:
        clog.error(f"Reading taps failed: {e}")
        print(f"Error: {e}", flush=True)
        return 1
    except KeyboardInterrupt:
        clog.info("Interrupted by user.")
        print(f"\n{FAREWELL}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Configuration Module (config.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."


import os
import logging
import pytz
from dotenv import load_dotenv

from taptempo import __version__

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
ENV_FILE = ".env-taptempo"
DEFAULT_TIME_ZONE = "Europe/Berlin"

# Environment variables may be declared in an optional dotenv file in the working directory.
load_dotenv(os.path.join(os.getcwd(), ENV_FILE))
env = os.environ.get


def load_time_zone(name: str):
    """ Time zone by name, None for names unknown to pytz. """
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        return None


class Config:

    # Project settings
    APP_ENV = env("TAPTEMPO_ENV") or "production"
    APP_ENV_IS_DEV = APP_ENV == "development"
    LOG_LEVEL = logging.DEBUG if APP_ENV_IS_DEV else logging.INFO

    # Default date and time formats (do not change)
    DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIME_ZONE_NAME = env("TAPTEMPO_TIME_ZONE") or DEFAULT_TIME_ZONE
    TIME_ZONE = load_time_zone(TIME_ZONE_NAME) or pytz.timezone(DEFAULT_TIME_ZONE)

    # Application settings
    APP_MODULE = "taptempo"
    APP_NAME = "TapTempo (keyboard tap tempo estimator)"
    APP_VERSION = __version__

    # Tempo defaults, kept as strings so argparse applies its own type conversion
    TEMPO_PRECISION = env("TAPTEMPO_PRECISION") or "0"
    TEMPO_RESET_TIME = env("TAPTEMPO_RESET_TIME") or "5"
    TEMPO_SAMPLE_SIZE = env("TAPTEMPO_SAMPLE_SIZE") or "5"

    # Tempo limits
    TEMPO_PRECISION_MAX = 5
    TEMPO_RESET_TIME_MIN = 1
    TEMPO_SAMPLE_SIZE_MIN = 1

    # Application Logging
    APP_LOG_FILE_NAME = env("TAPTEMPO_LOG_FILE") or os.path.join(BASE_DIR, "logs", f"{APP_MODULE}_log.json")
    APP_LOG_FILE_ENCODING = "utf-8"
    APP_LOG_FILE_ROTATING_BAKUPS = 9
    APP_LOG_FILE_SIZE_MAXIMUM = (1024 * 1024)

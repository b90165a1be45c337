#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Keyboard Tap Tempo Package (taptempo/__init__.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."
__version__ = "1.0.0"


# Load configuration reference
from taptempo.config import Config as cfg

# Imports
from logging.handlers import RotatingFileHandler
from pathlib import Path
from pythonjsonlogger.json import JsonFormatter

# Setup logging with custom logger class instance
from taptempo.utils.custom_logger import CustomLogger
custom_logger = CustomLogger(cfg.APP_MODULE)
custom_logger.setLevel(cfg.LOG_LEVEL)

# Make sure that there is a logging folder, a read-only installation runs without the log file
log_file_dir = Path(cfg.APP_LOG_FILE_NAME).parent
try:
    log_file_dir.mkdir(parents=True, exist_ok=True)
except OSError as e:
    custom_logger.warning(f"Log folder '{log_file_dir}' is not available ({e}), file logging disabled.")
else:
    # Initialize logging on rotation
    log_file_handler = RotatingFileHandler( filename = cfg.APP_LOG_FILE_NAME,
                                            encoding = cfg.APP_LOG_FILE_ENCODING,
                                            backupCount = cfg.APP_LOG_FILE_ROTATING_BAKUPS,
                                            maxBytes = cfg.APP_LOG_FILE_SIZE_MAXIMUM,
                                            delay = True )
    log_file_handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(message)s"))
    custom_logger.addHandler(log_file_handler)

if cfg.TIME_ZONE.zone.lower() != cfg.TIME_ZONE_NAME.lower():
    custom_logger.warning(f"Unknown time zone '{cfg.TIME_ZONE_NAME}', using '{cfg.TIME_ZONE.zone}'.")

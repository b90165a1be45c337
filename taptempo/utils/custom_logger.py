#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    TAPTEMPO
    Custom Logger Module (custom_logger.py)
"""
__author__ = "mail@michael.welte.de"
__copyright__ = "Copyright © 2025-2026 by Michael Welte. All rights reserved."


# Imports
import inspect
import logging
import os
from enum import Enum
from types import FrameType

from rich.console import Console

# The console shares the terminal with the tap prompt, so it writes to stderr.
rc = Console(stderr=True, style="grey50")


# Setup logging with custom logger class instance
class CustomLogger(logging.Logger):
    """
        Custom logger class that prefixes every message with the calling class (or module)
        and function, hands it to the regular logging handlers (e.g. the JSON file handler)
        and returns the composed message text. On debug level the message is echoed on the
        rich console as well.
    """
    class LogLevelEnum(str, Enum):
        CRITICAL = logging.getLevelName(logging.CRITICAL)
        ERROR    = logging.getLevelName(logging.ERROR)
        WARNING  = logging.getLevelName(logging.WARNING)
        INFO     = logging.getLevelName(logging.INFO)
        DEBUG    = logging.getLevelName(logging.DEBUG)

    # Console markup and returned prefix per level
    CONSOLE_STYLES = {
        logging.DEBUG:    ("cyan", "DEBUG"),
        logging.INFO:     ("green", "INFO"),
        logging.WARNING:  ("yellow", "WARN"),
        logging.ERROR:    ("red", "ERROR"),
        logging.CRITICAL: ("magenta", "CRITICAL"),
    }

    def __init__(self, name, level=logging.NOTSET):
        super().__init__(name, level)

    @staticmethod
    def _caller_(frame: FrameType) -> str:
        if frame is None:
            return "None.NONE"
        caller = frame.f_locals.get("self", None)
        owner = caller.__class__.__name__ if caller is not None else frame.f_globals.get("__name__", "?").rsplit(".", 1)[-1]
        return f"{owner}.{frame.f_code.co_name.upper()}"

    def _logmsg_(self, frame: FrameType, level: int, message, *args, **kwargs) -> str:
        """
            Build extended logging message.
        """
        msg = f"{self._caller_(frame)} >> {message}"

        # Extend logging information on debug level
        if level == logging.DEBUG and frame is not None:
            calling_file = os.path.basename(frame.f_code.co_filename)
            msg = f"{self._caller_(frame)} [{calling_file}|{frame.f_lineno}]>> {message}"

        # Call the original logging method
        self.log(level, msg, *args, **kwargs)
        return msg

    def _emit_(self, level: int, message: str, frame: FrameType) -> str:
        msg = self._logmsg_(frame, level, message)
        color, label = self.CONSOLE_STYLES[level]
        if self.level == logging.DEBUG:
            rc.log(f"[{color}]{label}:[/] {msg}")
        return f"{label}: {msg}"

    def getLevel(self) -> str:
        return str(logging.getLevelName(self.getEffectiveLevel())).lower()

    def getLevelEnum(self) -> LogLevelEnum:
        return self.LogLevelEnum(self.getLevel().upper())

    def setLevelByEnum(self, level_enum: LogLevelEnum):
        self.setLevel(logging.getLevelName(level_enum.value))

    def debug(self, message: str, frame: FrameType = None, *args, **kwargs) -> str:
        return self._emit_(logging.DEBUG, message, frame if frame else inspect.currentframe().f_back)

    def info(self, message: str, frame: FrameType = None, *args, **kwargs) -> str:
        return self._emit_(logging.INFO, message, frame if frame else inspect.currentframe().f_back)

    def warning(self, message: str, frame: FrameType = None, *args, **kwargs) -> str:
        return self._emit_(logging.WARNING, message, frame if frame else inspect.currentframe().f_back)

    def error(self, message: str, frame: FrameType = None, *args, **kwargs) -> str:
        return self._emit_(logging.ERROR, message, frame if frame else inspect.currentframe().f_back)

    def critical(self, message: str, frame: FrameType = None, *args, **kwargs) -> str:
        return self._emit_(logging.CRITICAL, message, frame if frame else inspect.currentframe().f_back)

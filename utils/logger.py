# -*- coding: utf-8 -*-
"""
Logging configuration for the surveyor console.

Everything logs under the "surveyor_console" logger: a rotating file under
Config.LOGS_DIR receives DEBUG and up, stdout receives Config.LOG_LEVEL and up.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "surveyor_console"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(config) -> RotatingFileHandler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level: Union[int, str]) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(console_level: Union[int, str, None] = None, log_to_file: bool = True) -> logging.Logger:
    """
    (Re)configure the application logger.

    Args:
        console_level: Minimum level printed to stdout, Config.LOG_LEVEL if None
        log_to_file: Disable to keep test runs from writing log files
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers.clear()

    if log_to_file:
        logger.addHandler(_file_handler(Config))
    logger.addHandler(_console_handler(console_level or Config.LOG_LEVEL))

    # requests/urllib3 connection chatter stays out of the console
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module, configuring the application logger on first use."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)

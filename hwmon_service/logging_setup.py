"""
logging_setup.py

Root logger configuration for the hwmon readout: a stderr console handler and
a size-rotated log file. Readings go to stdout through ConsoleOutput, so
diagnostics never interleave with them.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from hwmon_service import PACKAGE_LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _level_from_name(log_level) -> int:
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(log_dir: str, log_file_name: str) -> logging.Handler:
    os.makedirs(log_dir, exist_ok=True)
    return RotatingFileHandler(
        os.path.join(log_dir, log_file_name),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )


def setup_logging(log_dir="log", log_file_name="hwmon_service.log", log_level="INFO"):
    """
    Configure the root logger for a readout run.

    The level is always applied. Handlers are attached only when the root
    logger has none yet, so repeated calls (or a host application that set up
    logging first) do not duplicate output.

    Args:
        log_dir (str): Directory for the rotating log file; created if missing.
        log_file_name (str): Name of the log file.
        log_level (str): Level name such as "DEBUG"; unknown names mean INFO.

    Returns:
        logging.Logger: The root logger instance.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_name(log_level))

    if root.hasHandlers():
        return root

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (logging.StreamHandler(sys.stderr), _file_handler(log_dir, log_file_name)):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER_NAME).debug(
        f"Logging to {os.path.join(log_dir, log_file_name)} at {logging.getLevelName(root.level)}"
    )
    return root

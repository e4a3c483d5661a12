"""
logging_output.py

Provides a logging based output for running headless.
"""

import logging
from typing import Sequence

from hwmon_service import PACKAGE_LOGGER_NAME
from hwmon_service.outputs.base import BaseOutput
from hwmon_service.telemetry import InputSnapshot, format_value


class LoggingOutput(BaseOutput):
    """
    Output implementation that logs each reading instead of printing it.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.outputs.logging")

    def render(self, snapshots: Sequence[InputSnapshot]) -> None:
        for snapshot in snapshots:
            self._logger.info(
                "Reading | group=%s | label=%s | value=%s%s",
                snapshot.group,
                snapshot.label,
                format_value(snapshot.value),
                snapshot.unit,
            )

"""
output_manager.py
"""
import logging
from typing import Any, Iterable, List, Sequence

from hwmon_service.telemetry import InputSnapshot


class OutputManager:
    """
    Manages outputs such as the console and the log.

    Responsible for fanning out readings to outputs while isolating failures
    so an output can never crash the run.
    """

    def __init__(
        self,
        outputs: Iterable[Any],
        logger: logging.Logger,
    ) -> None:
        self._outputs: List[Any] = list(outputs)
        self._logger = logger

    @property
    def outputs(self) -> List[Any]:
        return list(self._outputs)

    def render(self, snapshots: Sequence[InputSnapshot]) -> None:
        """
        Render readings to all configured outputs.

        Args:
            snapshots: Readings collected by the TelemetryCollector.
        """
        for output in list(self._outputs):
            try:
                output.render(snapshots)
            except Exception:
                self._logger.warning(
                    "Output render failed, disabling output",
                    exc_info=True,
                )
                self._outputs.remove(output)

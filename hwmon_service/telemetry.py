"""
telemetry.py

Provides the TelemetryCollector class, which reads every input of a set of
discovered hwmon groups once and returns the readings as snapshots, plus the
line format used to print a reading.

Classes:
    InputSnapshot
    TelemetryCollector

Usage:
    collector = TelemetryCollector(groups=registry.discover_all())
    for snapshot in collector.collect():
        print(format_reading(snapshot.label, snapshot.value, snapshot.unit))
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from hwmon_service import PACKAGE_LOGGER_NAME
from hwmon_service.sensors.group import MonitoringGroup
from hwmon_service.sensors.input_reading import InputKind, InputReading

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.telemetry")


@dataclass(frozen=True)
class InputSnapshot:
    group: str
    label: str
    value: float
    unit: str
    kind: InputKind

    def as_line(self) -> str:
        return format_reading(self.label, self.value, self.unit)


def format_value(value: float) -> str:
    if value.is_integer():
        return f"{value:.0f}"
    return repr(value)


def format_reading(label: str, value: float, unit: str) -> str:
    """Return "<label>: <value><unit>", e.g. "Core 0: 45.23°C"."""
    return f"{label}: {format_value(value)}{unit}"


class TelemetryCollector:
    """
    Reads every input of the given groups on each collect() call.

    Args:
        groups: Discovered monitoring groups.
        max_workers (int): Readers used in parallel. 1 reads sequentially.
            Each input owns its own handle, so parallel reads share nothing.
    """

    def __init__(self, *, groups: Optional[Iterable[MonitoringGroup]] = None, max_workers: int = 1):
        if max_workers < 1:
            raise ValueError("max_workers must be ≥ 1")
        self._groups = list(groups or [])
        self.max_workers = max_workers

    def _pairs(self) -> List[Tuple[MonitoringGroup, InputReading]]:
        return [(group, reading) for group in self._groups for reading in group.inputs]

    @staticmethod
    def _snapshot(group: MonitoringGroup, reading: InputReading) -> InputSnapshot:
        return InputSnapshot(
            group=group.name,
            label=reading.label,
            value=reading.update(),
            unit=reading.unit,
            kind=reading.kind,
        )

    def collect(self) -> List[InputSnapshot]:
        pairs = self._pairs()
        if self.max_workers == 1 or len(pairs) < 2:
            snapshots = [self._snapshot(group, reading) for group, reading in pairs]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                snapshots = list(executor.map(lambda pair: self._snapshot(*pair), pairs))

        logger.debug(f"Collected {len(snapshots)} readings from {len(self._groups)} groups")
        return snapshots


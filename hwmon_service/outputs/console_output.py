"""
console_output.py

Writes one "<label>: <value><unit>" line per reading to a text stream.
"""

import sys
from typing import Optional, Sequence, TextIO

from hwmon_service.outputs.base import BaseOutput
from hwmon_service.telemetry import InputSnapshot


class ConsoleOutput(BaseOutput):
    """
    Args:
        stream: Stream to write to. Defaults to sys.stdout at render time.
        show_group (bool): Prefix each line with "<group>/".
    """

    def __init__(self, stream: Optional[TextIO] = None, show_group: bool = False) -> None:
        self._stream = stream
        self.show_group = show_group

    def render(self, snapshots: Sequence[InputSnapshot]) -> None:
        stream = self._stream or sys.stdout
        for snapshot in snapshots:
            line = snapshot.as_line()
            if self.show_group:
                line = f"{snapshot.group}/{line}"
            stream.write(line + "\n")
        stream.flush()

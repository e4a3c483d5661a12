# hwmon_service/outputs/base.py

from abc import ABC, abstractmethod
from typing import Sequence

from hwmon_service.telemetry import InputSnapshot


class BaseOutput(ABC):
    """
    Abstract base class for everything readings can be rendered to.
    """

    @abstractmethod
    def render(self, snapshots: Sequence[InputSnapshot]) -> None:
        raise NotImplementedError

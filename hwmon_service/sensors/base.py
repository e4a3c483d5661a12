# hwmon_service/sensors/base.py

from abc import ABC, abstractmethod


class BaseInput(ABC):
    """
    Abstract base class for anything that yields a live reading.
    Enforces a consistent interface: update(), label and unit.
    """

    @abstractmethod
    def update(self) -> float:
        """
        Return the current scaled value.
        Example: 45.23 for a temperature input reading "45230\\n".
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def label(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def unit(self) -> str:
        raise NotImplementedError

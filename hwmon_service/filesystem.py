# hwmon_service/filesystem.py

"""
filesystem.py

The filesystem capability the discovery engine is written against: directory
listing, whole-file text read, and positioned byte reads on a retained handle.

LocalFileSystem talks to the real OS. Tests and other callers can provide their
own FileSystem implementation to Registry / MonitoringGroup / InputReading.

Classes:
    ValueHandle
    FileSystem
    LocalValueHandle
    LocalFileSystem
"""

import os
from abc import ABC, abstractmethod
from typing import List


class ValueHandle(ABC):
    """
    An open file that can be re-read from any offset without reopening.
    """

    @abstractmethod
    def read_at(self, size: int, offset: int) -> bytes:
        """
        Read up to `size` bytes starting at `offset`.
        Raises OSError on failure.
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError


class FileSystem(ABC):
    """
    Abstract filesystem capability. Errors are reported as OSError subclasses
    (FileNotFoundError for a missing file) so callers can tell them apart.
    """

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """Return the entry names directly under `path`."""
        raise NotImplementedError

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the whole file decoded as UTF-8."""
        raise NotImplementedError

    @abstractmethod
    def open_value(self, path: str) -> ValueHandle:
        """Open `path` for repeated positioned reads."""
        raise NotImplementedError


class LocalValueHandle(ValueHandle):
    def __init__(self, path: str):
        self.path = path
        self._fd = os.open(path, os.O_RDONLY)

    @property
    def closed(self) -> bool:
        return self._fd is None

    def read_at(self, size: int, offset: int) -> bytes:
        if self._fd is None:
            raise OSError(f"Handle for {self.path} is closed")
        return os.pread(self._fd, size, offset)

    def close(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local OS."""

    def list_dir(self, path: str) -> List[str]:
        return os.listdir(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def open_value(self, path: str) -> ValueHandle:
        return LocalValueHandle(path)

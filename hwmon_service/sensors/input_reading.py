# input_reading.py

"""
Driver for a single hwmon *_input file.

The file name encodes the sensor type and index (temp1_input, in0_input,
fan2_input, ...). An optional sibling <stem>_label file gives a human name.
The value file holds an unsigned decimal integer followed by a newline and is
re-read from offset 0 on every update().
"""

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from hwmon_service import PACKAGE_LOGGER_NAME
from hwmon_service.exceptions import (
    FilesystemError,
    InconsistentLabelFileError,
    MalformedNameError,
    MalformedValueError,
)
from hwmon_service.filesystem import FileSystem, LocalFileSystem, ValueHandle
from hwmon_service.sensors.base import BaseInput

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{__name__.split('.')[-1]}")

INPUT_SUFFIX = "_input"
LABEL_SUFFIX = "_label"
READ_SIZE = 4096
MAX_RAW_VALUE = 2 ** 32 - 1

_NAME_RE = re.compile(r"([A-Za-z]+)([0-9]+)_")
_DIGITS_RE = re.compile(r"[0-9]+")


class InputKind(Enum):
    VOLTAGE = "in"
    FAN = "fan"
    TEMPERATURE = "temp"
    OTHER = "other"


_KINDS_BY_TAG = {
    "in": InputKind.VOLTAGE,
    "fan": InputKind.FAN,
    "temp": InputKind.TEMPERATURE,
}

_UNITS = {
    InputKind.VOLTAGE: "V",
    InputKind.FAN: " RPM",
    InputKind.TEMPERATURE: "°C",
}


@dataclass(frozen=True)
class InputType:
    kind: InputKind
    # Raw type name, only meaningful for InputKind.OTHER
    tag: Optional[str] = None

    @classmethod
    def from_tag(cls, tag: str) -> "InputType":
        kind = _KINDS_BY_TAG.get(tag)
        if kind is None:
            return cls(InputKind.OTHER, tag)
        return cls(kind)

    @property
    def unit(self) -> str:
        if self.kind is InputKind.OTHER:
            return self.tag or ""
        return _UNITS[self.kind]

    def scale(self, raw: int) -> float:
        # Temperatures are reported in millidegrees Celsius
        if self.kind is InputKind.TEMPERATURE:
            return raw / 1000.0
        return float(raw)


def classify(file_name: str) -> Tuple[InputType, str]:
    """
    Split an input file name into its type and stem.

    Returns:
        (InputType, stem) e.g. (InputType(TEMPERATURE), "temp1") for "temp1_input".

    Raises:
        MalformedNameError: if the name does not start with <letters><digits>_.
    """
    match = _NAME_RE.match(file_name)
    if match is None:
        raise MalformedNameError(file_name)
    return InputType.from_tag(match.group(1)), file_name[:match.end(2)]


def parse_value(data: bytes) -> int:
    """
    Parse the bytes of a value file into an unsigned 32-bit integer.

    Exactly one trailing newline is dropped; anything else that is not ASCII
    digits raises MalformedValueError.
    """
    body = data[:-1] if data.endswith(b"\n") else data
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedValueError(data, cause=e) from e
    if not _DIGITS_RE.fullmatch(text):
        raise MalformedValueError(data)
    value = int(text)
    if value > MAX_RAW_VALUE:
        raise MalformedValueError(data)
    return value


class InputReading(BaseInput):
    """
    One classified, readable hwmon input.

    Type and label are fixed at construction; the value file stays open and is
    re-read on every update() call.

    Args:
        path (str): Path to the <type><index>_input file.
        filesystem (FileSystem): Filesystem to read through. Defaults to the
            local OS filesystem.

    Raises:
        MalformedNameError: file name does not match <type><index>_.
        InconsistentLabelFileError: label file lacks its trailing newline.
        FilesystemError: label read (other than not-found) or value open failed.
    """

    def __init__(self, path: str, filesystem: Optional[FileSystem] = None):
        self.path = path
        self._fs = filesystem or LocalFileSystem()

        directory, file_name = os.path.split(path)
        try:
            self.input_type, self.stem = classify(file_name)
        except MalformedNameError as e:
            e.path = path
            raise

        self._label = self._read_label(os.path.join(directory, f"{self.stem}{LABEL_SUFFIX}"))
        self._handle: Optional[ValueHandle] = self._open_handle()

    # --- Properties ---------------------------------------------------------

    @property
    def kind(self) -> InputKind:
        return self.input_type.kind

    @property
    def label(self) -> str:
        return self._label

    @property
    def unit(self) -> str:
        return self.input_type.unit

    @property
    def closed(self) -> bool:
        return self._handle is None

    # --- Internals ----------------------------------------------------------

    def _read_label(self, label_path: str) -> str:
        try:
            content = self._fs.read_text(label_path)
        except FileNotFoundError:
            return self.stem
        except UnicodeDecodeError as e:
            raise InconsistentLabelFileError(
                f"Label file is not valid UTF-8: {label_path}", path=label_path, cause=e
            ) from e
        except OSError as e:
            raise FilesystemError(
                f"Failed reading label {label_path}: {e}", path=label_path, cause=e
            ) from e

        if not content.endswith("\n"):
            raise InconsistentLabelFileError(
                f"Label file is not newline-terminated: {label_path}", path=label_path
            )
        return content[:-1]

    def _open_handle(self) -> ValueHandle:
        try:
            return self._fs.open_value(self.path)
        except OSError as e:
            raise FilesystemError(
                f"Failed opening input {self.path}: {e}", path=self.path, cause=e
            ) from e

    def _read_raw(self) -> int:
        if self._handle is None:
            raise OSError(f"Input {self.path} is closed")
        data = self._handle.read_at(READ_SIZE, 0)
        try:
            return parse_value(data)
        except MalformedValueError as e:
            e.path = self.path
            raise

    # --- Public API ---------------------------------------------------------

    def update(self) -> float:
        """
        Read the value file and return the scaled reading.

        Returns:
            float: degrees Celsius for temperatures, the raw integer otherwise.
            0.0 if the file could not be read or parsed.
        """
        try:
            raw = self._read_raw()
        except OSError as e:
            logger.error(f"Error reading {self.path}: {e}")
            return 0.0
        except MalformedValueError as e:
            logger.warning(f"Malformed value in {self.path}: {e.raw!r}")
            return 0.0
        return self.input_type.scale(raw)

    current_value = update

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __repr__(self) -> str:
        return f"InputReading(path={self.path!r}, label={self._label!r}, kind={self.kind.name})"

# group.py

"""
What group.py owns

One hwmon source (a chip or device directory such as /sys/class/hwmon/hwmon0):
its display name from the "name" file and every *_input file beneath it that
could be classified.

Inputs that fail to construct (bad name, bad label, unopenable value file)
are logged and skipped so one broken sensor file does not hide the rest of
the chip. Only an unreadable name file or directory listing aborts the load.
"""

import logging
import os
from typing import Iterable, Optional, Tuple

from hwmon_service import PACKAGE_LOGGER_NAME
from hwmon_service.exceptions import FilesystemError, HwmonError
from hwmon_service.filesystem import FileSystem, LocalFileSystem
from hwmon_service.sensors.input_reading import INPUT_SUFFIX, InputReading

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{__name__.split('.')[-1]}")

NAME_FILE = "name"


class MonitoringGroup:
    """
    A loaded hwmon directory. Inputs are fixed at load time; there is no
    re-scan.
    """

    def __init__(self, name: str, path: str, inputs: Iterable[InputReading] = ()):
        self.name = name
        self.path = path
        self.inputs: Tuple[InputReading, ...] = tuple(inputs)

    @classmethod
    def load(cls, directory_path: str, filesystem: Optional[FileSystem] = None) -> "MonitoringGroup":
        """
        Read the group name and build an InputReading for every *_input entry.

        Args:
            directory_path: hwmon directory to load.
            filesystem: Filesystem to read through. Defaults to the local OS.

        Returns:
            MonitoringGroup with every input that could be constructed.

        Raises:
            FilesystemError: the name file or directory listing could not be
                read.
        """
        fs = filesystem or LocalFileSystem()
        name = _read_name(fs, directory_path)

        try:
            entries = sorted(fs.list_dir(directory_path))
        except OSError as e:
            raise FilesystemError(
                f"Failed listing {directory_path}: {e}", path=directory_path, cause=e
            ) from e

        inputs: list[InputReading] = []
        try:
            for entry in entries:
                if not entry.endswith(INPUT_SUFFIX):
                    continue
                input_path = os.path.join(directory_path, entry)
                try:
                    inputs.append(InputReading(input_path, filesystem=fs))
                except HwmonError as e:
                    logger.warning(
                        "Skipping input (group=%s, file=%s): %s", name, entry, str(e)
                    )
                    continue
        except Exception:
            for reading in inputs:
                reading.close()
            raise

        logger.debug(f"Loaded group '{name}' from {directory_path} with {len(inputs)} inputs")
        return cls(name=name, path=directory_path, inputs=inputs)

    def close(self) -> None:
        for reading in self.inputs:
            reading.close()

    def __iter__(self):
        return iter(self.inputs)

    def __len__(self) -> int:
        return len(self.inputs)

    def __repr__(self) -> str:
        return f"MonitoringGroup(name={self.name!r}, path={self.path!r}, inputs={len(self.inputs)})"


def _read_name(fs: FileSystem, directory_path: str) -> str:
    name_path = os.path.join(directory_path, NAME_FILE)
    try:
        content = fs.read_text(name_path)
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemError(
            f"Failed reading group name {name_path}: {e}", path=name_path, cause=e
        ) from e
    return content[:-1] if content.endswith("\n") else content

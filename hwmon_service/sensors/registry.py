# registry.py

"""
Registry of every hwmon group under the monitoring root.

By default a group that fails to load aborts discovery. Rigs with one
misbehaving device can pass skip_failed_groups=True to log and skip it
instead. A root that cannot be listed always aborts.
"""

import logging
import os
from typing import List, Optional

from hwmon_service import PACKAGE_LOGGER_NAME
from hwmon_service.exceptions import FilesystemError, HwmonError
from hwmon_service.filesystem import FileSystem, LocalFileSystem
from hwmon_service.sensors.group import MonitoringGroup

logger = logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{__name__.split('.')[-1]}")

DEFAULT_HWMON_ROOT = "/sys/class/hwmon"


class Registry:
    def __init__(self, root: str = DEFAULT_HWMON_ROOT,
                 filesystem: Optional[FileSystem] = None,
                 skip_failed_groups: bool = False):
        self.root = root
        self._fs = filesystem or LocalFileSystem()
        self.skip_failed_groups = skip_failed_groups
        self.groups: List[MonitoringGroup] = []

    def discover_all(self) -> List[MonitoringGroup]:
        """
        Load one MonitoringGroup per entry under the monitoring root.

        Returns:
            list[MonitoringGroup]: loaded groups, sorted by directory entry name.

        Raises:
            FilesystemError: the root could not be listed, or a group failed to
                load and skip_failed_groups is off.
        """
        try:
            entries = sorted(self._fs.list_dir(self.root))
        except OSError as e:
            raise FilesystemError(
                f"Failed listing monitoring root {self.root}: {e}", path=self.root, cause=e
            ) from e

        groups: List[MonitoringGroup] = []
        for entry in entries:
            group_path = os.path.join(self.root, entry)
            try:
                groups.append(MonitoringGroup.load(group_path, filesystem=self._fs))
            except HwmonError as e:
                if not self.skip_failed_groups:
                    for group in groups:
                        group.close()
                    raise
                logger.warning("Skipping group (path=%s): %s", group_path, str(e))
                continue

        logger.info(
            f"Discovered {len(groups)} hwmon groups with "
            f"{sum(len(g) for g in groups)} inputs under {self.root}"
        )
        self.groups = groups
        return groups

    def close(self) -> None:
        for group in self.groups:
            group.close()
        self.groups = []

    def __enter__(self) -> "Registry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

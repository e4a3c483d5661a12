"""
hwmon_service

Discovers hardware-monitoring sensors exposed under sysfs and turns their raw
values into readings with units.
"""

PACKAGE_LOGGER_NAME = "hwmon_service"

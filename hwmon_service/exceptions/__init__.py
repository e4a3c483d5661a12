from .hwmon_exceptions import (
    HwmonError,
    FilesystemError,
    MalformedNameError,
    MalformedValueError,
    InconsistentLabelFileError,
)

__all__ = [
    "HwmonError",
    "FilesystemError",
    "MalformedNameError",
    "MalformedValueError",
    "InconsistentLabelFileError",
]

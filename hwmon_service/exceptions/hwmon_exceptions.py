# hwmon_exceptions.py

"""
Exceptions raised while discovering and reading hwmon inputs.

Every exception carries optional structured context (the path involved and the
underlying cause) so callers can log without parsing the message.
"""

from typing import Optional


class HwmonError(Exception):
    """Base class for all hwmon discovery and read errors."""

    def __init__(self, message: str, *, path: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class FilesystemError(HwmonError):
    """
    Listing, opening or reading a directory/file failed for a reason other than
    a missing label file. Always propagated to the enclosing load.
    """
    pass


class MalformedNameError(HwmonError):
    """An *_input file name does not look like <type><index>_input."""

    def __init__(self, file_name: str, *, path: Optional[str] = None):
        super().__init__(f"Malformed input file name: {file_name!r}", path=path)
        self.file_name = file_name


class MalformedValueError(HwmonError):
    """A value file did not contain an unsigned decimal integer."""

    def __init__(self, raw: bytes, *, path: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(f"Malformed value {raw!r}", path=path, cause=cause)
        self.raw = raw


class InconsistentLabelFileError(HwmonError):
    """A label file exists but is not newline-terminated text."""
    pass

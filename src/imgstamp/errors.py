"""Exception hierarchy for timestamp extraction."""

from __future__ import annotations

from pathlib import Path

from imgstamp.typehints import StrPath


class TimestampError(Exception):
    """Base class for all errors raised by imgstamp."""


class PathNotFoundError(TimestampError, FileNotFoundError):
    """Raised when the path does not resolve to any file."""

    message = "Could not find a file at '{path}'. Please check the path and try again."

    def __init__(self, path: StrPath) -> None:
        self.path = Path(path)
        super().__init__(self.message.format(path=path))


class PathNotReadableError(PathNotFoundError):
    """Raised when a file exists but cannot be opened, e.g. for lack of permission."""

    message = "Could not read the file at '{path}'. Please check its permissions and try again."


class UnsupportedFileTypeError(TimestampError, ValueError):
    """Raised when a file exists but is not an image Pillow can read."""

    def __init__(self, path: StrPath, file_type: str) -> None:
        self.path = Path(path)
        self.file_type = file_type
        super().__init__(
            f"The file '{path}' has type '{file_type}' and is not a recognized image."
        )


class TimestampUnavailableError(TimestampError, ValueError):
    """Raised when an image carries no usable timestamp."""

    def __init__(self, path: StrPath | None, reason: str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        message = (
            f"Found an image at '{path}', but could not get a timestamp."
            if path is not None
            else "Found an image, but could not get a timestamp."
        )
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)

"""Extract relative timestamps from image files."""

from __future__ import annotations

from imgstamp.core import extract_timestamp
from imgstamp.core import get_timestamp
from imgstamp.core import timestamp_from_metadata
from imgstamp.definitions import ImageMetadata
from imgstamp.definitions import TimestampReading
from imgstamp.definitions import TimestampSource
from imgstamp.errors import PathNotFoundError
from imgstamp.errors import PathNotReadableError
from imgstamp.errors import TimestampError
from imgstamp.errors import TimestampUnavailableError
from imgstamp.errors import UnsupportedFileTypeError


__all__ = [
    "ImageMetadata",
    "PathNotFoundError",
    "PathNotReadableError",
    "TimestampError",
    "TimestampReading",
    "TimestampSource",
    "TimestampUnavailableError",
    "UnsupportedFileTypeError",
    "extract_timestamp",
    "get_timestamp",
    "timestamp_from_metadata",
]

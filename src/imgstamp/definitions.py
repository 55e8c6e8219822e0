from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from enum import auto
from pathlib import Path

from imgstamp.typehints import Seconds


class TimestampSource(StrEnum):
    """Metadata fields a timestamp can be read from, in priority order."""

    DATETIME_ORIGINAL = auto()
    DATETIME = auto()
    FILE_MOD_DATE = auto()

    @property
    def label(self) -> str:
        """Human-readable field name."""
        return {
            TimestampSource.DATETIME_ORIGINAL: "DateTimeOriginal",
            TimestampSource.DATETIME: "DateTime",
            TimestampSource.FILE_MOD_DATE: "FileModDate",
        }[self]


@dataclass(slots=True, frozen=True)
class ImageMetadata:
    """Timestamp-related metadata read from an image file.

    EXIF dates use the ``YYYY:MM:DD HH:MM:SS`` layout (e.g. ``2013:05:20 14:43:10``),
    while ``file_mod_date`` uses ``DD-Mon-YYYY HH:MM:SS`` (e.g. ``20-May-2013 14:43:10``).
    """

    path: Path | None = None
    format: str | None = None
    width: int | None = None
    height: int | None = None
    date_time_original: str | None = None
    subsec_time_original: str | None = None
    date_time: str | None = None
    file_mod_date: str | None = None

    @property
    def has_camera_block(self) -> bool:
        """Whether the camera-specific capture time is present."""
        return self.date_time_original is not None


@dataclass(slots=True, frozen=True)
class TimestampReading:
    """Result of timestamp extraction.

    ``value`` counts seconds from day, hour, minute and second only. Month and
    year are ignored, so readings are not ordered across a month boundary.
    """

    value: Seconds
    source: TimestampSource
    captured: datetime

    def as_float(self) -> float:
        return float(self.value)

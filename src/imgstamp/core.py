from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from imgstamp.console import warning
from imgstamp.constants import EXIF_DATE_FORMAT
from imgstamp.constants import FILE_MOD_DATE_FORMAT
from imgstamp.constants import NO_FRACTION
from imgstamp.constants import SECONDS_PER_DAY
from imgstamp.constants import SECONDS_PER_HOUR
from imgstamp.constants import SECONDS_PER_MINUTE
from imgstamp.definitions import ImageMetadata
from imgstamp.definitions import TimestampReading
from imgstamp.definitions import TimestampSource
from imgstamp.errors import PathNotFoundError
from imgstamp.errors import PathNotReadableError
from imgstamp.errors import TimestampUnavailableError
from imgstamp.errors import UnsupportedFileTypeError
from imgstamp.filesystem import detect_file_type
from imgstamp.filesystem import read_image_metadata
from imgstamp.filesystem import resolve_path
from imgstamp.typehints import Seconds
from imgstamp.typehints import StrPath


DATE_FORMATS: dict[TimestampSource, str] = {
    TimestampSource.DATETIME_ORIGINAL: EXIF_DATE_FORMAT,
    TimestampSource.DATETIME: EXIF_DATE_FORMAT,
    TimestampSource.FILE_MOD_DATE: FILE_MOD_DATE_FORMAT,
}


def day_seconds(moment: datetime, fraction: Seconds = NO_FRACTION) -> Seconds:
    """Seconds counted from day of month, hour, minute and second.

    Month and year are dropped: this will not order correctly if the month rolls over.
    """
    whole = (
        moment.day * SECONDS_PER_DAY
        + moment.hour * SECONDS_PER_HOUR
        + moment.minute * SECONDS_PER_MINUTE
        + moment.second
    )
    return Decimal(whole) + fraction


def parse_subsec(value: str, path: Path | None = None) -> Seconds:
    """Parse a subsecond string such as '523' as the fraction 0.523."""
    if not value.isdigit():
        warning(f"Ignoring invalid SubsecTimeOriginal '{value}' in {path}")
        return NO_FRACTION
    return Decimal(f"0.{value}")


def select_source(metadata: ImageMetadata) -> tuple[TimestampSource, str] | None:
    """Pick the highest-priority timestamp field present."""
    if metadata.has_camera_block:
        return TimestampSource.DATETIME_ORIGINAL, metadata.date_time_original
    if metadata.date_time is not None:
        return TimestampSource.DATETIME, metadata.date_time
    if metadata.file_mod_date is not None:
        return TimestampSource.FILE_MOD_DATE, metadata.file_mod_date
    return None


def timestamp_from_metadata(metadata: ImageMetadata) -> TimestampReading:
    """Compute the timestamp from already loaded metadata."""
    selected = select_source(metadata)
    if selected is None:
        raise TimestampUnavailableError(metadata.path)

    source, raw = selected
    try:
        captured = datetime.strptime(raw.strip(), DATE_FORMATS[source])
    except ValueError as e:
        raise TimestampUnavailableError(
            metadata.path, f"Invalid {source.label} value '{raw}'."
        ) from e

    fraction = NO_FRACTION
    if (
        source is TimestampSource.DATETIME_ORIGINAL
        and metadata.subsec_time_original is not None
    ):
        fraction = parse_subsec(metadata.subsec_time_original, metadata.path)

    return TimestampReading(
        value=day_seconds(captured, fraction), source=source, captured=captured
    )


def load_metadata(path: StrPath) -> ImageMetadata:
    """Load image metadata, translating read failures into typed errors."""
    resolved = resolve_path(path) or Path(path)
    try:
        return read_image_metadata(resolved)
    except PermissionError as exc:
        raise PathNotReadableError(path) from exc
    except OSError as exc:
        # Not readable as an image: either nothing is there or it is another type
        try:
            file_type = detect_file_type(resolved)
        except PermissionError:
            raise PathNotReadableError(path) from exc
        except FileNotFoundError:
            raise PathNotFoundError(path) from exc
        raise UnsupportedFileTypeError(path, file_type) from exc


def extract_timestamp(path: StrPath) -> TimestampReading:
    """Extract a timestamp reading from an image file."""
    return timestamp_from_metadata(load_metadata(path))


def get_timestamp(path: StrPath) -> float:
    """Get the timestamp of an image file in seconds.

    Reads EXIF ``DateTimeOriginal`` (plus ``SubsecTimeOriginal``) if present,
    then EXIF ``DateTime``, then the file modification date. The value counts
    seconds from the day of month onward, so it is only useful for ordering
    images taken within the same month.

    Raises:
        PathNotFoundError: no file exists at ``path``, or it cannot be
            opened (``PathNotReadableError``).
        UnsupportedFileTypeError: the file is not a recognized image.
        TimestampUnavailableError: the image has no usable timestamp.
    """
    return extract_timestamp(path).as_float()

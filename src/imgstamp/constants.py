from __future__ import annotations

from decimal import Decimal

from typing import Final


SECONDS_PER_DAY: Final[int] = 24 * 60 * 60
SECONDS_PER_HOUR: Final[int] = 60 * 60
SECONDS_PER_MINUTE: Final[int] = 60
NO_FRACTION: Final[Decimal] = Decimal(0)

EXIF_DATE_FORMAT: Final[str] = "%Y:%m:%d %H:%M:%S"
FILE_MOD_DATE_FORMAT: Final[str] = "%d-%b-%Y %H:%M:%S"

TAG_DATETIME_ORIGINAL: Final[str] = "EXIF DateTimeOriginal"
TAG_SUBSEC_TIME_ORIGINAL: Final[str] = "EXIF SubSecTimeOriginal"
TAG_DATETIME: Final[str] = "Image DateTime"
TIMESTAMP_TAGS: Final[frozenset[str]] = frozenset(
    {TAG_DATETIME_ORIGINAL, TAG_SUBSEC_TIME_ORIGINAL, TAG_DATETIME}
)

# Dates made only of these are placeholders written when the camera clock
# was never set, e.g. "0000:00:00 00:00:00" or "    :  :     :  :  "
BLANK_EXIF_CHARS: Final[str] = " :0\x00"
UNKNOWN_FILE_TYPE: Final[str] = "unknown"

from __future__ import annotations

import mimetypes
from datetime import datetime
from pathlib import Path

import exifread
import magic
from PIL import Image

from imgstamp.console import warning
from imgstamp.constants import BLANK_EXIF_CHARS
from imgstamp.constants import FILE_MOD_DATE_FORMAT
from imgstamp.constants import TAG_DATETIME
from imgstamp.constants import TAG_DATETIME_ORIGINAL
from imgstamp.constants import TAG_SUBSEC_TIME_ORIGINAL
from imgstamp.constants import TIMESTAMP_TAGS
from imgstamp.constants import UNKNOWN_FILE_TYPE
from imgstamp.definitions import ImageMetadata
from imgstamp.typehints import ExifTags
from imgstamp.typehints import StrPath


def resolve_path(path: StrPath) -> Path | None:
    """Resolve a file path, matching the file name case-insensitively."""
    path = Path(path).expanduser()
    if path.is_file():
        return path

    parent = path.parent
    if not parent.is_dir():
        return None

    wanted = path.name.lower()
    matches = [
        candidate
        for candidate in parent.iterdir()
        if candidate.name.lower() == wanted and candidate.is_file()
    ]
    if len(matches) == 1:
        return matches[0]
    return None


def detect_file_type(path: StrPath) -> str:
    """Detect the type of a file that exists but could not be read as an image.

    The MIME type is sniffed from the file contents with libmagic. The file
    name is only consulted when libmagic fails.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No file at {path}")

    try:
        return magic.from_file(str(path), mime=True)
    except PermissionError:
        raise
    except Exception as e:
        warning(f"Failed to sniff type of {path}: {e}")

    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type:
        return mime_type
    return path.suffix.lstrip(".").lower() or UNKNOWN_FILE_TYPE


def clean_exif_value(tag: object | None) -> str | None:
    if tag is None:
        return None
    text = str(tag).strip().strip("\x00").strip()
    if not text.strip(BLANK_EXIF_CHARS):
        return None
    return text


def read_exif_tags(path: Path) -> ExifTags:
    """Read the timestamp-related EXIF tags using exifread."""
    try:
        with open(path, "rb") as fh:
            tags = exifread.process_file(fh, details=False)
    except Exception as e:
        warning(f"Failed to read EXIF from {path}: {e}")
        return {}

    found: ExifTags = {}
    for name in TIMESTAMP_TAGS:
        value = clean_exif_value(tags.get(name))
        if value is not None:
            found[name] = value
    return found


def get_file_mod_date(path: Path) -> str:
    """Modification time in local time, formatted like ``20-May-2013 14:43:10``."""
    modified = datetime.fromtimestamp(path.stat().st_mtime)
    return modified.strftime(FILE_MOD_DATE_FORMAT)


def read_image_metadata(path: StrPath) -> ImageMetadata:
    """Read image info and timestamp fields.

    Raises ``OSError`` (including ``PIL.UnidentifiedImageError``) when the
    file is missing or Pillow does not recognize it as an image. Images over
    Pillow's pixel limit are still read, without format and size.
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            image_format = img.format
            width, height = img.size
    except (Image.DecompressionBombError, Image.DecompressionBombWarning):
        image_format = width = height = None

    tags = read_exif_tags(path)
    return ImageMetadata(
        path=path,
        format=image_format,
        width=width,
        height=height,
        date_time_original=tags.get(TAG_DATETIME_ORIGINAL),
        subsec_time_original=tags.get(TAG_SUBSEC_TIME_ORIGINAL),
        date_time=tags.get(TAG_DATETIME),
        file_mod_date=get_file_mod_date(path),
    )

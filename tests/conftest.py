from __future__ import annotations

import os
import struct
import zlib
from collections.abc import Callable
from typing import TypeAlias
from datetime import datetime
from pathlib import Path

import pytest
from PIL import Image


EXIF_IFD_POINTER = 0x8769
TAG_DATETIME = 306
TAG_DATETIME_ORIGINAL = 36867
TAG_SUBSEC_TIME_ORIGINAL = 37521

ImageFactory: TypeAlias = Callable[..., Path]


def _make_image(
    path: Path,
    *,
    original: str | None = None,
    subsec: str | None = None,
    date_time: str | None = None,
    modified: datetime | None = None,
    image_format: str = "JPEG",
) -> Path:
    exif = Image.Exif()
    if date_time is not None:
        exif[TAG_DATETIME] = date_time
    if original is not None:
        camera: dict[int, str] = {TAG_DATETIME_ORIGINAL: original}
        if subsec is not None:
            camera[TAG_SUBSEC_TIME_ORIGINAL] = subsec
        exif[EXIF_IFD_POINTER] = camera

    image = Image.new("RGB", (8, 8), color="white")
    if len(exif):
        image.save(path, format=image_format, exif=exif)
    else:
        image.save(path, format=image_format)

    if modified is not None:
        stamp = modified.timestamp()
        os.utime(path, (stamp, stamp))
    return path


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Create a small image under ``tmp_path`` with the given timestamp fields."""

    def factory(name: str = "photo.jpg", **kwargs) -> Path:
        return _make_image(tmp_path / name, **kwargs)

    return factory


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


@pytest.fixture
def make_png_header(tmp_path: Path) -> Callable[..., Path]:
    """Write a PNG that only declares its size, with no pixel data."""

    def factory(width: int, height: int, name: str = "panorama.png") -> Path:
        header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
        path = tmp_path / name
        path.write_bytes(
            b"\x89PNG\r\n\x1a\n"
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", b"")
            + _png_chunk(b"IEND", b"")
        )
        return path

    return factory

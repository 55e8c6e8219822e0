#!/usr/bin/env python3
"""
Image Timestamp Extractor

Prints the relative timestamp of an image, in seconds, read from its EXIF
metadata or file modification date.
"""

from __future__ import annotations

from imgstamp.cli import main


if __name__ == "__main__":
    main()

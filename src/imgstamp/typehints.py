from decimal import Decimal
from os import PathLike
from typing import TypeAlias


Seconds: TypeAlias = Decimal
StrPath: TypeAlias = str | PathLike[str]
ExifTags: TypeAlias = dict[str, str]

"""hexfmt - shortened hexadecimal formatting of byte sequences."""

from .formatting import (
    DEFAULT_PRECISION,
    ELLIPSIS,
    Case,
    format_hex,
    format_hex_list,
    write_hex,
    write_hex_list,
)
from .wrappers import HexFmt, HexList

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRECISION",
    "ELLIPSIS",
    "Case",
    "HexFmt",
    "HexList",
    "format_hex",
    "format_hex_list",
    "write_hex",
    "write_hex_list",
]

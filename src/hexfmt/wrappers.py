"""Wrapper types that render byte sequences through Python's format protocol."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TextIO

from .formatting import Case, format_hex, format_hex_list, write_hex, write_hex_list

# [.precision][type]; width, fill and alignment are not supported
_FORMAT_SPEC = re.compile(r"(?:\.(?P<precision>\d+))?(?P<type>[sxX]?)")


def parse_format_spec(spec: str, type_name: str) -> tuple[int | None, Case]:
    """Split a format spec into precision and case.

    Examples:
        "" -> (None, Case.LOWER)
        ".7" -> (7, Case.LOWER)
        ".8X" -> (8, Case.UPPER)

    Raises:
        ValueError: for anything other than ``[.precision][s|x|X]``
    """
    match = _FORMAT_SPEC.fullmatch(spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{spec}' for object of type '{type_name}'")
    precision = match.group("precision")
    case = Case.UPPER if match.group("type") == "X" else Case.LOWER
    return (int(precision) if precision is not None else None), case


class HexFmt:
    """A byte sequence rendered as a shortened hex string.

    ``str()``, ``repr()`` and the ``x`` format type give lower-case digits,
    ``X`` gives upper-case. The precision in the format spec is the maximum
    output length:

        >>> f"{HexFmt(bytes(range(9, 16))):.8X}"
        '090..E0F'
    """

    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def write(self, sink: TextIO, precision: int | None = None, case: Case = Case.LOWER) -> None:
        """Stream the rendering to a sink.

        Args:
            sink: Object with a text ``write()`` method
            precision: Maximum number of characters (None = DEFAULT_PRECISION)
            case: Case of the hex digits
        """
        write_hex(self.data, sink, precision, case)

    def lower_hex(self, precision: int | None = None) -> str:
        """Return the lower-case rendering.

        Args:
            precision: Maximum number of characters (None = DEFAULT_PRECISION)

        Returns:
            Hex digits, shortened from the middle with ".." if needed
        """
        return format_hex(self.data, precision, Case.LOWER)

    def upper_hex(self, precision: int | None = None) -> str:
        """Return the upper-case rendering. See lower_hex."""
        return format_hex(self.data, precision, Case.UPPER)

    def __format__(self, spec: str) -> str:
        precision, case = parse_format_spec(spec, type(self).__name__)
        return format_hex(self.data, precision, case)

    def __str__(self) -> str:
        return self.lower_hex()

    __repr__ = __str__


class HexList:
    """A list of byte sequences rendered as ``[hex, hex, ...]``.

    Each element is shortened on its own with the precision given to the
    list view.

        >>> str(HexList([b"AB", b"BA"]))
        '[4142, 4241]'
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable):
        # A one-shot iterator would render only once
        if isinstance(items, Iterator):
            items = tuple(items)
        self.items = items

    def write(self, sink: TextIO, precision: int | None = None, case: Case = Case.LOWER) -> None:
        """Stream the list to a sink, passing precision to every element."""
        write_hex_list(self.items, sink, precision, case)

    def lower_hex(self, precision: int | None = None) -> str:
        """Return the lower-case list rendering, e.g. ``[4142, 4241]``."""
        return format_hex_list(self.items, precision, Case.LOWER)

    def upper_hex(self, precision: int | None = None) -> str:
        """Return the upper-case list rendering, e.g. ``[4A4B, 4B4A]``."""
        return format_hex_list(self.items, precision, Case.UPPER)

    def __format__(self, spec: str) -> str:
        precision, case = parse_format_spec(spec, type(self).__name__)
        return format_hex_list(self.items, precision, case)

    def __str__(self) -> str:
        return self.lower_hex()

    __repr__ = __str__

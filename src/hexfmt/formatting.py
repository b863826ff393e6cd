"""Shortened hexadecimal rendering of byte sequences."""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Iterable, TextIO

DEFAULT_PRECISION = 10
ELLIPSIS = ".."


class Case(Enum):
    """Hex digit case."""

    LOWER = "lower"
    UPPER = "upper"

    def apply(self, text: str) -> str:
        """Return hex digits in this case. Non-letters are unchanged."""
        return text.upper() if self is Case.UPPER else text


def as_bytes(data) -> bytes:
    """Coerce a bytes-like object or an iterable of ints to bytes.

    Raises:
        TypeError: for ``str`` and ``int`` (``bytes(5)`` would silently
            produce five zero bytes)
        ValueError: if an int is outside ``range(256)``
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, (str, int)):
        raise TypeError(f"expected a byte sequence, got {type(data).__name__}")
    return bytes(data)


def _resolve_precision(precision: int | None) -> int:
    if precision is None:
        return DEFAULT_PRECISION
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return precision


def write_hex(
    data,
    sink: TextIO,
    precision: int | None = None,
    case: Case = Case.LOWER,
) -> None:
    """Write ``data`` as hex to ``sink``, eliding the middle if it doesn't fit.

    The output is at most ``precision`` characters long (``DEFAULT_PRECISION``
    when None). If the full rendering fits it is written as is. Otherwise the
    digits that fit are split between the start and the end of the sequence
    around ``ELLIPSIS``, the left side getting the extra digit when the budget
    is odd. An odd digit count on either side is filled with a single nibble
    of the adjacent byte.

    Examples:
        bytes(range(9, 16)), precision 7 -> 090..0f
        bytes(range(9, 16)), precision 8, upper -> 090..E0F

    Args:
        data: Byte sequence to render
        sink: Object with a text ``write()`` method
        precision: Maximum number of characters to write
        case: Case of the hex digits
    """
    data = as_bytes(data)
    precision = _resolve_precision(precision)

    # Short enough, don't shorten.
    if 2 * len(data) <= precision:
        sink.write(case.apply(data.hex()))
        return

    # The bytes don't fit and the ellipsis fills the whole budget.
    if precision <= len(ELLIPSIS):
        sink.write(ELLIPSIS[:precision])
        return

    num_digits = precision - len(ELLIPSIS)
    right = num_digits // 2
    left = num_digits - right

    head = data[: left // 2].hex()
    if left % 2:
        # First digit of the next byte
        head += format(data[left // 2] >> 4, "x")

    tail = data[len(data) - right // 2:].hex()
    if right % 2:
        # Second digit of the byte before the tail
        tail = format(data[len(data) - right // 2 - 1] & 0x0F, "x") + tail

    sink.write(case.apply(head))
    sink.write(ELLIPSIS)
    sink.write(case.apply(tail))


def format_hex(data, precision: int | None = None, case: Case = Case.LOWER) -> str:
    """Return the shortened hex rendering of ``data`` as a string."""
    buf = StringIO()
    write_hex(data, buf, precision, case)
    return buf.getvalue()


def write_hex_list(
    items: Iterable,
    sink: TextIO,
    precision: int | None = None,
    case: Case = Case.LOWER,
) -> None:
    """Write ``items`` as a bracketed, comma-separated list of hex strings.

    ``precision`` is passed to every element as is, so each element is
    shortened on its own and None gives each one ``DEFAULT_PRECISION``.

    Examples:
        [b"AB", b"BA"] -> [4142, 4241]
        [] -> []

    Raises:
        TypeError: if any element is not a byte sequence, before anything
            is written
    """
    _resolve_precision(precision)
    # Coerce everything first so a bad element leaves the sink untouched
    items = [as_bytes(item) for item in items]
    sink.write("[")
    for i, item in enumerate(items):
        if i:
            sink.write(", ")
        write_hex(item, sink, precision, case)
    sink.write("]")


def format_hex_list(
    items: Iterable,
    precision: int | None = None,
    case: Case = Case.LOWER,
) -> str:
    """Return the list rendering of ``items`` as a string."""
    buf = StringIO()
    write_hex_list(items, buf, precision, case)
    return buf.getvalue()

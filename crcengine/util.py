from __future__ import annotations
import enum
from typing import Iterable, Sequence, Union

#: Everything the engines accept as message data.
OctetsLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class PrintFormats(enum.IntEnum):
    HEX = 0
    DEC = 1
    BIN = 2


def as_octets(data: OctetsLike) -> Union[bytes, bytearray]:
    """Return ``data`` as a byte sequence. Byte strings are passed through as they are, any other
    iterable is converted with :py:class:`bytes`, so values outside of ``range(256)`` raise a
    :py:class:`ValueError` and strings raise a :py:class:`TypeError`.

    >>> as_octets([0x31, 0x32])
    b'12'
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)


def hex_str(value: int, width: int) -> str:
    """Zero padded hex string with enough digits for a value of ``width`` bits.

    >>> hex_str(0x29B1, 16)
    '0x29b1'
    >>> hex_str(0xDAF, 12)
    '0x0daf'
    """
    digits = ((width + 7) // 8) * 2
    return f"{value:#0{digits + 2}x}"


def format_value(print_format: PrintFormats, value: int, width: int) -> str:
    if print_format == PrintFormats.HEX:
        return f"0x{value:0{((width + 7) // 8) * 2}X}"
    elif print_format == PrintFormats.DEC:
        return f"{value}"
    elif print_format == PrintFormats.BIN:
        return f"0b{value:0{width}b}"
    raise ValueError(f"unknown print format {print_format!r}")


def c_type_for_width(width: int) -> str:
    """Smallest fixed width C integer type which can hold a value of ``width`` bits."""
    for type_width in (8, 16, 32, 64):
        if width <= type_width:
            return f"uint{type_width}_t"
    raise ValueError(f"no C integer type for width {width}")


def format_c_array(
    name: str,
    values: Sequence[int],
    width: int,
    per_line: int = 8,
    print_format: PrintFormats = PrintFormats.HEX,
) -> str:
    """Render ``values`` as a C array initializer, suitable to store precomputed tables in ROM."""
    lines = [f"static const {c_type_for_width(width)} {name}[{len(values)}] = {{"]
    for idx in range(0, len(values), per_line):
        row = ", ".join(
            format_value(print_format, val, width) for val in values[idx : idx + per_line]
        )
        lines.append(f"    {row},")
    lines.append("};")
    return "\n".join(lines)

"""Table driven CRC engine based on Sarwate's algorithm.

A 256 entry table holds the remainder of every possible byte value placed into the top byte of
the register. Each input byte then costs one table lookup and one XOR instead of eight conditional
shift-and-XOR steps. The table only depends on the CRC width and polynomial. Reflection is applied
when data enters and when the remainder leaves the register, so reflected and non-reflected
parameter sets with the same polynomial share one table.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Tuple

from crcengine.exceptions import TableMismatchError
from crcengine.log import get_console_logger
from crcengine.params import CrcParameters
from crcengine.reflect import reflect_byte
from crcengine.util import OctetsLike, PrintFormats, as_octets, format_c_array, hex_str


class CrcTable:
    """Immutable lookup table bound to the width and polynomial it was built from. Use
    :py:func:`build_table` to retrieve one."""

    def __init__(self, width: int, polynomial: int, entries: Tuple[int, ...]):
        if len(entries) != 256:
            raise ValueError(f"CRC table requires 256 entries, got {len(entries)}")
        self._width = width
        self._polynomial = polynomial
        self._entries = tuple(entries)

    @classmethod
    def build(cls, width: int, polynomial: int) -> CrcTable:
        """Compute a fresh table. Each entry is the remainder of its index placed in the
        most significant byte of the register, divided by the polynomial."""
        top_bit = 1 << (width - 1)
        mask = (1 << width) - 1
        shift = width - 8
        entries = []
        for dividend in range(256):
            # Start with the dividend followed by zeros
            remainder = dividend << shift
            for _ in range(8):
                if remainder & top_bit:
                    remainder = ((remainder << 1) & mask) ^ polynomial
                else:
                    remainder = (remainder << 1) & mask
            entries.append(remainder)
        get_console_logger().debug(
            f"Built CRC table for width {width} and polynomial {hex_str(polynomial, width)}"
        )
        return cls(width, polynomial, tuple(entries))

    @property
    def width(self) -> int:
        return self._width

    @property
    def polynomial(self) -> int:
        return self._polynomial

    @property
    def entries(self) -> Tuple[int, ...]:
        return self._entries

    def matches(self, params: CrcParameters) -> bool:
        return self._width == params.width and self._polynomial == params.polynomial

    def verify_matches(self, params: CrcParameters):
        if not self.matches(params):
            raise TableMismatchError(
                self._width, self._polynomial, params.width, params.polynomial
            )

    def as_c_array(
        self,
        name: str = "crcTable",
        per_line: int = 8,
        print_format: PrintFormats = PrintFormats.HEX,
    ) -> str:
        """Render the table as a C array initializer so it can be stored in ROM of an embedded
        target instead of being built at run-time."""
        return format_c_array(name, self._entries, self._width, per_line, print_format)

    def __getitem__(self, idx: int) -> int:
        return self._entries[idx]

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __eq__(self, other: object):
        if not isinstance(other, CrcTable):
            return False
        return (
            self._width == other._width
            and self._polynomial == other._polynomial
            and self._entries == other._entries
        )

    def __hash__(self):
        return hash((self._width, self._polynomial, self._entries))

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(width={self._width!r}, "
            f"polynomial={hex_str(self._polynomial, self._width)})"
        )


@lru_cache(maxsize=None)
def _cached_table(width: int, polynomial: int) -> CrcTable:
    return CrcTable.build(width, polynomial)


def build_table(params: CrcParameters) -> CrcTable:
    """Retrieve the lookup table for a parameter set. Tables are cached per width and polynomial,
    so calling this repeatedly is cheap and always yields the same read-only table."""
    return _cached_table(params.width, params.polynomial)


def update_accelerated(
    table: CrcTable, params: CrcParameters, remainder: int, data: OctetsLike
) -> int:
    """Feed ``data`` into the raw register value ``remainder`` one byte at a time.

    :raises TableMismatchError: ``table`` was not built for the width and polynomial of
        ``params``.
    """
    table.verify_matches(params)
    entries = table.entries
    shift = params.width - 8
    mask = params.mask
    if params.reflect_input:
        for byte in as_octets(data):
            remainder = entries[reflect_byte(byte) ^ (remainder >> shift)] ^ (
                (remainder << 8) & mask
            )
    else:
        for byte in as_octets(data):
            remainder = entries[byte ^ (remainder >> shift)] ^ ((remainder << 8) & mask)
    return remainder


def crc_accelerated(table: CrcTable, params: CrcParameters, data: OctetsLike) -> int:
    """Compute the CRC of ``data`` using a lookup table built with :py:func:`build_table`.

    >>> from crcengine.catalog import Catalog
    >>> params = Catalog.CRC32
    >>> hex(crc_accelerated(build_table(params), params, b"123456789"))
    '0xcbf43926'
    """
    return params.finalize(update_accelerated(table, params, params.initial_remainder, data))

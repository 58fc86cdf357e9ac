from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from crcengine.exceptions import CrcParameterError
from crcengine.reflect import reflect


@dataclass(frozen=True)
class CrcParameters:
    """Immutable description of one CRC standard, following the parameter model of Ross Williams'
    "A Painless Guide to CRC Error Detection Algorithms" as it is used by the reveng CRC catalogue.

    :param width: Bit width of the CRC register. Must be at least 8 because the table driven
        algorithm consumes whole bytes into the top byte of the register.
    :param polynomial: Generator polynomial without the implicit ``x**width`` term. Always given
        with the highest order term in the most significant bit.
    :param initial_remainder: Register value before any data is processed.
    :param final_xor: Value XORed into the register after the optional output reflection.
    :param reflect_input: Reverse the bits of each input byte before folding it into the register.
    :param reflect_output: Reverse the complete register before the final XOR is applied.
    :param check_value: CRC of the ASCII string ``123456789``. Optional for custom parameter sets.
    :param name: Display name.
    :raises CrcParameterError: One of the fields is invalid.
    """

    width: int
    polynomial: int
    initial_remainder: int
    final_xor: int
    reflect_input: bool
    reflect_output: bool
    check_value: Optional[int] = None
    name: str = "custom"

    def __post_init__(self):
        if not isinstance(self.width, int) or self.width < 8:
            raise CrcParameterError("width", self.width, "must be an integer of at least 8")
        self._verify_fits("polynomial", self.polynomial)
        self._verify_fits("initial_remainder", self.initial_remainder)
        self._verify_fits("final_xor", self.final_xor)
        if self.check_value is not None:
            self._verify_fits("check_value", self.check_value)

    def _verify_fits(self, field: str, value: int):
        if not isinstance(value, int) or value < 0 or value > self.mask:
            raise CrcParameterError(
                field, value, f"must be an unsigned value of at most {self.width} bits"
            )

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.width - 1)

    @property
    def byte_len(self) -> int:
        """Number of bytes required to hold a CRC value of this width."""
        return (self.width + 7) // 8

    def finalize(self, remainder: int) -> int:
        """Turn a raw register value into the reported CRC value."""
        if self.reflect_output:
            remainder = reflect(remainder, self.width)
        return remainder ^ self.final_xor

    def __str__(self):
        digits = self.byte_len * 2
        return (
            f"{self.name}(width={self.width}, poly={self.polynomial:#0{digits + 2}x}, "
            f"init={self.initial_remainder:#0{digits + 2}x}, "
            f"refin={self.reflect_input}, refout={self.reflect_output}, "
            f"xorout={self.final_xor:#0{digits + 2}x})"
        )

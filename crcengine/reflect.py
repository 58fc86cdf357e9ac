"""Bit reflection, which is used to support least significant bit first CRC conventions."""


def reflect(value: int, n_bits: int) -> int:
    """Reverse the order of the lowest ``n_bits`` bits of ``value``. Bit ``i`` of the result is
    bit ``n_bits - 1 - i`` of the input. Bits at or above ``n_bits`` are ignored.

    >>> hex(reflect(0x01, 8))
    '0x80'
    >>> hex(reflect(0x1234, 16))
    '0x2c48'
    >>> reflect(0xFF01, 8)
    128
    """
    assert n_bits >= 0, "bit count must not be negative"
    reflection = 0
    for _ in range(n_bits):
        reflection = (reflection << 1) | (value & 0x01)
        value >>= 1
    return reflection


_REFLECTED_BYTES = tuple(reflect(byte, 8) for byte in range(256))


def reflect_byte(value: int) -> int:
    """Reflect a single octet using a precomputed table."""
    return _REFLECTED_BYTES[value & 0xFF]

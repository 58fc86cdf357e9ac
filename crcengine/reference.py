"""Reference CRC engine. This computes the CRC by explicit modulo-2 polynomial long division,
one bit at a time. It is slow but needs no lookup table and serves as the ground truth for the
other algorithms.
"""
from crcengine.params import CrcParameters
from crcengine.reflect import reflect_byte
from crcengine.util import OctetsLike, as_octets


def update_reference(params: CrcParameters, remainder: int, data: OctetsLike) -> int:
    """Feed ``data`` into the raw register value ``remainder`` and return the new raw register
    value. No finalization is applied."""
    shift = params.width - 8
    top_bit = params.top_bit
    mask = params.mask
    poly = params.polynomial
    for byte in as_octets(data):
        if params.reflect_input:
            byte = reflect_byte(byte)
        # Bring the next byte into the remainder
        remainder ^= byte << shift
        for _ in range(8):
            if remainder & top_bit:
                remainder = ((remainder << 1) & mask) ^ poly
            else:
                remainder = (remainder << 1) & mask
    return remainder


def crc_reference(params: CrcParameters, data: OctetsLike) -> int:
    """Compute the CRC of ``data`` bit by bit.

    >>> from crcengine.catalog import Catalog
    >>> hex(crc_reference(Catalog.CRC16_CCITT_FALSE, b"123456789"))
    '0x29b1'
    """
    return params.finalize(update_reference(params, params.initial_remainder, data))

"""Simple 8-bit two's complement checksum. Cheaper than a CRC but it does not detect reordered
bytes."""
from crcengine.util import OctetsLike, as_octets


def checksum8(data: OctetsLike) -> int:
    """Two's complement of the byte sum, so the sum of the data and its checksum is 0 modulo 256.

    >>> hex(checksum8(b"123456789"))
    '0x23'
    """
    return -sum(as_octets(data)) & 0xFF


def verify_checksum8(data: OctetsLike, checksum: int) -> bool:
    return (sum(as_octets(data)) + checksum) & 0xFF == 0

import enum


class CrcAlgorithm(enum.IntEnum):
    #: Modulo-2 long division, one bit at a time. Needs no table memory.
    BIT_SERIAL = 0
    #: Sarwate's algorithm: one 256 entry table lookup per byte.
    TABLE = 1
    #: Table driven implementation of the crcmod package, which uses its C extension
    #: where available.
    CRCMOD = 2


#: ASCII test vector used to derive the check value of a CRC parameter set.
CHECK_MESSAGE = b"123456789"

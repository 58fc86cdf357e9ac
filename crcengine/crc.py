"""Ready to use CRC functions for the standards supported by the original embedded library."""
from crcengine.calculator import mk_predefined_crc_fun
from crcengine.defs import CrcAlgorithm

#: CRC16-CCITT with polynomial 0x1021, initial value 0xFFFF and no reflection, as specified by the
#: PUS standard B.1.
CRC16_CCITT_FUNC = mk_predefined_crc_fun(crc_name="crc-ccitt-false", algorithm=CrcAlgorithm.TABLE)

#: Right shifting CRC-16 with polynomial 0x8005 and a zero seed.
CRC16_FUNC = mk_predefined_crc_fun(crc_name="crc-16", algorithm=CrcAlgorithm.TABLE)

#: CRC-32 with polynomial 0x04C11DB7 as used by Ethernet and zlib.
CRC32_FUNC = mk_predefined_crc_fun(crc_name="crc-32", algorithm=CrcAlgorithm.TABLE)

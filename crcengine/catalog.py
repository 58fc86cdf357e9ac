"""Predefined CRC parameter sets.

Parameters and check values are taken from the reveng CRC catalogue
(https://reveng.sourceforge.io/crc-catalogue/all.htm). Lookup by name also accepts the names used
by :py:mod:`crcmod.predefined`.
"""
from typing import Dict

from crcengine.exceptions import UnknownCrcError
from crcengine.params import CrcParameters


class Catalog:
    CRC8_SMBUS = CrcParameters(8, 0x07, 0x00, 0x00, False, False, 0xF4, "CRC-8/SMBUS")
    CRC8_MAXIM_DOW = CrcParameters(8, 0x31, 0x00, 0x00, True, True, 0xA1, "CRC-8/MAXIM-DOW")
    CRC8_ROHC = CrcParameters(8, 0x07, 0xFF, 0x00, True, True, 0xD0, "CRC-8/ROHC")
    CRC8_I_432_1 = CrcParameters(8, 0x07, 0x00, 0x55, False, False, 0xA1, "CRC-8/I-432-1")
    # Reflects the output but not the input
    CRC12_UMTS = CrcParameters(12, 0x80F, 0x000, 0x000, False, True, 0xDAF, "CRC-12/UMTS")
    #: CRC-CCITT as used by the PUS standard, also known as CRC-16/IBM-3740.
    CRC16_CCITT_FALSE = CrcParameters(
        16, 0x1021, 0xFFFF, 0x0000, False, False, 0x29B1, "CRC-16/CCITT-FALSE"
    )
    #: Right shifting CRC-16 with a zero seed, also known as CRC-16/ARC or CRC-16/IBM.
    CRC16_ARC = CrcParameters(16, 0x8005, 0x0000, 0x0000, True, True, 0xBB3D, "CRC-16/ARC")
    CRC16_XMODEM = CrcParameters(16, 0x1021, 0x0000, 0x0000, False, False, 0x31C3, "CRC-16/XMODEM")
    CRC16_KERMIT = CrcParameters(16, 0x1021, 0x0000, 0x0000, True, True, 0x2189, "CRC-16/KERMIT")
    CRC16_MODBUS = CrcParameters(16, 0x8005, 0xFFFF, 0x0000, True, True, 0x4B37, "CRC-16/MODBUS")
    CRC16_IBM_SDLC = CrcParameters(
        16, 0x1021, 0xFFFF, 0xFFFF, True, True, 0x906E, "CRC-16/IBM-SDLC"
    )
    CRC16_UMTS = CrcParameters(16, 0x8005, 0x0000, 0x0000, False, False, 0xFEE8, "CRC-16/UMTS")
    CRC16_USB = CrcParameters(16, 0x8005, 0xFFFF, 0xFFFF, True, True, 0xB4C8, "CRC-16/USB")
    CRC16_GENIBUS = CrcParameters(
        16, 0x1021, 0xFFFF, 0xFFFF, False, False, 0xD64E, "CRC-16/GENIBUS"
    )
    CRC16_MCRF4XX = CrcParameters(16, 0x1021, 0xFFFF, 0x0000, True, True, 0x6F91, "CRC-16/MCRF4XX")
    CRC16_DNP = CrcParameters(16, 0x3D65, 0x0000, 0xFFFF, True, True, 0xEA82, "CRC-16/DNP")
    CRC16_T10_DIF = CrcParameters(
        16, 0x8BB7, 0x0000, 0x0000, False, False, 0xD0DB, "CRC-16/T10-DIF"
    )
    CRC24_OPENPGP = CrcParameters(
        24, 0x864CFB, 0xB704CE, 0x000000, False, False, 0x21CF02, "CRC-24/OPENPGP"
    )
    #: CRC-32 as used by Ethernet, zlib and PNG, also known as CRC-32/ISO-HDLC.
    CRC32_ISO_HDLC = CrcParameters(
        32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True, 0xCBF43926, "CRC-32/ISO-HDLC"
    )
    CRC32_BZIP2 = CrcParameters(
        32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, False, False, 0xFC891918, "CRC-32/BZIP2"
    )
    CRC32_MPEG_2 = CrcParameters(
        32, 0x04C11DB7, 0xFFFFFFFF, 0x00000000, False, False, 0x0376E6E7, "CRC-32/MPEG-2"
    )
    CRC32_CKSUM = CrcParameters(
        32, 0x04C11DB7, 0x00000000, 0xFFFFFFFF, False, False, 0x765E7680, "CRC-32/CKSUM"
    )
    CRC32_JAMCRC = CrcParameters(
        32, 0x04C11DB7, 0xFFFFFFFF, 0x00000000, True, True, 0x340BC6D9, "CRC-32/JAMCRC"
    )
    CRC32_ISCSI = CrcParameters(
        32, 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True, 0xE3069283, "CRC-32/ISCSI"
    )
    CRC32_XFER = CrcParameters(
        32, 0x000000AF, 0x00000000, 0x00000000, False, False, 0xBD0BE338, "CRC-32/XFER"
    )
    CRC64_ECMA_182 = CrcParameters(
        64,
        0x42F0E1EBA9EA3693,
        0x0000000000000000,
        0x0000000000000000,
        False,
        False,
        0x6C40DF5F0B497347,
        "CRC-64/ECMA-182",
    )
    CRC64_XZ = CrcParameters(
        64,
        0x42F0E1EBA9EA3693,
        0xFFFFFFFFFFFFFFFF,
        0xFFFFFFFFFFFFFFFF,
        True,
        True,
        0x995DC9BBDF1939FA,
        "CRC-64/XZ",
    )

    # Short names of the three standards supported by the original embedded library
    CRC_CCITT = CRC16_CCITT_FALSE
    CRC16 = CRC16_ARC
    CRC32 = CRC32_ISO_HDLC


def _all_parameters():
    seen = []
    for attr in sorted(vars(Catalog)):
        val = getattr(Catalog, attr)
        if isinstance(val, CrcParameters) and val not in seen:
            seen.append(val)
    return seen


#: All distinct parameter sets of the :py:class:`Catalog`
ALL_PARAMETERS = tuple(_all_parameters())

# Aliases, mostly the names used by crcmod.predefined
_ALIASES = {
    "crc-8": Catalog.CRC8_SMBUS,
    "crc-8-maxim": Catalog.CRC8_MAXIM_DOW,
    "crc-8-rohc": Catalog.CRC8_ROHC,
    "crc-8-itu": Catalog.CRC8_I_432_1,
    "crc-12/3gpp": Catalog.CRC12_UMTS,
    "crc-ccitt": Catalog.CRC16_CCITT_FALSE,
    "crc-ccitt-false": Catalog.CRC16_CCITT_FALSE,
    "crc-16/ibm-3740": Catalog.CRC16_CCITT_FALSE,
    "crc-16": Catalog.CRC16_ARC,
    "crc-16/ibm": Catalog.CRC16_ARC,
    "xmodem": Catalog.CRC16_XMODEM,
    "kermit": Catalog.CRC16_KERMIT,
    "modbus": Catalog.CRC16_MODBUS,
    "x-25": Catalog.CRC16_IBM_SDLC,
    "crc-16/x-25": Catalog.CRC16_IBM_SDLC,
    "crc-16-buypass": Catalog.CRC16_UMTS,
    "crc-16/buypass": Catalog.CRC16_UMTS,
    "crc-16-usb": Catalog.CRC16_USB,
    "crc-16-genibus": Catalog.CRC16_GENIBUS,
    "crc-16-mcrf4xx": Catalog.CRC16_MCRF4XX,
    "crc-16-dnp": Catalog.CRC16_DNP,
    "crc-16-t10-dif": Catalog.CRC16_T10_DIF,
    "crc-24": Catalog.CRC24_OPENPGP,
    "crc-32": Catalog.CRC32_ISO_HDLC,
    "crc-32-bzip2": Catalog.CRC32_BZIP2,
    "crc-32-mpeg": Catalog.CRC32_MPEG_2,
    "posix": Catalog.CRC32_CKSUM,
    "jamcrc": Catalog.CRC32_JAMCRC,
    "crc-32c": Catalog.CRC32_ISCSI,
    "xfer": Catalog.CRC32_XFER,
}

PREDEFINED: Dict[str, CrcParameters] = {
    **{params.name.lower(): params for params in ALL_PARAMETERS},
    **_ALIASES,
}


def get_predefined(crc_name: str) -> CrcParameters:
    """Look up a predefined parameter set by name, ignoring case.

    >>> get_predefined("CRC-16/ARC") is Catalog.CRC16
    True

    :raises UnknownCrcError: No parameter set with that name exists.
    """
    try:
        return PREDEFINED[crc_name.lower()]
    except KeyError:
        raise UnknownCrcError(crc_name) from None

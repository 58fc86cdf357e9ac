"""CRC functions backed by :py:mod:`crcmod`, which ships a C extension for the table driven
algorithm.

crcmod models a reflected CRC as a right shifting register and can therefore not express
parameter sets which reflect only the input or only the output. It also only supports register
widths of 8, 16, 24, 32 and 64 bits.
"""
from typing import Callable

import crcmod

from crcengine.defs import CrcAlgorithm
from crcengine.exceptions import UnsupportedAlgorithmError
from crcengine.params import CrcParameters

CRCMOD_WIDTHS = (8, 16, 24, 32, 64)

CrcmodFun = Callable[..., int]


def supports_crcmod(params: CrcParameters) -> bool:
    return params.reflect_input == params.reflect_output and params.width in CRCMOD_WIDTHS


def mk_crcmod_fun(params: CrcParameters) -> CrcmodFun:
    """Create a crcmod function for the given parameter set. The returned function has the
    crcmod signature ``fun(data, crc=initial)``, where ``crc`` is the CRC value of the data
    processed so far.

    :raises UnsupportedAlgorithmError: crcmod can not express the parameter set.
    """
    if params.reflect_input != params.reflect_output:
        raise UnsupportedAlgorithmError(
            CrcAlgorithm.CRCMOD, params.name, "input and output reflection must be identical"
        )
    if params.width not in CRCMOD_WIDTHS:
        raise UnsupportedAlgorithmError(
            CrcAlgorithm.CRCMOD, params.name, f"width must be one of {CRCMOD_WIDTHS}"
        )
    # crcmod expects the polynomial including the leading term and the initial value in the
    # form of an already finalized CRC.
    return crcmod.mkCrcFun(
        (1 << params.width) | params.polynomial,
        initCrc=params.finalize(params.initial_remainder),
        rev=params.reflect_input,
        xorOut=params.final_xor,
    )

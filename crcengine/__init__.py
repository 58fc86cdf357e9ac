import logging

from crcengine.calculator import CrcCalculator, CrcRegister, mk_predefined_crc_fun
from crcengine.catalog import Catalog, PREDEFINED, get_predefined
from crcengine.defs import CrcAlgorithm
from crcengine.exceptions import (
    CrcParameterError,
    TableMismatchError,
    UnknownCrcError,
    UnsupportedAlgorithmError,
)
from crcengine.params import CrcParameters
from crcengine.reference import crc_reference
from crcengine.reflect import reflect
from crcengine.table import CrcTable, build_table, crc_accelerated

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CrcAlgorithm",
    "CrcCalculator",
    "CrcParameterError",
    "CrcParameters",
    "CrcRegister",
    "CrcTable",
    "PREDEFINED",
    "TableMismatchError",
    "UnknownCrcError",
    "UnsupportedAlgorithmError",
    "build_table",
    "crc_accelerated",
    "crc_reference",
    "get_predefined",
    "mk_predefined_crc_fun",
    "reflect",
]

__LIB_LOGGER = logging.getLogger(__name__)


def get_lib_logger() -> logging.Logger:
    """Get the library logger. Can be used to modify the library logs or disable the
    propagation."""
    return __LIB_LOGGER

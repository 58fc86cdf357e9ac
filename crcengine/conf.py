"""Library wide defaults. These are used by :py:class:`crcengine.calculator.CrcCalculator` when
no parameter set or algorithm is passed explicitly. Configure them once at start-up, access is
not synchronized."""
import enum

from crcengine.catalog import Catalog
from crcengine.defs import CrcAlgorithm
from crcengine.log import get_console_logger
from crcengine.params import CrcParameters


class CrcConfKeys(enum.IntEnum):
    DEFAULT_PARAMETERS = 0
    DEFAULT_ALGORITHM = 1


__CRC_DICT = {
    CrcConfKeys.DEFAULT_PARAMETERS: Catalog.CRC16_CCITT_FALSE,
    CrcConfKeys.DEFAULT_ALGORITHM: CrcAlgorithm.TABLE,
}


def set_default_parameters(params: CrcParameters):
    if not isinstance(params, CrcParameters):
        raise TypeError(f"expected CrcParameters, got {type(params).__name__}")
    get_console_logger().info(f"Default CRC parameter set changed to {params.name}")
    __CRC_DICT[CrcConfKeys.DEFAULT_PARAMETERS] = params


def get_default_parameters() -> CrcParameters:
    return __CRC_DICT[CrcConfKeys.DEFAULT_PARAMETERS]


def set_default_algorithm(algorithm: CrcAlgorithm):
    if not isinstance(algorithm, CrcAlgorithm):
        raise TypeError(f"expected CrcAlgorithm, got {type(algorithm).__name__}")
    get_console_logger().info(f"Default CRC algorithm changed to {algorithm.name}")
    __CRC_DICT[CrcConfKeys.DEFAULT_ALGORITHM] = algorithm


def get_default_algorithm() -> CrcAlgorithm:
    return __CRC_DICT[CrcConfKeys.DEFAULT_ALGORITHM]


def reset_defaults():
    __CRC_DICT[CrcConfKeys.DEFAULT_PARAMETERS] = Catalog.CRC16_CCITT_FALSE
    __CRC_DICT[CrcConfKeys.DEFAULT_ALGORITHM] = CrcAlgorithm.TABLE

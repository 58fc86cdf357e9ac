"""High level CRC API. A :py:class:`CrcCalculator` binds one parameter set to the algorithm which
computes it, including any lookup table the algorithm needs, so a table can never be used with
the wrong parameter set or before it was built.
"""
from __future__ import annotations

from typing import Optional

from crcengine.catalog import get_predefined
from crcengine.conf import get_default_algorithm, get_default_parameters
from crcengine.defs import CHECK_MESSAGE, CrcAlgorithm
from crcengine.exceptions import CrcParameterError
from crcengine.log import get_console_logger
from crcengine.native import mk_crcmod_fun
from crcengine.params import CrcParameters
from crcengine.reference import update_reference
from crcengine.table import CrcTable, build_table, update_accelerated
from crcengine.util import OctetsLike, as_octets, hex_str


class CrcCalculator:
    """Computes CRC values for one parameter set with one algorithm.

    >>> from crcengine.catalog import Catalog
    >>> calc = CrcCalculator(Catalog.CRC32, CrcAlgorithm.TABLE)
    >>> hex(calc.checksum(b"123456789"))
    '0xcbf43926'

    :param params: Parameter set. The library default is used if this is None.
    :param algorithm: Algorithm to use. The library default is used if this is None.
    :raises UnsupportedAlgorithmError: The algorithm can not express the parameter set.
    """

    def __init__(
        self,
        params: Optional[CrcParameters] = None,
        algorithm: Optional[CrcAlgorithm] = None,
    ):
        if params is None:
            params = get_default_parameters()
        if algorithm is None:
            algorithm = get_default_algorithm()
        self._params = params
        self._algorithm = CrcAlgorithm(algorithm)
        self._table: Optional[CrcTable] = None
        self._crcmod_fun = None
        if self._algorithm == CrcAlgorithm.TABLE:
            self._table = build_table(params)
        elif self._algorithm == CrcAlgorithm.CRCMOD:
            self._crcmod_fun = mk_crcmod_fun(params)
        get_console_logger().debug(
            f"Created CRC calculator for {params.name} using {self._algorithm.name}"
        )

    @property
    def params(self) -> CrcParameters:
        return self._params

    @property
    def algorithm(self) -> CrcAlgorithm:
        return self._algorithm

    @property
    def table(self) -> Optional[CrcTable]:
        """Lookup table, only available for the :py:attr:`CrcAlgorithm.TABLE` algorithm."""
        return self._table

    def _initial_state(self) -> int:
        if self._algorithm == CrcAlgorithm.CRCMOD:
            # crcmod continues from the CRC value of the data processed so far
            return self._params.finalize(self._params.initial_remainder)
        return self._params.initial_remainder

    def _update(self, state: int, data: OctetsLike) -> int:
        if self._algorithm == CrcAlgorithm.TABLE:
            return update_accelerated(self._table, self._params, state, data)
        elif self._algorithm == CrcAlgorithm.CRCMOD:
            return self._crcmod_fun(as_octets(data), state)
        return update_reference(self._params, state, data)

    def _finalize(self, state: int) -> int:
        if self._algorithm == CrcAlgorithm.CRCMOD:
            return state
        return self._params.finalize(state)

    def checksum(self, data: OctetsLike) -> int:
        return self._finalize(self._update(self._initial_state(), data))

    def __call__(self, data: OctetsLike) -> int:
        return self.checksum(data)

    def verify(self, data: OctetsLike, expected: int) -> bool:
        return self.checksum(data) == expected

    def check(self) -> bool:
        """Compare the CRC of ``123456789`` against the check value of the parameter set.

        :raises CrcParameterError: The parameter set has no check value.
        """
        if self._params.check_value is None:
            raise CrcParameterError("check_value", None, "required for the conformance check")
        crc = self.checksum(CHECK_MESSAGE)
        if crc != self._params.check_value:
            get_console_logger().warning(
                f"{self._params.name} check failed with {self._algorithm.name}: got "
                f"{hex_str(crc, self._params.width)}, expected "
                f"{hex_str(self._params.check_value, self._params.width)}"
            )
            return False
        return True

    def new(self, data: OctetsLike = b"") -> CrcRegister:
        """Create a new register to compute a CRC incrementally, optionally feeding it some
        initial data."""
        register = CrcRegister(self)
        if data:
            register.update(data)
        return register

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(params={self._params.name!r}, "
            f"algorithm={self._algorithm!r})"
        )


class CrcRegister:
    """CRC state of a single computation. Data can be fed in arbitrary chunks, the result is the
    same as computing the CRC over the concatenation. A register must not be shared between
    concurrent computations, use :py:meth:`copy` instead."""

    def __init__(self, calculator: CrcCalculator):
        self._calculator = calculator
        self._state = calculator._initial_state()

    @property
    def params(self) -> CrcParameters:
        return self._calculator.params

    def update(self, data: OctetsLike):
        self._state = self._calculator._update(self._state, data)

    @property
    def crc_value(self) -> int:
        """Finalized CRC of all data fed so far. The register itself is not modified, so more
        data can be added afterwards."""
        return self._calculator._finalize(self._state)

    def digest(self) -> bytes:
        """CRC value as big endian bytes."""
        return self.crc_value.to_bytes(self.params.byte_len, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> CrcRegister:
        duplicate = CrcRegister(self._calculator)
        duplicate._state = self._state
        return duplicate

    def reset(self):
        self._state = self._calculator._initial_state()


def mk_predefined_crc_fun(
    crc_name: str, algorithm: Optional[CrcAlgorithm] = None
) -> CrcCalculator:
    """Create a callable calculator for a predefined parameter set, see
    :py:data:`crcengine.catalog.PREDEFINED`.

    :raises UnknownCrcError: Unknown CRC name.
    """
    return CrcCalculator(get_predefined(crc_name), algorithm)

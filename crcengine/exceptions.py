class CrcParameterError(ValueError):
    """A field of a CRC parameter set is invalid, for example a polynomial which does not fit
    into the CRC width."""

    def __init__(self, field: str, value, reason: str):
        super().__init__(f"invalid CRC parameter {field}={value!r}: {reason}")
        self.field = field
        self.value = value


class TableMismatchError(ValueError):
    """A lookup table was passed together with a parameter set it was not built for."""

    def __init__(self, table_width: int, table_poly: int, width: int, poly: int):
        super().__init__(
            f"table built for width {table_width} and polynomial {table_poly:#x} used with "
            f"width {width} and polynomial {poly:#x}"
        )
        self.table_width = table_width
        self.table_poly = table_poly
        self.width = width
        self.poly = poly


class UnsupportedAlgorithmError(ValueError):
    """The requested algorithm can not express the given parameter set."""

    def __init__(self, algorithm, name: str, reason: str):
        super().__init__(f"algorithm {algorithm!r} does not support CRC {name!r}: {reason}")
        self.algorithm = algorithm
        self.name = name


class UnknownCrcError(ValueError):
    """Lookup of a predefined CRC by name failed."""

    def __init__(self, crc_name: str):
        super().__init__(f"unknown predefined CRC name {crc_name!r}")
        self.crc_name = crc_name

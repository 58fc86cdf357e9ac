#!/usr/bin/env python3
import random
import timeit

from crcmod.predefined import mkPredefinedCrcFun

from crcengine import Catalog, CrcAlgorithm, CrcCalculator

#: CRC calculator function as specified in the PUS standard B.1
#: Generated with :py:func:`crcmod.predefined.mkPredefinedCrcFun` with the
#: `crc-ccitt-false` as the CRC name.
CRC16_CCITT_FUNC = mkPredefinedCrcFun(crc_name="crc-ccitt-false")
BIT_SERIAL = CrcCalculator(Catalog.CRC_CCITT, CrcAlgorithm.BIT_SERIAL)
TABLE = CrcCalculator(Catalog.CRC_CCITT, CrcAlgorithm.TABLE)
CRCMOD = CrcCalculator(Catalog.CRC_CCITT, CrcAlgorithm.CRCMOD)


data_blob = bytes(random.getrandbits(8) for _ in range(1024))
assert BIT_SERIAL(data_blob) == TABLE(data_blob) == CRCMOD(data_blob) == CRC16_CCITT_FUNC(data_blob)

bit_serial_time = timeit.timeit(lambda: BIT_SERIAL(data_blob), number=100)
table_time = timeit.timeit(lambda: TABLE(data_blob), number=100)
crcmod_calc_time = timeit.timeit(lambda: CRCMOD(data_blob), number=100)
crcmod_time = timeit.timeit(lambda: CRC16_CCITT_FUNC(data_blob), number=100)

print(f"bit-serial: {bit_serial_time:.6f} seconds")
print(f"table: {table_time:.6f} seconds")
print(f"crcmod calculator: {crcmod_calc_time:.6f} seconds")
print(f"crcmod lib: {crcmod_time:.6f} seconds")

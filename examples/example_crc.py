from crcengine import Catalog, CrcAlgorithm, CrcCalculator, build_table, crc_reference
from crcengine.crc import CRC16_CCITT_FUNC


def main():
    print("-- CRC examples --")
    message = b"123456789"
    print(f"CRC16-CCITT of {message!r}: {CRC16_CCITT_FUNC(message):#06x}")

    for params in (Catalog.CRC_CCITT, Catalog.CRC16, Catalog.CRC32):
        slow = crc_reference(params, message)
        fast = CrcCalculator(params, CrcAlgorithm.TABLE).checksum(message)
        print(f"{params.name}: bit-serial {slow:#x}, table {fast:#x}")

    register = CrcCalculator(Catalog.CRC32).new()
    for chunk in (b"1234", b"5678", b"9"):
        register.update(chunk)
    print(f"Incremental CRC-32 (hex): [{register.digest().hex(sep=',')}]")

    print(build_table(Catalog.CRC_CCITT).as_c_array("crcTable"))


if __name__ == "__main__":
    main()

from unittest import TestCase

from crcengine import Catalog, CrcParameters, crc_reference
from crcengine.catalog import ALL_PARAMETERS
from crcengine.reference import update_reference
from crcengine.reflect import reflect

CHECK_BYTES = bytes([0x31, 0x32, 0x33, 0x34, 0x35, 0x36, 0x37, 0x38, 0x39])


class TestReferenceEngine(TestCase):
    def test_crc_ccitt(self):
        self.assertEqual(crc_reference(Catalog.CRC_CCITT, CHECK_BYTES), 0x29B1)

    def test_crc16(self):
        self.assertEqual(crc_reference(Catalog.CRC16, CHECK_BYTES), 0xBB3D)

    def test_crc32(self):
        self.assertEqual(crc_reference(Catalog.CRC32, CHECK_BYTES), 0xCBF43926)

    def test_all_check_values(self):
        for params in ALL_PARAMETERS:
            with self.subTest(params.name):
                self.assertEqual(crc_reference(params, b"123456789"), params.check_value)

    def test_empty_input(self):
        for params in ALL_PARAMETERS:
            with self.subTest(params.name):
                init = params.initial_remainder
                if params.reflect_output:
                    init = reflect(init, params.width)
                self.assertEqual(crc_reference(params, b""), init ^ params.final_xor)

    def test_empty_input_non_palindromic_seed(self):
        # Only the output is reflected, so the seed must show up reflected
        params = CrcParameters(16, 0x1021, 0x0001, 0x0000, False, True)
        self.assertEqual(crc_reference(params, b""), 0x8000)
        self.assertEqual(crc_reference(Catalog.CRC24_OPENPGP, b""), 0xB704CE)

    def test_accepts_sequences(self):
        self.assertEqual(crc_reference(Catalog.CRC_CCITT, list(CHECK_BYTES)), 0x29B1)
        self.assertEqual(crc_reference(Catalog.CRC_CCITT, bytearray(CHECK_BYTES)), 0x29B1)
        self.assertEqual(crc_reference(Catalog.CRC_CCITT, memoryview(CHECK_BYTES)), 0x29B1)

    def test_invalid_octets(self):
        with self.assertRaises(ValueError):
            crc_reference(Catalog.CRC_CCITT, [0x31, 0x100])
        with self.assertRaises(TypeError):
            crc_reference(Catalog.CRC_CCITT, "123456789")

    def test_incremental_update(self):
        params = Catalog.CRC32
        remainder = update_reference(params, params.initial_remainder, b"1234")
        remainder = update_reference(params, remainder, b"56789")
        self.assertEqual(params.finalize(remainder), 0xCBF43926)

    def test_deterministic(self):
        data = bytes(range(256))
        first = crc_reference(Catalog.CRC32, data)
        for _ in range(3):
            self.assertEqual(crc_reference(Catalog.CRC32, data), first)

    def test_order_matters(self):
        self.assertNotEqual(
            crc_reference(Catalog.CRC_CCITT, b"12"), crc_reference(Catalog.CRC_CCITT, b"21")
        )

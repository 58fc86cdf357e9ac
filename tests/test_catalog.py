from unittest import TestCase

from crcengine import PREDEFINED, Catalog, UnknownCrcError, get_predefined
from crcengine.catalog import ALL_PARAMETERS


class TestCatalog(TestCase):
    def test_original_standards(self):
        ccitt = Catalog.CRC_CCITT
        self.assertEqual(
            (ccitt.width, ccitt.polynomial, ccitt.initial_remainder, ccitt.final_xor),
            (16, 0x1021, 0xFFFF, 0x0000),
        )
        self.assertFalse(ccitt.reflect_input)
        self.assertFalse(ccitt.reflect_output)
        self.assertEqual(ccitt.check_value, 0x29B1)
        crc16 = Catalog.CRC16
        self.assertEqual(
            (crc16.width, crc16.polynomial, crc16.initial_remainder, crc16.final_xor),
            (16, 0x8005, 0x0000, 0x0000),
        )
        self.assertTrue(crc16.reflect_input)
        self.assertTrue(crc16.reflect_output)
        self.assertEqual(crc16.check_value, 0xBB3D)
        crc32 = Catalog.CRC32
        self.assertEqual(
            (crc32.width, crc32.polynomial, crc32.initial_remainder, crc32.final_xor),
            (32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF),
        )
        self.assertTrue(crc32.reflect_input)
        self.assertTrue(crc32.reflect_output)
        self.assertEqual(crc32.check_value, 0xCBF43926)

    def test_independent_reflection(self):
        self.assertFalse(Catalog.CRC12_UMTS.reflect_input)
        self.assertTrue(Catalog.CRC12_UMTS.reflect_output)

    def test_all_parameters_distinct(self):
        self.assertEqual(len(set(ALL_PARAMETERS)), len(ALL_PARAMETERS))
        self.assertIn(Catalog.CRC32, ALL_PARAMETERS)
        for params in ALL_PARAMETERS:
            self.assertIsNotNone(params.check_value)

    def test_lookup(self):
        self.assertIs(get_predefined("CRC-32/ISO-HDLC"), Catalog.CRC32)
        self.assertIs(get_predefined("crc-32"), Catalog.CRC32)
        self.assertIs(get_predefined("Crc-Ccitt-False"), Catalog.CRC_CCITT)
        self.assertIs(get_predefined("x-25"), Catalog.CRC16_IBM_SDLC)
        for params in ALL_PARAMETERS:
            self.assertIs(PREDEFINED[params.name.lower()], params)

    def test_unknown(self):
        with self.assertRaises(UnknownCrcError) as cm:
            get_predefined("crc-99")
        self.assertEqual(cm.exception.crc_name, "crc-99")
        self.assertIsInstance(cm.exception, ValueError)

from unittest import TestCase

from crcengine.reflect import reflect, reflect_byte


class TestReflect(TestCase):
    def test_single_bit(self):
        self.assertEqual(reflect(1, 8), 0x80)
        self.assertEqual(reflect(0x80, 8), 0x01)
        self.assertEqual(reflect(1, 32), 0x80000000)

    def test_zero(self):
        for n_bits in (0, 1, 8, 12, 16, 32, 64):
            self.assertEqual(reflect(0, n_bits), 0)

    def test_known_values(self):
        self.assertEqual(reflect(0x1234, 16), 0x2C48)
        self.assertEqual(reflect(0x04C11DB7, 32), 0xEDB88320)
        self.assertEqual(reflect(0x8005, 16), 0xA001)
        self.assertEqual(reflect(0b110, 3), 0b011)

    def test_upper_bits_ignored(self):
        self.assertEqual(reflect(0xFF01, 8), 0x80)
        self.assertEqual(reflect(0x1_0000, 16), 0)

    def test_self_inverse(self):
        for value in range(256):
            self.assertEqual(reflect(reflect(value, 8), 8), value)
        for value in (0x0001, 0x1021, 0x8005, 0xFFFF, 0xABCD):
            self.assertEqual(reflect(reflect(value, 16), 16), value)
        for value in (0x04C11DB7, 0xCBF43926, 0xFFFFFFFF):
            self.assertEqual(reflect(reflect(value, 32), 32), value)

    def test_reflect_byte_table(self):
        for value in range(256):
            self.assertEqual(reflect_byte(value), reflect(value, 8))

import logging
from unittest import TestCase

from crcengine import Catalog, CrcCalculator, get_lib_logger
from crcengine.log import get_console_logger, specify_custom_console_logger_name


class TestLogging(TestCase):
    def tearDown(self) -> None:
        specify_custom_console_logger_name("crcengine")

    def test_lib_logger(self):
        self.assertEqual(get_lib_logger().name, "crcengine")
        self.assertIs(get_console_logger(), logging.getLogger("crcengine"))

    def test_custom_logger(self):
        specify_custom_console_logger_name("app")
        self.assertIs(get_console_logger(), logging.getLogger("app"))
        with self.assertLogs("app", level="DEBUG") as cm:
            CrcCalculator(Catalog.CRC32, 0)
        self.assertIn("Created CRC calculator for CRC-32/ISO-HDLC using BIT_SERIAL", cm.output[0])

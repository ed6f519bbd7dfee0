"""Tests for the base-1000 unit ladder."""

from __future__ import annotations

import unittest

from dirsizer.units import UNIT_NAMES, convert_size, format_size


class ConvertSizeTests(unittest.TestCase):
    def test_below_threshold_stays_in_bytes(self) -> None:
        self.assertEqual(convert_size(0), (0.0, 0))
        self.assertEqual(convert_size(999), (999.0, 0))

    def test_threshold_moves_to_kilobytes(self) -> None:
        self.assertEqual(convert_size(1000), (1.0, 1))

    def test_rounding_up_to_thousand_is_not_divided_again(self) -> None:
        self.assertEqual(convert_size(999_999), (1000.0, 1))

    def test_one_decimal_rounding(self) -> None:
        self.assertEqual(convert_size(1_250_000), (1.3, 2))
        self.assertEqual(convert_size(3_460_000_000), (3.5, 3))

    def test_terabyte_ceiling(self) -> None:
        self.assertEqual(convert_size(5 * 10**12), (5.0, 4))
        self.assertEqual(convert_size(7 * 10**15), (7000.0, 4))


class FormatSizeTests(unittest.TestCase):
    def test_formats_value_and_unit(self) -> None:
        self.assertEqual(format_size(999), "999 bytes")
        self.assertEqual(format_size(1000), "1.0 kilobytes")
        self.assertEqual(format_size(999_999), "1000.0 kilobytes")
        self.assertEqual(format_size(2_500_000_000), "2.5 gigabytes")

    def test_unit_names(self) -> None:
        self.assertEqual(UNIT_NAMES, ("bytes", "kilobytes", "megabytes", "gigabytes", "terabytes"))


if __name__ == "__main__":
    unittest.main()

"""Tests for decimal-hour formatting."""

import unittest

from libmuslim.space_time.rounding import (
    format_hm,
    format_hms,
    parse_hm,
    split_hm,
    split_hms,
)


class TestFormatting(unittest.TestCase):
    """Test cases for HH:MM and HH:MM:SS formatting."""

    def test_format_hm(self):
        self.assertEqual(format_hm(0.0), "00:00")
        self.assertEqual(format_hm(5.25), "05:15")
        self.assertEqual(format_hm(11.5), "11:30")
        self.assertEqual(format_hm(19.75), "19:45")

    def test_format_hm_rounds_to_nearest_minute(self):
        # Test rounding down (under half a minute)
        self.assertEqual(format_hm(10 + 30.4 / 60), "10:30")
        # Test rounding up (over half a minute)
        self.assertEqual(format_hm(10 + 30.6 / 60), "10:31")

    def test_format_hm_carries_into_hour(self):
        self.assertEqual(format_hm(11.9999), "12:00")
        self.assertEqual(format_hm(23.9999), "00:00")

    def test_format_hm_wraps(self):
        self.assertEqual(format_hm(25.5), "01:30")
        self.assertEqual(format_hm(-0.5), "23:30")

    def test_format_hms(self):
        self.assertEqual(format_hms(12.5), "12:30:00")
        self.assertEqual(format_hms(4 + 5 / 60 + 30 / 3600), "04:05:30")

    def test_format_hms_carries(self):
        self.assertEqual(format_hms(1 + 59 / 60 + 59.6 / 3600), "02:00:00")
        self.assertEqual(format_hms(23 + 59 / 60 + 59.8 / 3600), "00:00:00")

    def test_split(self):
        self.assertEqual(split_hm(17.9), (17, 54))
        self.assertEqual(split_hms(17.9), (17, 54, 0))

    def test_parse_hm(self):
        self.assertAlmostEqual(parse_hm("04:05"), 4 + 5 / 60)
        self.assertAlmostEqual(parse_hm("04:05:30"), 4 + 5 / 60 + 30 / 3600)
        with self.assertRaises(ValueError):
            parse_hm("24:00")
        with self.assertRaises(ValueError):
            parse_hm("0405")

    def test_round_trip_within_a_minute(self):
        for hours in (0.01, 3.123, 5.4016, 11.6469, 15.0771, 17.8922, 19.1322, 23.4):
            recovered = parse_hm(format_hm(hours))
            self.assertLessEqual(abs(recovered - hours) * 60, 0.5 + 1e-9)


if __name__ == "__main__":
    unittest.main()

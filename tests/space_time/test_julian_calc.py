"""Tests for Julian date calculation functions."""

import unittest

from libmuslim.space_time.julian_calc import (
    days_since_epoch,
    gregorian_to_jdn,
    local_midnight_julian_date,
)


class TestJulianDateCalculations(unittest.TestCase):
    """Test case for Julian date calculation functions."""

    def test_gregorian_to_jdn(self):
        """Test converting Gregorian dates to Julian Day Numbers."""
        self.assertEqual(gregorian_to_jdn(2000, 1, 1), 2451545)
        self.assertEqual(gregorian_to_jdn(1970, 1, 1), 2440588)
        self.assertEqual(gregorian_to_jdn(2024, 3, 15), 2460385)
        self.assertEqual(gregorian_to_jdn(2025, 11, 22), 2461002)

    def test_consecutive_days(self):
        """Month and year boundaries advance the JDN by exactly one."""
        self.assertEqual(gregorian_to_jdn(2024, 3, 1) - gregorian_to_jdn(2024, 2, 29), 1)
        self.assertEqual(gregorian_to_jdn(2025, 1, 1) - gregorian_to_jdn(2024, 12, 31), 1)
        self.assertEqual(gregorian_to_jdn(2025, 1, 1) - gregorian_to_jdn(2024, 1, 1), 366)

    def test_local_midnight_utc(self):
        """Midnight UTC is half a day before the noon-anchored JDN."""
        self.assertAlmostEqual(
            local_midnight_julian_date(2000, 1, 1), 2451544.5, places=9
        )

    def test_local_midnight_with_offset(self):
        """Local midnight east of Greenwich happens earlier on the UTC scale."""
        self.assertAlmostEqual(
            local_midnight_julian_date(2000, 1, 1, 7.0), 2451544.5 - 7 / 24, places=9
        )
        self.assertAlmostEqual(
            local_midnight_julian_date(2000, 1, 1, -5.0), 2451544.5 + 5 / 24, places=9
        )

    def test_days_since_epoch(self):
        self.assertEqual(days_since_epoch(2451545.0), 0.0)
        self.assertAlmostEqual(days_since_epoch(2451544.5), -0.5, places=9)


if __name__ == "__main__":
    unittest.main()

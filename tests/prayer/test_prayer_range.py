"""Tests for the date range evaluator."""

import unittest
from unittest.mock import patch

from libmuslim.errors import InvalidDate, InvalidGeo, PolarEdgeCase
from libmuslim.prayer import range as range_module
from libmuslim.prayer.geo import GeoParams
from libmuslim.prayer.range import PrayerTimesRange, compute_range
from libmuslim.prayer.times import compute
from libmuslim.space_time.calendar import CalendarDate, days_in_month

JAKARTA = (-6.1944, 106.8229, 7.0)


def _days(start, count):
    current = CalendarDate(*start)
    for _ in range(count):
        yield current
        current = current.next()


class TestComputeRange(unittest.TestCase):
    """Test cases for compute_range."""

    def test_single_day(self):
        results = list(compute_range((2025, 11, 22), (2025, 11, 22), *JAKARTA))
        self.assertEqual(results, [compute(2025, 11, 22, *JAKARTA)])

    def test_matches_daily_computation(self):
        """The range equals computing each day on its own, across a leap day."""
        results = list(compute_range((2024, 2, 27), (2024, 3, 2), *JAKARTA))
        expected = [
            compute(day.year, day.month, day.day, *JAKARTA)
            for day in _days((2024, 2, 27), 5)
        ]
        self.assertEqual(results, expected)
        self.assertEqual(
            [result.date for result in results],
            [CalendarDate(2024, 2, d) for d in (27, 28, 29)]
            + [CalendarDate(2024, 3, d) for d in (1, 2)],
        )

    def test_year_rollover(self):
        results = list(compute_range((2024, 12, 30), (2025, 1, 2), *JAKARTA))
        self.assertEqual(len(results), 4)
        self.assertEqual(results[-1], compute(2025, 1, 2, *JAKARTA))

    def test_accepts_calendar_dates(self):
        results = list(
            compute_range(CalendarDate(2025, 11, 20), CalendarDate(2025, 11, 22), *JAKARTA)
        )
        self.assertEqual(len(results), 3)
        self.assertEqual(results[0].date, CalendarDate(2025, 11, 20))

    def test_empty_when_end_before_start(self):
        days = compute_range((2025, 11, 22), (2025, 11, 21), *JAKARTA)
        self.assertEqual(list(days), [])
        self.assertEqual(len(days), 0)

    def test_restartable(self):
        days = compute_range((2025, 11, 20), (2025, 11, 22), *JAKARTA)
        first = list(days)
        second = list(days)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 3)

    def test_len(self):
        self.assertEqual(len(compute_range((2024, 1, 1), (2024, 12, 31), *JAKARTA)), 366)
        self.assertEqual(len(compute_range((2023, 1, 1), (2023, 12, 31), *JAKARTA)), 365)

    def test_lazy(self):
        """Nothing is computed until the range is iterated."""
        with patch.object(range_module, "assemble") as mock_assemble:
            days = compute_range((2024, 1, 1), (2024, 1, 31), *JAKARTA)
            mock_assemble.assert_not_called()
            iterator = iter(days)
            next(iterator)
            self.assertEqual(mock_assemble.call_count, 1)

    def test_month_length_computed_once_per_month(self):
        with patch.object(
            range_module, "days_in_month", wraps=days_in_month
        ) as mock_days_in_month:
            results = list(compute_range((2024, 1, 30), (2024, 3, 2), *JAKARTA))
        self.assertEqual(len(results), 33)
        # January on entry, then February and March on each transition
        self.assertEqual(mock_days_in_month.call_count, 3)

    def test_logs_each_day(self):
        with self.assertLogs("libmuslim.prayer.range", level="DEBUG") as logs:
            list(compute_range((2024, 1, 31), (2024, 2, 2), *JAKARTA))
        progress = [line for line in logs.output if "Computing prayer times for" in line]
        self.assertEqual(len(progress), 3)
        self.assertIn("2024-01-31", progress[0])
        self.assertIn("2024-02-02", progress[-1])

    def test_validates_eagerly(self):
        with self.assertRaises(InvalidDate):
            compute_range((2023, 2, 29), (2023, 3, 1), *JAKARTA)
        with self.assertRaises(InvalidDate):
            compute_range((2023, 2, 1), (2023, 2, 30), *JAKARTA)
        with self.assertRaises(InvalidGeo):
            compute_range((2023, 2, 1), (2023, 2, 3), -100.0, 106.8, 7.0)

    def test_strict_range(self):
        days = PrayerTimesRange(
            CalendarDate(2024, 6, 20), CalendarDate(2024, 6, 22), GeoParams(70.0, 20.0, 1.0), strict=True
        )
        with self.assertRaises(PolarEdgeCase):
            list(days)


if __name__ == "__main__":
    unittest.main()

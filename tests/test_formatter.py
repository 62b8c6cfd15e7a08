"""Tests for logstats/formatter.py"""

import unittest
from datetime import timedelta

from logstats.aggregator import OperationErrors, TransactionSpan
from logstats.formatter import (
    format_duration,
    format_operation,
    format_report,
    format_transaction,
)


class TestFormatDuration(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(format_duration(timedelta(0)), "0s")

    def test_whole_seconds(self):
        self.assertEqual(format_duration(timedelta(seconds=10)), "10s")

    def test_fractional_seconds(self):
        self.assertEqual(format_duration(timedelta(seconds=4, milliseconds=500)), "4.5s")
        self.assertEqual(format_duration(timedelta(seconds=1, microseconds=1)), "1.000001s")

    def test_microseconds(self):
        self.assertEqual(format_duration(timedelta(microseconds=750)), "750µs")

    def test_milliseconds(self):
        self.assertEqual(format_duration(timedelta(microseconds=1500)), "1.5ms")
        self.assertEqual(format_duration(timedelta(milliseconds=500)), "500ms")

    def test_minutes(self):
        self.assertEqual(format_duration(timedelta(minutes=1)), "1m0s")
        self.assertEqual(format_duration(timedelta(minutes=1, seconds=42.5)), "1m42.5s")

    def test_hours(self):
        self.assertEqual(format_duration(timedelta(hours=2, minutes=3, seconds=4.5)), "2h3m4.5s")
        self.assertEqual(format_duration(timedelta(hours=1)), "1h0m0s")

    def test_days_fold_into_hours(self):
        self.assertEqual(format_duration(timedelta(days=1, seconds=1)), "24h0m1s")

    def test_negative(self):
        self.assertEqual(format_duration(timedelta(seconds=-3)), "-3s")


class TestFormatLines(unittest.TestCase):
    def test_transaction(self):
        span = TransactionSpan("t1", timedelta(seconds=10))
        self.assertEqual(format_transaction(span), "t1 (10s)")

    def test_empty_transaction(self):
        self.assertEqual(format_transaction(TransactionSpan()), " (0s)")

    def test_operation(self):
        self.assertEqual(format_operation(OperationErrors("op1", 1)), "op1 (1 Errors)")

    def test_empty_operation(self):
        self.assertEqual(format_operation(OperationErrors()), " (0 Errors)")


class TestFormatReport(unittest.TestCase):
    def test_three_lines(self):
        report = format_report(
            2,
            TransactionSpan("t1", timedelta(seconds=10)),
            OperationErrors("op1", 1),
        )
        self.assertEqual(
            report.split("\n"),
            [
                "Total Log Entries: 2",
                "Longest Transaction: t1 (10s)",
                "Operation with Most Errors: op1 (1 Errors)",
            ],
        )


if __name__ == "__main__":
    unittest.main()

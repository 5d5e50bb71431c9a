"""Tests for deadline formatting and the plain-text renewal report."""

from datetime import date

import pytest

from main import assess_trademark_renewal
from renewal_deadlines import DeadlineInfo, DeadlineType
from renewal_report import format_deadline, format_long_date


def _deadline(days_remaining):
    return DeadlineInfo(date(2025, 3, 1), days_remaining, DeadlineType.RENEWAL)


@pytest.mark.parametrize("days,expected", [
    (425, "March 1, 2025 (425 days)"),
    (1, "March 1, 2025 (Due tomorrow)"),
    (0, "March 1, 2025 (Due today!)"),
    (-5, "March 1, 2025 (5 days overdue)"),
])
def test_format_deadline(days, expected):
    assert format_deadline(_deadline(days)) == expected


def test_format_long_date_has_no_zero_padding():
    assert format_long_date(date(2024, 9, 1)) == "September 1, 2024"


class TestFullReport:

    def test_sections_present(self, sample_trademark):
        report = assess_trademark_renewal(
            sample_trademark, today=date(2024, 1, 1), renewal_type="combined"
        )["report"]

        for heading in ("TRADEMARK RENEWAL & MAINTENANCE REPORT", "TRADEMARK SUMMARY",
                        "OVERALL STATUS", "DEADLINES", "NEXT ACTION", "FEE ESTIMATE",
                        "REMINDER SCHEDULE"):
            assert heading in report
        assert "NEXAFLOW" in report
        assert "Prepared: January 1, 2024" in report
        assert "Next major deadline: Grace Period, September 1, 2024 (244 days)." in report
        assert "$1,250" in report

    def test_report_without_usable_date(self, sample_trademark):
        sample_trademark["registration_date"] = "unknown"
        report = assess_trademark_renewal(sample_trademark, today=date(2024, 1, 1))["report"]
        assert "None applicable." in report
        assert "No maintenance deadlines could be computed" in report
        assert "REMINDER SCHEDULE" not in report

"""
Tests for the renewal deadline engine.

Tests cover:
- Status and urgency classification boundaries
- Grace period, renewal, Section 8 and Section 71 calculators
- Invalid and out-of-range registration dates
- Next major deadline selection
- Overall renewal status
"""

from datetime import date

import pytest

from conftest import make_deadline
from renewal_deadlines import (
    DeadlineInfo, DeadlineStatus, DeadlineType, TrademarkDeadlineSet,
    UrgencyLevel, calculate_all_trademark_deadlines,
    calculate_grace_period_deadline, calculate_renewal_deadline,
    calculate_section8_deadline, calculate_section71_deadline,
    classify_deadline, get_deadline_status, get_renewal_status,
    get_urgency_level, select_next_major_deadline,
)


TODAY = date(2024, 1, 1)
REG_DATE = "2015-03-01"


class TestClassifier:

    @pytest.mark.parametrize("days,expected", [
        (-1_000_000, DeadlineStatus.OVERDUE),
        (-1, DeadlineStatus.OVERDUE),
        (0, DeadlineStatus.DUE_SOON),
        (90, DeadlineStatus.DUE_SOON),
        (91, DeadlineStatus.CURRENT),
        (10 ** 9, DeadlineStatus.CURRENT),
    ])
    def test_status_boundaries(self, days, expected):
        assert get_deadline_status(days) is expected

    @pytest.mark.parametrize("days,expected", [
        (-5, UrgencyLevel.CRITICAL),
        (0, UrgencyLevel.CRITICAL),
        (30, UrgencyLevel.CRITICAL),
        (31, UrgencyLevel.HIGH),
        (90, UrgencyLevel.HIGH),
        (91, UrgencyLevel.MEDIUM),
        (365, UrgencyLevel.MEDIUM),
        (366, UrgencyLevel.LOW),
        (10 ** 9, UrgencyLevel.LOW),
    ])
    def test_urgency_boundaries(self, days, expected):
        assert get_urgency_level(days) is expected

    def test_every_overdue_day_is_critical(self):
        for days in range(-800, 0):
            result = classify_deadline(days)
            assert result.status is DeadlineStatus.OVERDUE
            assert result.urgency_level is UrgencyLevel.CRITICAL

    def test_classification_is_repeatable(self):
        assert [classify_deadline(d) for d in range(-50, 500)] == \
               [classify_deadline(d) for d in range(-50, 500)]

    def test_deadline_properties_follow_days_remaining(self):
        deadline = make_deadline(45)
        assert deadline.status is DeadlineStatus.DUE_SOON
        assert deadline.urgency_level is UrgencyLevel.HIGH

    def test_status_cannot_be_assigned(self):
        deadline = make_deadline(45)
        with pytest.raises(AttributeError):
            deadline.status = DeadlineStatus.CURRENT


class TestGracePeriod:

    def test_nine_and_a_half_years(self):
        deadline = calculate_grace_period_deadline(REG_DATE, TODAY)
        assert deadline.date == date(2024, 9, 1)
        assert deadline.days_remaining == 244
        assert deadline.urgency_level is UrgencyLevel.MEDIUM
        assert deadline.deadline_type is DeadlineType.GRACE_PERIOD

    def test_accepts_date_objects(self):
        deadline = calculate_grace_period_deadline(date(2015, 3, 1), TODAY)
        assert deadline.iso_date == "2024-09-01"


class TestRenewal:

    def test_next_unexpired_decade(self):
        deadline = calculate_renewal_deadline(REG_DATE, TODAY)
        assert deadline.date == date(2025, 3, 1)
        assert deadline.days_remaining == 425

    def test_skips_past_decades(self):
        deadline = calculate_renewal_deadline("1990-06-15", TODAY)
        assert deadline.date == date(2030, 6, 15)

    def test_boundary_day_moves_to_following_decade(self):
        deadline = calculate_renewal_deadline("2014-01-01", date(2024, 1, 1))
        assert deadline.date == date(2034, 1, 1)

    def test_day_before_boundary(self):
        deadline = calculate_renewal_deadline("2014-01-01", date(2023, 12, 31))
        assert deadline.date == date(2024, 1, 1)
        assert deadline.days_remaining == 1

    def test_always_strictly_in_future(self):
        for year in range(1950, 2024):
            deadline = calculate_renewal_deadline(f"{year}-07-04", TODAY)
            assert deadline.days_remaining > 0


class TestSection8:

    def test_more_than_nine_years_moves_to_next_cycle(self):
        deadline = calculate_section8_deadline(REG_DATE, TODAY)
        assert deadline.date == date(2034, 3, 1)

    def test_under_five_years_targets_fifth_year(self):
        deadline = calculate_section8_deadline("2021-05-10", TODAY)
        assert deadline.date == date(2026, 5, 10)

    def test_between_five_and_nine_years_targets_ninth_year(self):
        deadline = calculate_section8_deadline("2017-05-10", TODAY)
        assert deadline.date == date(2026, 5, 10)

    def test_elapsed_years_counted_by_calendar_year(self):
        # 2019 -> 2024 is five calendar years even though the +5 date is still ahead.
        deadline = calculate_section8_deadline("2019-12-31", TODAY)
        assert deadline.date == date(2028, 12, 31)

    def test_second_cycle_reached_in_current_year_advances(self):
        deadline = calculate_section8_deadline("2005-03-01", TODAY)
        assert deadline.date == date(2034, 3, 1)

    def test_second_cycle_still_ahead(self):
        deadline = calculate_section8_deadline("2006-07-01", TODAY)
        assert deadline.date == date(2025, 7, 1)


class TestSection71:

    def test_domestic_mark_has_no_section71(self):
        assert calculate_section71_deadline(REG_DATE, TODAY) is None
        assert calculate_section71_deadline(REG_DATE, TODAY, is_foreign_based=False) is None

    def test_foreign_mark_five_years(self):
        deadline = calculate_section71_deadline(REG_DATE, TODAY, is_foreign_based=True)
        assert deadline.date == date(2020, 3, 1)
        assert deadline.days_remaining == -1401
        assert deadline.status is DeadlineStatus.OVERDUE

    def test_leap_day_registration_clamps(self):
        deadline = calculate_section71_deadline("2016-02-29", TODAY, is_foreign_based=True)
        assert deadline.date == date(2021, 2, 28)


class TestInvalidInput:

    @pytest.mark.parametrize("value", [
        "garbage", "", None, "2015-13-45", "Monday", "12:00", "5", "March 1",
    ])
    def test_every_calculator_returns_none(self, value):
        assert calculate_grace_period_deadline(value, TODAY) is None
        assert calculate_renewal_deadline(value, TODAY) is None
        assert calculate_section8_deadline(value, TODAY) is None
        assert calculate_section71_deadline(value, TODAY, is_foreign_based=True) is None

    def test_year_less_date_gives_no_deadlines(self):
        assert calculate_all_trademark_deadlines("March 1", TODAY).deadlines() == []

    def test_dates_past_year_9999_return_none(self):
        far = date(9995, 1, 1)
        assert calculate_grace_period_deadline(far, TODAY) is None
        assert calculate_renewal_deadline(far, TODAY) is None
        assert calculate_section8_deadline(far, TODAY) is None

    def test_same_inputs_give_identical_results(self):
        first = calculate_all_trademark_deadlines(REG_DATE, TODAY, is_foreign_based=True)
        second = calculate_all_trademark_deadlines(REG_DATE, TODAY, is_foreign_based=True)
        assert first == second


class TestSelectNextMajorDeadline:

    def test_higher_urgency_wins(self):
        grace = make_deadline(60, DeadlineType.GRACE_PERIOD)      # high
        renewal = make_deadline(10, DeadlineType.RENEWAL)         # critical
        assert select_next_major_deadline([grace, renewal]) is renewal

    def test_overdue_beats_distant_current(self):
        overdue = make_deadline(-3)
        distant = make_deadline(1000)
        assert select_next_major_deadline([distant, overdue]) is overdue

    def test_ties_broken_by_fewest_days(self):
        more_overdue = make_deadline(-20)
        due_soon = make_deadline(10)
        assert select_next_major_deadline([due_soon, more_overdue]) is more_overdue

        later = make_deadline(3000)
        sooner = make_deadline(400)
        assert select_next_major_deadline([later, sooner]) is sooner

    def test_none_entries_ignored(self):
        only = make_deadline(200)
        assert select_next_major_deadline([None, only, None]) is only

    def test_no_deadlines(self):
        assert select_next_major_deadline([]) is None
        assert select_next_major_deadline([None, None]) is None

    def test_result_has_maximal_rank_and_fewest_days(self):
        pool = [make_deadline(d) for d in (-40, -1, 0, 15, 31, 75, 91, 200, 366, 5000)]
        for size in range(1, len(pool) + 1):
            subset = pool[:size][::-1]
            chosen = select_next_major_deadline(subset)
            best_rank = max(d.urgency_level.rank for d in subset)
            assert chosen.urgency_level.rank == best_rank
            assert chosen.days_remaining == min(
                d.days_remaining for d in subset if d.urgency_level.rank == best_rank
            )


class TestCalculateAllDeadlines:

    def test_domestic_registration(self):
        deadlines = calculate_all_trademark_deadlines(REG_DATE, TODAY)
        assert deadlines.grace_period.date == date(2024, 9, 1)
        assert deadlines.renewal.date == date(2025, 3, 1)
        assert deadlines.section8.date == date(2034, 3, 1)
        assert deadlines.section71 is None
        assert deadlines.next_major_deadline is deadlines.grace_period

    def test_foreign_registration_surfaces_section71(self):
        deadlines = calculate_all_trademark_deadlines(REG_DATE, TODAY, is_foreign_based=True)
        assert deadlines.section71 is not None
        assert deadlines.next_major_deadline is deadlines.section71

    def test_next_major_is_drawn_from_the_set(self):
        deadlines = calculate_all_trademark_deadlines("2010-11-20", TODAY, is_foreign_based=True)
        assert any(deadlines.next_major_deadline is d for d in deadlines.deadlines())

    def test_empty_registration_date(self):
        deadlines = calculate_all_trademark_deadlines("", TODAY, is_foreign_based=True)
        assert deadlines == TrademarkDeadlineSet()

    def test_invalid_registration_date(self):
        deadlines = calculate_all_trademark_deadlines("garbage", TODAY, is_foreign_based=True)
        assert deadlines.deadlines() == []
        assert deadlines.next_major_deadline is None

    def test_to_dict(self):
        data = calculate_all_trademark_deadlines(REG_DATE, TODAY).to_dict()
        assert data["renewal"] == {
            "date": "2025-03-01",
            "days_remaining": 425,
            "deadline_type": "renewal",
            "status": "current",
            "urgency_level": "low",
        }
        assert data["section71"] is None
        assert data["next_major_deadline"]["deadline_type"] == "grace_period"


class TestRenewalStatus:

    @pytest.mark.parametrize("days,expected", [
        (-1, DeadlineStatus.OVERDUE),
        (10, DeadlineStatus.DUE_SOON),
        (60, DeadlineStatus.DUE_SOON),
        (200, DeadlineStatus.CURRENT),
        (2000, DeadlineStatus.CURRENT),
    ])
    def test_from_next_major_deadline(self, days, expected):
        deadlines = TrademarkDeadlineSet(next_major_deadline=make_deadline(days))
        assert get_renewal_status(deadlines) is expected

    def test_no_deadlines_is_current(self):
        assert get_renewal_status(TrademarkDeadlineSet()) is DeadlineStatus.CURRENT


def test_deadline_info_equality_is_structural():
    a = DeadlineInfo(date(2025, 3, 1), 425, DeadlineType.RENEWAL)
    b = DeadlineInfo(date(2025, 3, 1), 425, DeadlineType.RENEWAL)
    assert a == b

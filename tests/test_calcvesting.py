"""Unit tests for the linear monthly vesting schedule."""

from datetime import date
from unittest.mock import patch

import pytest

from core.calcvesting import (
    calculate_vesting_remaining,
    month_span,
    months_elapsed,
    vesting_remaining,
)

TOTAL = 24_000_000_000000
START = date(2022, 1, 15)
END = date(2024, 1, 15)


class TestMonthsElapsed:
    def test_zero_at_start(self) -> None:
        assert months_elapsed(START, START) == 0

    def test_counts_month_on_start_day(self) -> None:
        assert months_elapsed(START, date(2022, 3, 15)) == 2

    def test_day_before_start_day_counts_one_less(self) -> None:
        assert months_elapsed(START, date(2022, 3, 14)) == 1

    def test_across_year_boundary(self) -> None:
        assert months_elapsed(START, date(2023, 2, 20)) == 13

    def test_month_span_ignores_days(self) -> None:
        assert month_span(date(2022, 1, 31), date(2022, 3, 1)) == 2


class TestVestingRemaining:
    def test_full_amount_at_start(self) -> None:
        assert vesting_remaining(TOTAL, START, END, START) == TOTAL

    def test_nothing_left_at_end(self) -> None:
        assert vesting_remaining(TOTAL, START, END, END) == 0

    def test_linear_in_between(self) -> None:
        assert vesting_remaining(TOTAL, START, END, date(2023, 1, 15)) == TOTAL // 2

    def test_partial_month_not_yet_vested(self) -> None:
        assert vesting_remaining(TOTAL, START, END, date(2022, 2, 14)) == TOTAL

    def test_floor_division(self) -> None:
        assert vesting_remaining(100, START, date(2022, 4, 15), date(2022, 2, 15)) == 67

    def test_before_start_is_clamped(self) -> None:
        assert vesting_remaining(TOTAL, START, END, date(2021, 6, 1)) == TOTAL

    def test_after_end_is_clamped(self) -> None:
        assert vesting_remaining(TOTAL, START, END, date(2026, 6, 1)) == 0

    def test_rejects_empty_schedule(self) -> None:
        with pytest.raises(ValueError):
            vesting_remaining(TOTAL, START, date(2022, 1, 30), START)


class TestCalculateVestingRemaining:
    def test_uses_configured_schedule(self) -> None:
        with patch("core.calcvesting.settings") as mock_settings:
            mock_settings.VESTING_TOTAL_AMOUNT = TOTAL
            mock_settings.VESTING_START_DATE = START
            mock_settings.VESTING_END_DATE = END

            assert calculate_vesting_remaining(date(2023, 1, 15)) == TOTAL // 2

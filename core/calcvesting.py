from datetime import date, datetime, timezone
from typing import Optional

from utility.config import settings


def month_span(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def months_elapsed(start: date, current: date) -> int:
    """Whole months vested by ``current``; a month counts once its start day is reached."""
    months = month_span(start, current)
    if current.day < start.day:
        months -= 1
    return months


def vesting_remaining(total: int, start: date, end: date, today: date) -> int:
    total_months = month_span(start, end)
    if total_months <= 0:
        raise ValueError(f"Vesting end {end} must be at least one month after start {start}")

    elapsed = min(max(months_elapsed(start, today), 0), total_months)
    return total - total * elapsed // total_months


def calculate_vesting_remaining(today: Optional[date] = None) -> int:
    if today is None:
        today = datetime.now(timezone.utc).date()
    return vesting_remaining(
        settings.VESTING_TOTAL_AMOUNT,
        settings.VESTING_START_DATE,
        settings.VESTING_END_DATE,
        today,
    )

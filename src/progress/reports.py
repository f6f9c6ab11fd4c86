"""Monthly totals and reading streaks across the library."""

from collections.abc import Iterable
from datetime import date, timedelta

from src.models.reading import DailyReadingRecord
from src.models.stats import MonthlyTotal

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
)

# Report periods and how many months back they reach; "all" has no cutoff
REPORT_PERIODS: dict[str, int | None] = {"all": None, "3m": 3, "6m": 6, "1y": 12}


def period_start(period: str, today: date | None = None) -> date | None:
    """First day included in a report period.

    Args:
        period: One of ``"all"``, ``"3m"``, ``"6m"``, ``"1y"``.
        today: Reference day, defaults to today.

    Returns:
        The first day of the month ``n`` months back, or None for "all".

    Raises:
        ValueError: If the period is unknown.
    """
    if period not in REPORT_PERIODS:
        raise ValueError(f"Unknown report period: {period}")
    months = REPORT_PERIODS[period]
    if months is None:
        return None
    today = today or date.today()
    index = today.year * 12 + (today.month - 1) - months
    return date(index // 12, index % 12 + 1, 1)


def monthly_totals(
    records: Iterable[DailyReadingRecord], since: date | None = None
) -> list[MonthlyTotal]:
    """Pages and time per calendar month, oldest month first."""
    totals: dict[tuple[int, int], MonthlyTotal] = {}
    for record in records:
        if since is not None and record.read_on < since:
            continue
        key = (record.read_on.year, record.read_on.month)
        total = totals.get(key)
        if total is None:
            total = MonthlyTotal(
                year=key[0],
                month=key[1],
                label=f"{MONTH_ABBREVIATIONS[key[1] - 1]} {key[0] % 100:02d}",
            )
            totals[key] = total
        total.pages += record.pages_read
        total.time_seconds += record.time_seconds
    return [totals[key] for key in sorted(totals)]


def reading_streak(
    records: Iterable[DailyReadingRecord], today: date | None = None
) -> int:
    """Consecutive reading days ending today, or yesterday if today is empty."""
    today = today or date.today()
    days = {r.read_on for r in records}

    current = today if today in days else today - timedelta(days=1)
    streak = 0
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak

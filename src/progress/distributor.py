"""Spreads a multi-day reading period over one record per calendar day."""

import logging
import math
from datetime import date, timedelta
from fractions import Fraction
from uuid import uuid4

from src.config import ReadingConfig
from src.models.book import Book
from src.models.reading import DailyReadingRecord, ReadingInput
from src.progress.errors import InvalidReadingError
from src.progress.timing import average_minutes_per_page, minutes_to_seconds

logger = logging.getLogger(__name__)


def days_in_period(start_date: date, end_date: date) -> int:
    """Number of calendar days in a period, counting both endpoints."""
    return (end_date - start_date).days + 1


class PeriodDistributor:
    """Expands "pages X to Y between dates A and B" into daily records.

    Pages are allocated evenly across the days and the last day always
    ends on the requested end page, so the daily page counts add up to the
    whole period. Time is either the user's total split evenly, or an
    estimate from the book category's average minutes per page.

    Args:
        config: ReadingConfig with the default pace and the per-day
                time limit.
    """

    def __init__(self, config: ReadingConfig | None = None) -> None:
        self._config = config or ReadingConfig()

    def distribute(
        self,
        reading: ReadingInput,
        book: Book,
        submission_id: str | None = None,
    ) -> list[DailyReadingRecord]:
        """Build one record per day of the reading period.

        Args:
            reading: Submission with both start_date and end_date set.
            book: The book being read; its category drives time estimates.
            submission_id: Id shared by every generated record. Generated
                when omitted.

        Returns:
            Records in date order, one per day of the period.

        Raises:
            InvalidReadingError: If the dates are missing, the period has
                no days or the page range is reversed. Also raised when a
                supplied total time exceeds the per-day limit.
        """
        if reading.start_date is None or reading.end_date is None:
            raise InvalidReadingError("A reading period needs a start and an end date")
        if reading.end_page < reading.start_page:
            raise InvalidReadingError("End page must not be before start page")

        total_days = days_in_period(reading.start_date, reading.end_date)
        if total_days < 1:
            raise InvalidReadingError(
                f"Invalid reading period: {reading.start_date} to {reading.end_date}"
            )

        start_page = reading.start_page
        end_page = reading.end_page
        total_pages_in_period = end_page - start_page + 1
        pages_per_day = Fraction(total_pages_in_period, total_days)

        if reading.total_time_minutes and reading.total_time_minutes > 0:
            minutes_per_day = reading.total_time_minutes / total_days
            if minutes_per_day > self._config.max_session_minutes:
                raise InvalidReadingError(
                    f"{minutes_per_day:.1f} minutes per day exceeds the limit of "
                    f"{self._config.max_session_minutes}"
                )
        else:
            # Estimates are never rejected, however slow the category
            minutes_per_day = float(pages_per_day) * average_minutes_per_page(
                book.category, default=self._config.default_minutes_per_page
            )
        seconds_per_day = minutes_to_seconds(minutes_per_day)

        batch_id = submission_id or str(uuid4())
        records: list[DailyReadingRecord] = []
        for i in range(total_days):
            day = reading.start_date + timedelta(days=i)
            day_start = math.floor(start_page + pages_per_day * i)
            if i == total_days - 1:
                day_end = end_page
            else:
                next_start = math.floor(start_page + pages_per_day * (i + 1))
                day_end = min(next_start - 1, end_page)

            pages_read = day_end - day_start + 1
            if pages_read <= 0:
                # Less than a page allotted to this day
                pages_read = 0
                day_end = day_start

            records.append(
                DailyReadingRecord(
                    book_id=book.id,
                    submission_id=batch_id,
                    read_on=day,
                    start_page=day_start,
                    end_page=day_end,
                    pages_read=pages_read,
                    time_seconds=seconds_per_day,
                    start_date=day,
                    end_date=day,
                    bible=reading.bible.model_copy() if reading.bible else None,
                )
            )

        logger.debug(
            "Distributed pages %d-%d of book %s over %d days (%.2f pages/day)",
            start_page,
            end_page,
            book.id,
            total_days,
            float(pages_per_day),
        )
        return records

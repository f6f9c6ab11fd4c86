"""Completion-date projection interface.

The tracker hands a book's snapshot and records to an estimator supplied
by the caller; no estimation method is built in.
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from pydantic import BaseModel

from src.models.book import Book
from src.models.reading import DailyReadingRecord
from src.models.status import BookStatusSnapshot


class ReadingProjection(BaseModel):
    """Estimated completion of a book."""

    can_show: bool = False
    pages_per_day: float = 0.0
    days_remaining: int = 0
    estimated_date: date | None = None
    is_delayed: bool = False
    delay_days: int = 0
    reading_days: int = 0


class ProjectionEstimator(Protocol):
    """Estimates when a book will be finished."""

    def estimate(
        self,
        book: Book,
        status: BookStatusSnapshot | None,
        records: Sequence[DailyReadingRecord],
    ) -> ReadingProjection: ...

"""Derived statistics models. None of these are persisted."""

from datetime import date

from pydantic import BaseModel, Field

from src.models.reading import BibleReference


class AggregatedStats(BaseModel):
    """Per-book time and pace statistics."""

    total_pages_read: int = 0
    total_time_seconds: int = 0
    reading_days: int = 0
    avg_pages_per_day: float = 0.0
    pages_per_minute: float = 0.0
    avg_time_per_day_seconds: float = 0.0
    progress_percent: float = 0.0


class DayGroup(BaseModel):
    """One display row of a book's reading history.

    For Bible books a group merges every record of the same calendar day;
    for other books it wraps exactly one record.
    """

    read_on: date
    day: int
    month_label: str
    start_page: int
    end_page: int
    pages_read: int = 0
    time_seconds: int = 0
    bible_references: list[BibleReference] = Field(default_factory=list)
    record_ids: list[str] = Field(default_factory=list)


class DashboardStats(BaseModel):
    """Library-wide totals across all books."""

    total_pages: int = 0
    pages_read: int = 0
    percent_read: float = 0.0
    pages_remaining: int = 0
    reading_days: int = 0
    avg_pages_per_day: float = 0.0
    books_count: int = 0
    books_reading: int = 0
    books_completed: int = 0
    books_not_started: int = 0


class MonthlyTotal(BaseModel):
    """Pages and time read in one calendar month."""

    year: int
    month: int  # 1-12
    label: str  # e.g. "Jan 24"
    pages: int = 0
    time_seconds: int = 0


class ChapterProgress(BaseModel):
    """Chapter coverage of one canonical Bible book."""

    book: str
    testament: str  # "old", "new"
    total_chapters: int
    chapters_read: list[int] = Field(default_factory=list)
    progress_percent: float = 0.0

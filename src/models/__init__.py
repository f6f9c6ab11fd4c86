"""Data models for the Reading Tracker application."""

from src.models.book import Book, CategoryKind, resolve_category_kind
from src.models.reading import (
    MONTH_LABELS,
    BibleReference,
    DailyReadingRecord,
    ReadingInput,
)
from src.models.stats import (
    AggregatedStats,
    ChapterProgress,
    DashboardStats,
    DayGroup,
    MonthlyTotal,
)
from src.models.status import BookStatusSnapshot, ReadingStatus

__all__ = [
    "MONTH_LABELS",
    "AggregatedStats",
    "BibleReference",
    "Book",
    "BookStatusSnapshot",
    "CategoryKind",
    "ChapterProgress",
    "DailyReadingRecord",
    "DashboardStats",
    "DayGroup",
    "MonthlyTotal",
    "ReadingInput",
    "ReadingStatus",
    "resolve_category_kind",
]

"""Per-book and library-wide reading statistics."""

from collections.abc import Sequence
from datetime import date

from src.models.book import Book, CategoryKind
from src.models.reading import DailyReadingRecord
from src.models.stats import AggregatedStats, DashboardStats
from src.models.status import BookStatusSnapshot, ReadingStatus


def _ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator


class ReadingAggregator:
    """Computes time and pace statistics from a book's daily records.

    Results are recomputed on every call and never stored.
    """

    def aggregate(
        self,
        book: Book,
        status: BookStatusSnapshot | None,
        records: Sequence[DailyReadingRecord],
    ) -> AggregatedStats:
        """Aggregate a book's records.

        Args:
            book: The book the records belong to.
            status: The book's current snapshot, if any.
            records: All of the book's daily records.

        Returns:
            AggregatedStats with zero rates where a denominator is zero.
        """
        total_time = self.total_time_seconds(records, book.kind)
        reading_days = self.reading_days(records, book.kind)

        if records:
            total_pages = max(r.end_page for r in records)
        else:
            total_pages = status.pages_read if status else 0

        pages_read = status.pages_read if status else total_pages

        return AggregatedStats(
            total_pages_read=total_pages,
            total_time_seconds=total_time,
            reading_days=reading_days,
            avg_pages_per_day=_ratio(total_pages, reading_days),
            pages_per_minute=_ratio(total_pages, total_time / 60),
            avg_time_per_day_seconds=_ratio(total_time, reading_days),
            progress_percent=_ratio(pages_read, book.total_pages) * 100,
        )

    @staticmethod
    def total_time_seconds(
        records: Sequence[DailyReadingRecord], kind: CategoryKind
    ) -> int:
        """Total reading time.

        A Bible day counts once, with the largest time logged that day.
        Other books sum every record, since periods are already split into
        one record per day.
        """
        if kind is not CategoryKind.BIBLE:
            return sum(r.time_seconds for r in records)

        per_day: dict[date, int] = {}
        for record in records:
            per_day[record.read_on] = max(
                per_day.get(record.read_on, 0), record.time_seconds
            )
        return sum(per_day.values())

    @staticmethod
    def reading_days(records: Sequence[DailyReadingRecord], kind: CategoryKind) -> int:
        if kind is not CategoryKind.BIBLE:
            return len(records)
        return len({r.read_on for r in records})


def dashboard_stats(
    books: Sequence[Book],
    statuses: Sequence[BookStatusSnapshot],
    records: Sequence[DailyReadingRecord],
) -> DashboardStats:
    """Summarize the whole library.

    Args:
        books: Every book in the library.
        statuses: Their status snapshots.
        records: Every daily record across all books.

    Returns:
        DashboardStats with page totals, reading days and status counts.
    """
    total_pages = sum(b.total_pages for b in books)
    pages_read = sum(s.pages_read for s in statuses)
    reading_days = len({r.read_on for r in records})

    return DashboardStats(
        total_pages=total_pages,
        pages_read=pages_read,
        percent_read=_ratio(pages_read, total_pages) * 100,
        pages_remaining=max(total_pages - pages_read, 0),
        reading_days=reading_days,
        avg_pages_per_day=_ratio(pages_read, reading_days),
        books_count=len(books),
        books_reading=sum(1 for s in statuses if s.status is ReadingStatus.READING),
        books_completed=sum(1 for s in statuses if s.status is ReadingStatus.COMPLETED),
        books_not_started=sum(
            1 for s in statuses if s.status is ReadingStatus.NOT_STARTED
        ),
    )

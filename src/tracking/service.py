"""Reading tracker: records sessions and reports progress for a library."""

import logging
import sqlite3
from datetime import date
from uuid import uuid4

from src.config import ReadingConfig
from src.models.book import Book
from src.models.reading import BibleReference, DailyReadingRecord, ReadingInput
from src.models.stats import (
    AggregatedStats,
    ChapterProgress,
    DashboardStats,
    DayGroup,
    MonthlyTotal,
)
from src.models.status import BookStatusSnapshot
from src.progress.aggregator import ReadingAggregator, dashboard_stats
from src.progress.bible import chapter_progress
from src.progress.distributor import PeriodDistributor
from src.progress.errors import (
    BookNotFoundError,
    InvalidReadingError,
    RecordNotFoundError,
)
from src.progress.grouping import group_days
from src.progress.projection import ProjectionEstimator, ReadingProjection
from src.progress.reconciler import StatusReconciler
from src.progress.reports import monthly_totals, period_start, reading_streak
from src.progress.timing import minutes_to_seconds
from src.storage.repository import BookRepository, ReadingRepository, StatusRepository

logger = logging.getLogger(__name__)


class ReadingTracker:
    """Write and read paths over a SQLite-backed library.

    Every submission is written in one transaction: its records and the
    book's new status either both land or neither does. Edits and
    deletions re-derive the status from the book's full history.

    Args:
        conn: Open connection to an initialized database.
        config: ReadingConfig with pace defaults and limits.
        estimator: Optional completion-date estimator used by ``projection``.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        config: ReadingConfig | None = None,
        estimator: ProjectionEstimator | None = None,
    ) -> None:
        self._conn = conn
        self._config = config or ReadingConfig()
        self._estimator = estimator
        self._books = BookRepository(conn)
        self._records = ReadingRepository(conn)
        self._statuses = StatusRepository(conn)
        self._distributor = PeriodDistributor(self._config)
        self._reconciler = StatusReconciler()
        self._aggregator = ReadingAggregator()

    # ── Books ────────────────────────────────────────────────────────────

    def add_book(self, book: Book) -> Book:
        """Add a book together with its NOT_STARTED status."""
        with self._conn:
            self._books.add(book)
            self._statuses.upsert(BookStatusSnapshot(book_id=book.id))
        logger.info("Added book %s (%s)", book.id, book.title)
        return book

    def get_book(self, book_id: str) -> Book:
        book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def list_books(self) -> list[Book]:
        return self._books.list_all()

    def delete_book(self, book_id: str) -> None:
        """Delete a book along with its records and status."""
        with self._conn:
            if not self._books.delete(book_id):
                raise BookNotFoundError(book_id)
        logger.info("Deleted book %s", book_id)

    def get_status(self, book_id: str) -> BookStatusSnapshot:
        self.get_book(book_id)
        status = self._statuses.get(book_id)
        return status or BookStatusSnapshot(book_id=book_id)

    # ── Write paths ──────────────────────────────────────────────────────

    def submit_reading(self, reading: ReadingInput) -> list[DailyReadingRecord]:
        """Record a reading session and update the book's status.

        A period is split into one record per day and sets the book's
        progress to the period's end page. A single-day entry becomes one
        record and either adds its pages to the previous total or, when
        retroactive, sets progress to its end page.

        Args:
            reading: The user's submission.

        Returns:
            The records written.

        Raises:
            BookNotFoundError: If the book does not exist.
            InvalidReadingError: If the pages, dates or time are invalid.
        """
        book = self.get_book(reading.book_id)
        if reading.end_page < reading.start_page:
            raise InvalidReadingError("End page must not be before start page")

        submission_id = str(uuid4())
        if reading.is_period:
            records = self._distributor.distribute(reading, book, submission_id)
            snapshot = self._reconciler.set_absolute(book, reading.end_page)
        else:
            record = self._single_record(reading, book, submission_id)
            records = [record]
            if reading.retroactive:
                snapshot = self._reconciler.set_absolute(book, reading.end_page)
            else:
                snapshot = self._reconciler.accumulate(
                    book, self._statuses.get(book.id), record.pages_read
                )

        with self._conn:
            self._records.add_batch(records)
            self._statuses.upsert(snapshot)

        logger.info(
            "Recorded %d day(s) for book %s, pages %d-%d, status %s",
            len(records),
            book.id,
            reading.start_page,
            reading.end_page,
            snapshot.status.value,
        )
        return records

    def edit_record(
        self,
        record_id: str,
        *,
        read_on: date | None = None,
        start_page: int | None = None,
        end_page: int | None = None,
        time_spent_seconds: int | None = None,
        bible: BibleReference | None = None,
        clear_bible: bool = False,
    ) -> DailyReadingRecord:
        """Change an existing record and re-derive the book's status.

        Omitted fields keep their stored values. ``pages_read`` is only
        recounted when a page bound changes, so a zero-page day of a
        period stays at zero under a date or time edit. Pass
        ``clear_bible=True`` to remove the record's Bible reference.

        Raises:
            RecordNotFoundError: If the record does not exist.
            InvalidReadingError: If the edit reverses the page range or
                moves a page bound below 1.
        """
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        book = self.get_book(record.book_id)

        updates: dict = {}
        if start_page is not None or end_page is not None:
            new_start = record.start_page if start_page is None else start_page
            new_end = record.end_page if end_page is None else end_page
            if new_start < 1:
                raise InvalidReadingError("Start page must be at least 1")
            if new_end < new_start:
                raise InvalidReadingError("End page must not be before start page")
            updates["start_page"] = new_start
            updates["end_page"] = new_end
            updates["pages_read"] = new_end - new_start + 1
        if read_on is not None:
            updates["read_on"] = read_on
            if record.start_date is not None:
                updates["start_date"] = read_on
                updates["end_date"] = read_on
        if time_spent_seconds is not None:
            updates["time_seconds"] = time_spent_seconds
        if clear_bible:
            updates["bible"] = None
        elif bible is not None:
            updates["bible"] = bible
        edited = DailyReadingRecord(**{**record.model_dump(), **updates})

        with self._conn:
            self._records.update(edited)
            self._reconcile_in_transaction(book)
        logger.info("Edited record %s of book %s", record_id, book.id)
        return edited

    def delete_record(self, record_id: str) -> None:
        """Delete a record and re-derive the book's status."""
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        book = self.get_book(record.book_id)
        with self._conn:
            self._records.delete(record_id)
            self._reconcile_in_transaction(book)
        logger.info("Deleted record %s of book %s", record_id, book.id)

    def reconcile(self, book_id: str) -> BookStatusSnapshot:
        """Re-derive a book's status from its full history."""
        book = self.get_book(book_id)
        with self._conn:
            return self._reconcile_in_transaction(book)

    # ── Read paths ───────────────────────────────────────────────────────

    def records(self, book_id: str) -> list[DailyReadingRecord]:
        self.get_book(book_id)
        return self._records.list_for_book(book_id)

    def history(self, book_id: str) -> list[DayGroup]:
        """The book's reading days, newest first."""
        book = self.get_book(book_id)
        return group_days(self._records.list_for_book(book_id), book.kind)

    def stats(self, book_id: str) -> AggregatedStats:
        book = self.get_book(book_id)
        return self._aggregator.aggregate(
            book, self._statuses.get(book_id), self._records.list_for_book(book_id)
        )

    def projection(self, book_id: str) -> ReadingProjection:
        """Completion estimate from the configured estimator.

        Without an estimator the projection is empty and ``can_show`` is
        False.
        """
        book = self.get_book(book_id)
        if self._estimator is None:
            return ReadingProjection()
        return self._estimator.estimate(
            book, self._statuses.get(book_id), self._records.list_for_book(book_id)
        )

    def dashboard(self) -> DashboardStats:
        return dashboard_stats(
            self._books.list_all(), self._statuses.list_all(), self._records.list_all()
        )

    def monthly_report(
        self, period: str = "all", today: date | None = None
    ) -> list[MonthlyTotal]:
        return monthly_totals(self._records.list_all(), since=period_start(period, today))

    def streak(self, today: date | None = None) -> int:
        return reading_streak(self._records.list_all(), today)

    def bible_progress(self, book_id: str | None = None) -> list[ChapterProgress]:
        """Chapter coverage across all Bible books, or one of them."""
        if book_id is not None:
            book = self.get_book(book_id)
            records = self._records.list_for_book(book_id) if book.is_bible else []
        else:
            bible_ids = {b.id for b in self._books.list_all() if b.is_bible}
            records = [r for r in self._records.list_all() if r.book_id in bible_ids]
        return chapter_progress(records)

    # ── Internals ────────────────────────────────────────────────────────

    def _single_record(
        self, reading: ReadingInput, book: Book, submission_id: str
    ) -> DailyReadingRecord:
        minutes = reading.total_time_minutes or 0
        if minutes > self._config.max_session_minutes:
            raise InvalidReadingError(
                f"{minutes:g} minutes exceeds the limit of {self._config.max_session_minutes}"
            )
        day = reading.day
        return DailyReadingRecord(
            book_id=book.id,
            submission_id=submission_id,
            read_on=day,
            start_page=reading.start_page,
            end_page=reading.end_page,
            pages_read=reading.end_page - reading.start_page + 1,
            time_seconds=minutes_to_seconds(minutes),
            start_date=reading.start_date,
            end_date=reading.end_date,
            bible=reading.bible,
        )

    def _reconcile_in_transaction(self, book: Book) -> BookStatusSnapshot:
        # Caller holds the transaction
        snapshot = self._reconciler.recompute(book, self._records.list_for_book(book.id))
        self._statuses.upsert(snapshot)
        return snapshot

"""Derives a book's pages read and lifecycle status."""

from collections.abc import Iterable
from datetime import datetime

from src.models.book import Book
from src.models.reading import DailyReadingRecord
from src.models.status import BookStatusSnapshot, ReadingStatus


def determine_status(pages_read: int, total_pages: int) -> ReadingStatus:
    """Map a page count to a lifecycle status."""
    if pages_read <= 0:
        return ReadingStatus.NOT_STARTED
    if pages_read >= total_pages:
        return ReadingStatus.COMPLETED
    return ReadingStatus.READING


class StatusReconciler:
    """Computes a book's status snapshot.

    Three modes are supported:

    - ``set_absolute``: the book has been read up to a given page
      (period submissions and retroactive entries).
    - ``accumulate``: add the pages of a new single-day entry to the
      previous total.
    - ``recompute``: derive the snapshot from the book's full history.
      This is the authoritative mode and is re-run after every edit or
      deletion.
    """

    def set_absolute(self, book: Book, pages_read: int) -> BookStatusSnapshot:
        pages = min(max(pages_read, 0), book.total_pages)
        return BookStatusSnapshot(
            book_id=book.id,
            pages_read=pages,
            status=self._status_after_entry(pages, book.total_pages),
            updated_at=datetime.now(),
        )

    def accumulate(
        self, book: Book, previous: BookStatusSnapshot | None, quantity_read: int
    ) -> BookStatusSnapshot:
        previous_pages = previous.pages_read if previous else 0
        pages = min(max(previous_pages + quantity_read, 0), book.total_pages)
        return BookStatusSnapshot(
            book_id=book.id,
            pages_read=pages,
            status=self._status_after_entry(pages, book.total_pages),
            updated_at=datetime.now(),
        )

    def recompute(
        self, book: Book, records: Iterable[DailyReadingRecord]
    ) -> BookStatusSnapshot:
        """Rebuild the snapshot from every record of the book.

        Args:
            book: The book whose records are given.
            records: All of the book's daily records.

        Returns:
            Snapshot with pages read capped to the book's page count.
        """
        furthest = max((r.end_page for r in records), default=0)
        corrected = min(max(furthest, 0), book.total_pages)
        return BookStatusSnapshot(
            book_id=book.id,
            pages_read=corrected,
            status=determine_status(corrected, book.total_pages),
            updated_at=datetime.now(),
        )

    @staticmethod
    def _status_after_entry(pages_read: int, total_pages: int) -> ReadingStatus:
        # Logging any entry moves a book out of NOT_STARTED
        if pages_read >= total_pages:
            return ReadingStatus.COMPLETED
        return ReadingStatus.READING

"""Repositories for books, reading records and status snapshots.

Repositories never commit. Callers wrap each logical write in a
transaction (``with conn:``) so that related rows land together.
"""

import logging
import sqlite3
from collections.abc import Sequence

from src.models.book import Book
from src.models.reading import BibleReference, DailyReadingRecord
from src.models.status import BookStatusSnapshot
from src.progress.timing import format_time_spent, parse_time_spent

logger = logging.getLogger(__name__)

RECORD_COLUMNS = (
    "id",
    "book_id",
    "submission_id",
    "read_on",
    "start_page",
    "end_page",
    "pages_read",
    "time_spent",
    "start_date",
    "end_date",
    "bible_book",
    "bible_chapter",
    "bible_verse_start",
    "bible_verse_end",
)


class BookRepository:
    """Book CRUD operations."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def add(self, book: Book) -> Book:
        self.conn.execute(
            """
            INSERT INTO books (
                id, title, author, total_pages, category, book_type, created_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                book.id,
                book.title,
                book.author,
                book.total_pages,
                book.category,
                book.book_type,
                book.created_at.isoformat(),
            ),
        )
        return book

    def get(self, book_id: str) -> Book | None:
        row = self.conn.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
        if row is None:
            return None
        return Book(**dict(row))

    def list_all(self) -> list[Book]:
        rows = self.conn.execute("SELECT * FROM books ORDER BY rowid").fetchall()
        return [Book(**dict(row)) for row in rows]

    def delete(self, book_id: str) -> bool:
        """Delete a book. Its records and status go with it."""
        cursor = self.conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        return cursor.rowcount > 0


class ReadingRepository:
    """Daily reading record storage.

    Time is persisted in the ``"M"`` / ``"M:SS"`` minutes encoding and
    decoded back into seconds on read.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def add_batch(self, records: Sequence[DailyReadingRecord]) -> int:
        """Insert several records. Returns the number inserted."""
        if not records:
            return 0
        placeholders = ", ".join("?" for _ in RECORD_COLUMNS)
        columns = ", ".join(RECORD_COLUMNS)
        self.conn.executemany(
            f"INSERT INTO reading_records ({columns}) VALUES ({placeholders})",
            [self._to_row(record) for record in records],
        )
        return len(records)

    def get(self, record_id: str) -> DailyReadingRecord | None:
        row = self.conn.execute(
            "SELECT * FROM reading_records WHERE id = ?", (record_id,)
        ).fetchone()
        if row is None:
            return None
        return self._from_row(row)

    def list_for_book(self, book_id: str) -> list[DailyReadingRecord]:
        """All records of a book in insertion order."""
        rows = self.conn.execute(
            "SELECT * FROM reading_records WHERE book_id = ? ORDER BY rowid",
            (book_id,),
        ).fetchall()
        return [self._from_row(row) for row in rows]

    def list_all(self) -> list[DailyReadingRecord]:
        rows = self.conn.execute(
            "SELECT * FROM reading_records ORDER BY rowid"
        ).fetchall()
        return [self._from_row(row) for row in rows]

    def update(self, record: DailyReadingRecord) -> bool:
        assignments = ", ".join(f"{column} = ?" for column in RECORD_COLUMNS[1:])
        values = self._to_row(record)
        cursor = self.conn.execute(
            f"UPDATE reading_records SET {assignments} WHERE id = ?",
            (*values[1:], values[0]),
        )
        return cursor.rowcount > 0

    def delete(self, record_id: str) -> bool:
        cursor = self.conn.execute(
            "DELETE FROM reading_records WHERE id = ?", (record_id,)
        )
        return cursor.rowcount > 0

    @staticmethod
    def _to_row(record: DailyReadingRecord) -> tuple:
        bible = record.bible
        return (
            record.id,
            record.book_id,
            record.submission_id,
            record.read_on.isoformat(),
            record.start_page,
            record.end_page,
            record.pages_read,
            format_time_spent(record.time_seconds),
            record.start_date.isoformat() if record.start_date else None,
            record.end_date.isoformat() if record.end_date else None,
            bible.book if bible else None,
            bible.chapter if bible else None,
            bible.verse_start if bible else None,
            bible.verse_end if bible else None,
        )

    @staticmethod
    def _from_row(row: sqlite3.Row) -> DailyReadingRecord:
        data = dict(row)
        bible = None
        if data["bible_book"] and data["bible_chapter"]:
            bible = BibleReference(
                book=data["bible_book"],
                chapter=data["bible_chapter"],
                verse_start=data["bible_verse_start"],
                verse_end=data["bible_verse_end"],
            )
        return DailyReadingRecord(
            id=data["id"],
            book_id=data["book_id"],
            submission_id=data["submission_id"],
            read_on=data["read_on"],
            start_page=data["start_page"],
            end_page=data["end_page"],
            pages_read=data["pages_read"],
            time_seconds=parse_time_spent(data["time_spent"]),
            start_date=data["start_date"],
            end_date=data["end_date"],
            bible=bible,
        )


class StatusRepository:
    """One status snapshot per book."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get(self, book_id: str) -> BookStatusSnapshot | None:
        row = self.conn.execute(
            "SELECT * FROM book_status WHERE book_id = ?", (book_id,)
        ).fetchone()
        if row is None:
            return None
        return BookStatusSnapshot(**dict(row))

    def list_all(self) -> list[BookStatusSnapshot]:
        rows = self.conn.execute("SELECT * FROM book_status ORDER BY rowid").fetchall()
        return [BookStatusSnapshot(**dict(row)) for row in rows]

    def upsert(self, snapshot: BookStatusSnapshot) -> None:
        self.conn.execute(
            """
            INSERT INTO book_status (book_id, pages_read, status, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(book_id) DO UPDATE SET
                pages_read = excluded.pages_read,
                status = excluded.status,
                updated_at = excluded.updated_at
            """,
            (
                snapshot.book_id,
                snapshot.pages_read,
                snapshot.status.value,
                snapshot.updated_at.isoformat(),
            ),
        )
        logger.debug(
            "Status of book %s: %d pages, %s",
            snapshot.book_id,
            snapshot.pages_read,
            snapshot.status.value,
        )

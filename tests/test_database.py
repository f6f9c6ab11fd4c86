"""Tests for database initialization."""

import sqlite3
from pathlib import Path

import pytest

from src.storage.database import get_connection, initialize_database


def _tables(db_path: Path) -> list[str]:
    conn = sqlite3.connect(str(db_path))
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    )
    tables = [row[0] for row in cursor.fetchall()]
    conn.close()
    return tables


def _columns(db_path: Path, table: str) -> dict[str, str]:
    conn = sqlite3.connect(str(db_path))
    cursor = conn.execute(f"PRAGMA table_info({table})")
    columns = {row[1]: row[2] for row in cursor.fetchall()}
    conn.close()
    return columns


class TestInitializeDatabase:
    def test_creates_tables(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        tables = _tables(db_path)
        assert "books" in tables
        assert "book_status" in tables
        assert "reading_records" in tables

    def test_idempotent(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)
        initialize_database(db_path)  # Should not raise

        assert "books" in _tables(db_path)

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "dir" / "test.db"
        initialize_database(db_path)
        assert db_path.exists()

    def test_books_table_schema(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        columns = _columns(db_path, "books")
        assert "id" in columns
        assert "title" in columns
        assert "total_pages" in columns
        assert "category" in columns

    def test_reading_records_table_schema(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        columns = _columns(db_path, "reading_records")
        assert columns["time_spent"] == "TEXT"
        assert "submission_id" in columns
        assert "read_on" in columns
        assert "bible_book" in columns
        assert "bible_verse_end" in columns


class TestGetConnection:
    def test_returns_connection_with_row_factory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        conn = get_connection(db_path)
        assert conn.row_factory == sqlite3.Row
        conn.close()

    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        conn = get_connection(db_path)
        cursor = conn.execute("PRAGMA journal_mode")
        mode = cursor.fetchone()[0]
        conn.close()
        assert mode == "wal"

    def test_rejects_reversed_page_range(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        conn = get_connection(db_path)
        conn.execute("INSERT INTO books (id, title, total_pages) VALUES ('b1', 'T', 10)")
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO reading_records "
                "(id, book_id, submission_id, read_on, start_page, end_page) "
                "VALUES ('r1', 'b1', 's1', '2024-01-01', 5, 4)"
            )
        conn.close()

    def test_deleting_book_cascades(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"
        initialize_database(db_path)

        conn = get_connection(db_path)
        conn.execute("INSERT INTO books (id, title, total_pages) VALUES ('b1', 'T', 10)")
        conn.execute("INSERT INTO book_status (book_id) VALUES ('b1')")
        conn.execute(
            "INSERT INTO reading_records "
            "(id, book_id, submission_id, read_on, start_page, end_page) "
            "VALUES ('r1', 'b1', 's1', '2024-01-01', 1, 4)"
        )
        conn.execute("DELETE FROM books WHERE id = 'b1'")

        assert conn.execute("SELECT COUNT(*) FROM book_status").fetchone()[0] == 0
        assert conn.execute("SELECT COUNT(*) FROM reading_records").fetchone()[0] == 0
        conn.close()

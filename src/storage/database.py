"""SQLite database initialization and connection management."""

import sqlite3
from pathlib import Path


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Create a connection to the SQLite database.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A sqlite3 Connection with row_factory set to Row.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def initialize_database(db_path: str | Path) -> None:
    """Create the database schema if it doesn't exist.

    Args:
        db_path: Path to the SQLite database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS books (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                author TEXT DEFAULT '',
                total_pages INTEGER NOT NULL CHECK (total_pages > 0),
                category TEXT DEFAULT '',
                book_type TEXT DEFAULT 'Livro',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );

            CREATE TABLE IF NOT EXISTS book_status (
                book_id TEXT PRIMARY KEY
                    REFERENCES books(id) ON DELETE CASCADE,
                pages_read INTEGER NOT NULL DEFAULT 0,
                status TEXT NOT NULL DEFAULT 'not_started',
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );

            CREATE TABLE IF NOT EXISTS reading_records (
                id TEXT PRIMARY KEY,
                book_id TEXT NOT NULL
                    REFERENCES books(id) ON DELETE CASCADE,
                submission_id TEXT NOT NULL,
                read_on DATE NOT NULL,
                start_page INTEGER NOT NULL,
                end_page INTEGER NOT NULL CHECK (end_page >= start_page),
                pages_read INTEGER NOT NULL DEFAULT 0,
                time_spent TEXT NOT NULL DEFAULT '0',
                start_date DATE,
                end_date DATE,
                bible_book TEXT,
                bible_chapter INTEGER,
                bible_verse_start INTEGER,
                bible_verse_end INTEGER
            );

            CREATE INDEX IF NOT EXISTS idx_reading_records_book
                ON reading_records(book_id);
            """
        )
        conn.commit()
    finally:
        conn.close()

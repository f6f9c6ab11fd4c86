"""Entry point for the Reading Tracker application."""

import logging

from src.config import configure_logging, load_config
from src.progress.timing import format_duration
from src.storage.database import get_connection, initialize_database
from src.tracking import ReadingTracker

logger = logging.getLogger(__name__)


def main() -> None:
    """Initialize the database and print a summary of the library."""
    config = load_config()
    configure_logging(config.logging)

    initialize_database(config.storage.sqlite_path)
    logger.info("Using database %s", config.storage.sqlite_path)

    conn = get_connection(config.storage.sqlite_path)
    try:
        tracker = ReadingTracker(conn, config.reading)
        stats = tracker.dashboard()
        print(f"{config.app.name} {config.app.version}")
        print(
            f"Books: {stats.books_count} "
            f"({stats.books_reading} reading, {stats.books_completed} completed)"
        )
        print(
            f"Pages: {stats.pages_read}/{stats.total_pages} "
            f"({stats.percent_read:.1f}%), {stats.reading_days} reading days, "
            f"{stats.avg_pages_per_day:.1f} pages/day, streak {tracker.streak()}"
        )
        for book in tracker.list_books():
            book_stats = tracker.stats(book.id)
            print(
                f"  {book.title}: {book_stats.total_pages_read}/{book.total_pages} pages, "
                f"{format_duration(book_stats.total_time_seconds)}, "
                f"{book_stats.avg_pages_per_day:.1f} pages/day"
            )
    finally:
        conn.close()


if __name__ == "__main__":
    main()

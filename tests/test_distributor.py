"""Tests for spreading reading periods over daily records."""

from datetime import date, timedelta

import pytest

from src.config import ReadingConfig
from src.models import BibleReference, Book, ReadingInput
from src.progress.distributor import PeriodDistributor, days_in_period
from src.progress.errors import InvalidReadingError


@pytest.fixture
def distributor() -> PeriodDistributor:
    return PeriodDistributor(ReadingConfig())


@pytest.fixture
def romance() -> Book:
    return Book(title="Romance Book", total_pages=300, category="Romance")


def _period(
    book: Book,
    start_page: int,
    end_page: int,
    start_date: date,
    end_date: date,
    **kwargs: object,
) -> ReadingInput:
    return ReadingInput(
        book_id=book.id,
        start_page=start_page,
        end_page=end_page,
        start_date=start_date,
        end_date=end_date,
        **kwargs,
    )


class TestDaysInPeriod:
    def test_inclusive_of_both_endpoints(self) -> None:
        assert days_in_period(date(2024, 1, 1), date(2024, 1, 10)) == 10

    def test_same_day(self) -> None:
        assert days_in_period(date(2024, 1, 1), date(2024, 1, 1)) == 1

    def test_across_leap_day(self) -> None:
        assert days_in_period(date(2024, 2, 28), date(2024, 3, 1)) == 3


# ── Page allocation ──────────────────────────────────────────────────────────


class TestPageAllocation:
    def test_ten_day_period(self, distributor: PeriodDistributor, romance: Book) -> None:
        reading = _period(romance, 1, 142, date(2024, 1, 1), date(2024, 1, 10))
        records = distributor.distribute(reading, romance)

        assert len(records) == 10
        assert sum(r.pages_read for r in records) == 142
        assert records[0].start_page == 1
        assert records[0].end_page == 14
        assert records[-1].end_page == 142

    def test_consecutive_days_do_not_overlap(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(romance, 1, 142, date(2024, 1, 1), date(2024, 1, 10))
        records = distributor.distribute(reading, romance)

        for previous, current in zip(records, records[1:]):
            assert current.start_page == previous.end_page + 1

    @pytest.mark.parametrize(
        ("start_page", "end_page", "days"),
        [(1, 100, 7), (17, 250, 3), (5, 5, 2), (1, 3, 10), (40, 301, 31), (1, 999, 13)],
    )
    def test_pages_add_up_and_last_day_closes_range(
        self,
        distributor: PeriodDistributor,
        start_page: int,
        end_page: int,
        days: int,
    ) -> None:
        book = Book(title="T", total_pages=1000, category="Ficção")
        start = date(2024, 5, 1)
        reading = _period(book, start_page, end_page, start, start + timedelta(days=days - 1))
        records = distributor.distribute(reading, book)

        assert len(records) == days
        assert sum(r.pages_read for r in records) == end_page - start_page + 1
        assert records[-1].end_page == end_page
        assert all(r.end_page >= r.start_page for r in records)

    def test_days_with_less_than_a_page(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(romance, 1, 3, date(2024, 1, 1), date(2024, 1, 10))
        records = distributor.distribute(reading, romance)

        assert len(records) == 10
        assert sum(r.pages_read for r in records) == 3
        assert [r.pages_read for r in records].count(0) == 7

    def test_equal_dates_make_one_record(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        day = date(2024, 1, 1)
        records = distributor.distribute(_period(romance, 10, 30, day, day), romance)

        assert len(records) == 1
        assert records[0].start_page == 10
        assert records[0].end_page == 30
        assert records[0].pages_read == 21


# ── Dates and metadata ───────────────────────────────────────────────────────


class TestRecordMetadata:
    def test_one_record_per_calendar_day(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(romance, 1, 60, date(2023, 12, 30), date(2024, 1, 2))
        records = distributor.distribute(reading, romance)

        assert [r.read_on for r in records] == [
            date(2023, 12, 30),
            date(2023, 12, 31),
            date(2024, 1, 1),
            date(2024, 1, 2),
        ]
        for record in records:
            assert record.start_date == record.end_date == record.read_on

    def test_records_share_submission_id(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(romance, 1, 60, date(2024, 1, 1), date(2024, 1, 4))
        records = distributor.distribute(reading, romance, submission_id="sub-1")

        assert {r.submission_id for r in records} == {"sub-1"}
        assert {r.book_id for r in records} == {romance.id}
        assert len({r.id for r in records}) == 4

    def test_bible_reference_copied_to_every_day(
        self, distributor: PeriodDistributor
    ) -> None:
        bible = Book(title="Bíblia", total_pages=1500, category="Bíblia")
        ref = BibleReference(book="Salmos", chapter=119, verse_start=1, verse_end=40)
        reading = _period(bible, 600, 610, date(2024, 1, 1), date(2024, 1, 3), bible=ref)
        records = distributor.distribute(reading, bible)

        assert all(r.bible == ref for r in records)


# ── Time allocation ──────────────────────────────────────────────────────────


class TestTimeAllocation:
    def test_total_time_split_evenly(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(
            romance, 1, 100, date(2024, 1, 1), date(2024, 1, 4), total_time_minutes=90
        )
        records = distributor.distribute(reading, romance)

        assert all(r.time_seconds == 22 * 60 + 30 for r in records)

    def test_estimated_from_category_without_time(
        self, distributor: PeriodDistributor, romance: Book
    ) -> None:
        reading = _period(romance, 1, 142, date(2024, 1, 1), date(2024, 1, 10))
        records = distributor.distribute(reading, romance)

        # 14.2 pages/day at 1.75 min/page
        assert all(r.time_seconds == 1491 for r in records)

    def test_zero_time_is_estimated(self, distributor: PeriodDistributor) -> None:
        book = Book(title="T", total_pages=500, category="Sem categoria")
        reading = _period(
            book, 1, 20, date(2024, 1, 1), date(2024, 1, 2), total_time_minutes=0
        )
        records = distributor.distribute(reading, book)

        # 10 pages/day at the 2.5 min/page default
        assert all(r.time_seconds == 25 * 60 for r in records)

    def test_configured_default_pace(self) -> None:
        distributor = PeriodDistributor(ReadingConfig(default_minutes_per_page=1.0))
        book = Book(title="T", total_pages=500)
        reading = _period(book, 1, 20, date(2024, 1, 1), date(2024, 1, 2))
        records = distributor.distribute(reading, book)

        assert all(r.time_seconds == 10 * 60 for r in records)

    def test_slow_estimate_above_daily_limit_is_kept(
        self, distributor: PeriodDistributor
    ) -> None:
        book = Book(title="T", total_pages=3000, category="Filosofia")
        reading = _period(book, 1, 600, date(2024, 1, 1), date(2024, 1, 2))
        records = distributor.distribute(reading, book)

        # 300 pages/day at 5 min/page is 1500 minutes
        assert len(records) == 2
        assert sum(r.pages_read for r in records) == 600
        assert all(r.time_seconds == 1500 * 60 for r in records)


# ── Rejections ───────────────────────────────────────────────────────────────


class TestInvalidPeriods:
    def test_missing_dates(self, distributor: PeriodDistributor, romance: Book) -> None:
        reading = ReadingInput(book_id=romance.id, start_page=1, end_page=10)
        with pytest.raises(InvalidReadingError):
            distributor.distribute(reading, romance)

    def test_reversed_dates(self, distributor: PeriodDistributor, romance: Book) -> None:
        reading = ReadingInput.model_construct(
            book_id=romance.id,
            start_page=1,
            end_page=10,
            total_time_minutes=None,
            start_date=date(2024, 1, 10),
            end_date=date(2024, 1, 1),
            read_on=None,
            bible=None,
            retroactive=False,
        )
        with pytest.raises(InvalidReadingError):
            distributor.distribute(reading, romance)

    def test_reversed_pages(self, distributor: PeriodDistributor, romance: Book) -> None:
        reading = ReadingInput.model_construct(
            book_id=romance.id,
            start_page=10,
            end_page=1,
            total_time_minutes=None,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 3),
            read_on=None,
            bible=None,
            retroactive=False,
        )
        with pytest.raises(InvalidReadingError):
            distributor.distribute(reading, romance)

    def test_time_per_day_over_limit(self, romance: Book) -> None:
        distributor = PeriodDistributor(ReadingConfig(max_session_minutes=60))
        reading = _period(
            romance, 1, 10, date(2024, 1, 1), date(2024, 1, 2), total_time_minutes=150
        )
        with pytest.raises(InvalidReadingError):
            distributor.distribute(reading, romance)

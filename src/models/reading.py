"""Reading session data models: raw input and persisted daily records."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

# Month labels as shown next to each reading day
MONTH_LABELS: tuple[str, ...] = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)


class BibleReference(BaseModel):
    """A Bible passage: book, chapter and an optional verse range."""

    book: str = Field(min_length=1)
    chapter: int = Field(ge=1)
    verse_start: int | None = Field(default=None, ge=1)
    verse_end: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_verses(self) -> "BibleReference":
        if (
            self.verse_start is not None
            and self.verse_end is not None
            and self.verse_end < self.verse_start
        ):
            raise ValueError("verse_end must be greater than or equal to verse_start")
        return self

    def __str__(self) -> str:
        label = f"{self.book} {self.chapter}"
        if self.verse_start is not None:
            label += f":{self.verse_start}"
            if self.verse_end is not None and self.verse_end != self.verse_start:
                label += f"-{self.verse_end}"
        return label


class ReadingInput(BaseModel):
    """A reading session as submitted by the user.

    A submission whose start and end dates differ is a *period* and is
    spread over one record per calendar day. Without dates, or with equal
    dates, it becomes a single record on ``read_on``.
    """

    book_id: str
    start_page: int = Field(ge=1)
    end_page: int = Field(ge=1)
    total_time_minutes: float | None = Field(default=None, ge=0)
    start_date: date | None = None
    end_date: date | None = None
    read_on: date | None = None
    bible: BibleReference | None = None
    retroactive: bool = False

    @model_validator(mode="after")
    def _check_ranges(self) -> "ReadingInput":
        if self.end_page < self.start_page:
            raise ValueError("end_page must be greater than or equal to start_page")
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_period(self) -> bool:
        """True when the entry spans more than one calendar day."""
        return (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date != self.start_date
        )

    @property
    def day(self) -> date:
        """The calendar day of a single-day entry."""
        return self.read_on or self.start_date or self.end_date or date.today()


class DailyReadingRecord(BaseModel):
    """One persisted day of reading for a book.

    Time is held in whole seconds; the store keeps it in the ``"M"`` /
    ``"M:SS"`` minutes form.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    book_id: str
    submission_id: str = Field(default_factory=lambda: str(uuid4()))
    read_on: date
    start_page: int = Field(ge=1)
    end_page: int = Field(ge=1)
    pages_read: int = Field(default=0, ge=0)
    time_seconds: int = Field(default=0, ge=0)
    start_date: date | None = None
    end_date: date | None = None
    bible: BibleReference | None = None

    @model_validator(mode="after")
    def _check_pages(self) -> "DailyReadingRecord":
        if self.end_page < self.start_page:
            raise ValueError("end_page must be greater than or equal to start_page")
        return self

    @property
    def day(self) -> int:
        return self.read_on.day

    @property
    def month_label(self) -> str:
        return MONTH_LABELS[self.read_on.month - 1]


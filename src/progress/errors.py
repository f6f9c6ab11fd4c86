"""Exceptions raised by the reading progress engine and tracker."""


class InvalidReadingError(ValueError):
    """A reading submission or edit that cannot be recorded."""


class BookNotFoundError(LookupError):
    """No book exists with the requested id."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


class RecordNotFoundError(LookupError):
    """No reading record exists with the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Reading record not found: {record_id}")
        self.record_id = record_id

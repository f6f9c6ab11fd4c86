"""Book data model."""

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

# Category spellings (after lower-casing and trimming) that mark a Bible
BIBLE_CATEGORIES: frozenset[str] = frozenset({"bíblia", "biblia"})


class CategoryKind(str, Enum):
    """How a book's readings are merged and aggregated."""

    BIBLE = "bible"
    GENERAL = "general"


def normalize_category(category: str | None) -> str:
    """Lower-case and trim a free-text category."""
    return (category or "").strip().lower()


def resolve_category_kind(category: str | None) -> CategoryKind:
    """Map a free-text category to its CategoryKind.

    Args:
        category: The category as typed by the user, or None.

    Returns:
        CategoryKind.BIBLE for the Bible spellings, GENERAL otherwise.
    """
    if normalize_category(category) in BIBLE_CATEGORIES:
        return CategoryKind.BIBLE
    return CategoryKind.GENERAL


class Book(BaseModel):
    """A book in the user's library."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(min_length=1, max_length=200)
    author: str = ""
    total_pages: int = Field(ge=1, le=50000)
    category: str = ""
    kind: CategoryKind = CategoryKind.GENERAL
    book_type: str = "Livro"  # "Livro", "Ebook", "Audiobook"
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def _resolve_kind(cls, data: Any) -> Any:
        # The category is the single source of truth for the kind
        if isinstance(data, dict):
            data = dict(data)
            data["category"] = (data.get("category") or "").strip()
            data["kind"] = resolve_category_kind(data["category"])
        return data

    @property
    def is_bible(self) -> bool:
        return self.kind is CategoryKind.BIBLE

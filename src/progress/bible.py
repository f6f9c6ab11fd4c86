"""Chapter coverage of Bible readings against the 66-book canon."""

import unicodedata
from collections.abc import Iterable

from src.models.reading import DailyReadingRecord
from src.models.stats import ChapterProgress

# (name, testament, chapters) in canonical order
BIBLE_BOOKS: tuple[tuple[str, str, int], ...] = (
    ("Gênesis", "old", 50),
    ("Êxodo", "old", 40),
    ("Levítico", "old", 27),
    ("Números", "old", 36),
    ("Deuteronômio", "old", 34),
    ("Josué", "old", 24),
    ("Juízes", "old", 21),
    ("Rute", "old", 4),
    ("1 Samuel", "old", 31),
    ("2 Samuel", "old", 24),
    ("1 Reis", "old", 22),
    ("2 Reis", "old", 25),
    ("1 Crônicas", "old", 29),
    ("2 Crônicas", "old", 36),
    ("Esdras", "old", 10),
    ("Neemias", "old", 13),
    ("Ester", "old", 10),
    ("Jó", "old", 42),
    ("Salmos", "old", 150),
    ("Provérbios", "old", 31),
    ("Eclesiastes", "old", 12),
    ("Cânticos", "old", 8),
    ("Isaías", "old", 66),
    ("Jeremias", "old", 52),
    ("Lamentações", "old", 5),
    ("Ezequiel", "old", 48),
    ("Daniel", "old", 12),
    ("Oséias", "old", 14),
    ("Joel", "old", 3),
    ("Amós", "old", 9),
    ("Obadias", "old", 1),
    ("Jonas", "old", 4),
    ("Miquéias", "old", 7),
    ("Naum", "old", 3),
    ("Habacuque", "old", 3),
    ("Sofonias", "old", 3),
    ("Ageu", "old", 2),
    ("Zacarias", "old", 14),
    ("Malaquias", "old", 4),
    ("Mateus", "new", 28),
    ("Marcos", "new", 16),
    ("Lucas", "new", 24),
    ("João", "new", 21),
    ("Atos", "new", 28),
    ("Romanos", "new", 16),
    ("1 Coríntios", "new", 16),
    ("2 Coríntios", "new", 13),
    ("Gálatas", "new", 6),
    ("Efésios", "new", 6),
    ("Filipenses", "new", 4),
    ("Colossenses", "new", 4),
    ("1 Tessalonicenses", "new", 5),
    ("2 Tessalonicenses", "new", 3),
    ("1 Timóteo", "new", 6),
    ("2 Timóteo", "new", 4),
    ("Tito", "new", 3),
    ("Filemom", "new", 1),
    ("Hebreus", "new", 13),
    ("Tiago", "new", 5),
    ("1 Pedro", "new", 5),
    ("2 Pedro", "new", 3),
    ("1 João", "new", 5),
    ("2 João", "new", 1),
    ("3 João", "new", 1),
    ("Judas", "new", 1),
    ("Apocalipse", "new", 22),
)


def book_key(name: str) -> str:
    """Accent- and case-insensitive lookup key for a Bible book name."""
    decomposed = unicodedata.normalize("NFKD", name.strip().casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


_BOOK_INDEX: dict[str, int] = {
    book_key(name): i for i, (name, _, _) in enumerate(BIBLE_BOOKS)
}


def chapter_progress(records: Iterable[DailyReadingRecord]) -> list[ChapterProgress]:
    """Chapters read per canonical book, in canonical order.

    Records without a Bible reference, with an unknown book name, or with
    a chapter beyond the book's last chapter are ignored.
    """
    read: list[set[int]] = [set() for _ in BIBLE_BOOKS]
    for record in records:
        if record.bible is None:
            continue
        index = _BOOK_INDEX.get(book_key(record.bible.book))
        if index is None:
            continue
        if record.bible.chapter <= BIBLE_BOOKS[index][2]:
            read[index].add(record.bible.chapter)

    return [
        ChapterProgress(
            book=name,
            testament=testament,
            total_chapters=chapters,
            chapters_read=sorted(read[i]),
            progress_percent=len(read[i]) / chapters * 100,
        )
        for i, (name, testament, chapters) in enumerate(BIBLE_BOOKS)
    ]


def overall_progress(progress: Iterable[ChapterProgress]) -> float:
    """Percent of all canonical chapters covered."""
    total = 0
    covered = 0
    for book in progress:
        total += book.total_chapters
        covered += len(book.chapters_read)
    if total == 0:
        return 0.0
    return covered / total * 100

"""Groups a book's daily records into display rows."""

from collections.abc import Sequence
from datetime import date

from src.models.book import CategoryKind
from src.models.reading import DailyReadingRecord
from src.models.stats import DayGroup


def group_days(
    records: Sequence[DailyReadingRecord], kind: CategoryKind
) -> list[DayGroup]:
    """Consolidate records into one row per reading day, newest first.

    Bible readings often log several passages on the same day, so their
    records are merged per calendar date: the page range spans all
    members, pages are summed, and the time is the largest member's time
    since only one entry of the day carries the session's duration.
    Other books keep one row per record.

    Args:
        records: The book's records in insertion order.
        kind: The book's category kind.

    Returns:
        Display groups, most recent first.
    """
    if kind is not CategoryKind.BIBLE:
        return [_single(record) for record in reversed(records)]

    groups: dict[date, DayGroup] = {}
    for record in records:
        group = groups.get(record.read_on)
        if group is None:
            groups[record.read_on] = _single(record)
            continue
        group.start_page = min(group.start_page, record.start_page)
        group.end_page = max(group.end_page, record.end_page)
        group.pages_read += record.pages_read
        group.time_seconds = max(group.time_seconds, record.time_seconds)
        if record.bible is not None:
            group.bible_references.append(record.bible)
        group.record_ids.append(record.id)

    return sorted(groups.values(), key=lambda g: g.read_on, reverse=True)


def _single(record: DailyReadingRecord) -> DayGroup:
    return DayGroup(
        read_on=record.read_on,
        day=record.day,
        month_label=record.month_label,
        start_page=record.start_page,
        end_page=record.end_page,
        pages_read=record.pages_read,
        time_seconds=record.time_seconds,
        bible_references=[record.bible] if record.bible is not None else [],
        record_ids=[record.id],
    )

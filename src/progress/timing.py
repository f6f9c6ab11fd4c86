"""Per-category reading pace profile and time-spent encoding."""

import math
import re

from src.models.book import normalize_category

DEFAULT_MINUTES_PER_PAGE = 2.5

# (min, max) minutes per page, keyed by normalized category.
CATEGORY_TIME_PROFILES: dict[str, tuple[float, float]] = {
    "ficção": (1.5, 2.0),
    "ficcao": (1.5, 2.0),
    "fiction": (1.5, 2.0),
    "romance": (1.5, 2.0),
    "fantasia": (1.5, 2.0),
    "fantasy": (1.5, 2.0),
    "quadrinhos": (0.5, 1.0),
    "infantil": (0.5, 1.0),
    "poesia": (2.0, 3.0),
    "biografia": (2.0, 3.0),
    "biography": (2.0, 3.0),
    "autoajuda": (2.0, 2.5),
    "self-help": (2.0, 2.5),
    "não-ficção": (2.5, 3.5),
    "nao-ficcao": (2.5, 3.5),
    "non-fiction": (2.5, 3.5),
    "história": (3.0, 4.0),
    "historia": (3.0, 4.0),
    "history": (3.0, 4.0),
    "negócios": (2.5, 3.5),
    "negocios": (2.5, 3.5),
    "business": (2.5, 3.5),
    "espiritualidade ou religioso": (2.5, 3.5),
    "filosofia": (4.0, 6.0),
    "philosophy": (4.0, 6.0),
    "teologia": (4.0, 6.0),
    "theology": (4.0, 6.0),
    "ciência": (4.0, 6.0),
    "ciencia": (4.0, 6.0),
    "science": (4.0, 6.0),
    "técnico": (4.0, 6.0),
    "tecnico": (4.0, 6.0),
    "technical": (4.0, 6.0),
    "bíblia": (3.0, 5.0),
    "biblia": (3.0, 5.0),
}

TIME_SPENT_PATTERN = re.compile(r"^\s*(\d+)(?::(\d{1,2}))?\s*$")


def average_minutes_per_page(
    category: str | None, default: float = DEFAULT_MINUTES_PER_PAGE
) -> float:
    """Estimate how many minutes a page of this category takes to read.

    Args:
        category: Free-text book category; case and surrounding spaces
            are ignored.
        default: Value for unknown or missing categories.

    Returns:
        Midpoint of the category's (min, max) range, or ``default``.
    """
    profile = CATEGORY_TIME_PROFILES.get(normalize_category(category))
    if profile is None:
        return default
    low, high = profile
    return (low + high) / 2


def minutes_to_seconds(minutes: float) -> int:
    """Convert decimal minutes (10.5 = 10min 30s) to whole seconds."""
    return int(round(minutes * 60))


def format_time_spent(seconds: int) -> str:
    """Encode a duration as ``"M"`` or ``"M:SS"`` minutes.

    >>> format_time_spent(600)
    '10'
    >>> format_time_spent(630)
    '10:30'
    """
    minutes, secs = divmod(int(seconds), 60)
    if secs == 0:
        return str(minutes)
    return f"{minutes}:{secs:02d}"


def parse_time_spent(value: str | None) -> int:
    """Decode a ``"M"`` or ``"M:SS"`` string into whole seconds.

    Args:
        value: The encoded duration. Empty or None means no time.

    Returns:
        Duration in seconds.

    Raises:
        ValueError: If the value is not in either form or seconds exceed 59.
    """
    if value is None or not str(value).strip():
        return 0
    match = TIME_SPENT_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid time spent: {value!r}")
    minutes = int(match.group(1))
    secs = int(match.group(2) or 0)
    if secs >= 60:
        raise ValueError(f"Invalid seconds in time spent: {value!r}")
    return minutes * 60 + secs


def format_duration(seconds: float) -> str:
    """Human-readable duration for reports, e.g. ``"2h 5min"`` or ``"45min"``."""
    total_minutes = seconds / 60
    hours = math.floor(total_minutes / 60)
    mins = round(total_minutes - hours * 60)
    if mins == 60:
        hours, mins = hours + 1, 0
    if hours > 0:
        return f"{hours}h {mins}min"
    return f"{mins}min"

"""Reading tracker service over the SQLite store."""

from src.tracking.service import ReadingTracker

__all__ = ["ReadingTracker"]

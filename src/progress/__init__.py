"""Reading progress engine: distribution, reconciliation and aggregation."""

from src.progress.aggregator import ReadingAggregator, dashboard_stats
from src.progress.distributor import PeriodDistributor, days_in_period
from src.progress.errors import (
    BookNotFoundError,
    InvalidReadingError,
    RecordNotFoundError,
)
from src.progress.grouping import group_days
from src.progress.projection import ProjectionEstimator, ReadingProjection
from src.progress.reconciler import StatusReconciler, determine_status
from src.progress.timing import (
    average_minutes_per_page,
    format_time_spent,
    parse_time_spent,
)

__all__ = [
    "BookNotFoundError",
    "InvalidReadingError",
    "PeriodDistributor",
    "ProjectionEstimator",
    "ReadingAggregator",
    "ReadingProjection",
    "RecordNotFoundError",
    "StatusReconciler",
    "average_minutes_per_page",
    "dashboard_stats",
    "days_in_period",
    "determine_status",
    "format_time_spent",
    "group_days",
    "parse_time_spent",
]

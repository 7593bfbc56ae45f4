"""Functional core - pure business logic with no I/O."""

from .plan import (
    Activity,
    Category,
    Priority,
    DEFAULT_CATEGORIES,
    categories_by_id,
    active_categories,
    minutes_between,
    parse_day,
)
from .aggregation import DayBreakdown, DayCategoryTotal, aggregate, overage_severity
from .summary import BiggestCategory, WeeklySummary, summarize

__all__ = [
    # Plan
    "Activity",
    "Category",
    "Priority",
    "DEFAULT_CATEGORIES",
    "categories_by_id",
    "active_categories",
    "minutes_between",
    "parse_day",
    # Aggregation
    "DayBreakdown",
    "DayCategoryTotal",
    "aggregate",
    "overage_severity",
    # Summary
    "BiggestCategory",
    "WeeklySummary",
    "summarize",
]

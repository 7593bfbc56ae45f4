"""Pure per-day aggregation logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

from .plan import MINUTES_PER_DAY, Activity, Category

FREE_TIME_ID = "free-time"
FREE_TIME_NAME = "Free time"
FREE_TIME_COLOR = "#e5e7eb"

# Planned time above this share of the day is flagged as a serious overage
DANGER_RATIO = 1.25


@dataclass
class DayCategoryTotal:
    """Minutes spent on one category on one weekday."""

    category_id: str
    category_name: str
    category_color: str
    minutes: int

    @property
    def is_free_time(self) -> bool:
        return self.category_id == FREE_TIME_ID


@dataclass
class DayBreakdown:
    """How one weekday's 1440 minutes are allocated."""

    day_of_week: int
    category_totals: list[DayCategoryTotal]
    free_time_minutes: int

    @property
    def planned_minutes(self) -> int:
        """Minutes claimed by activities (free time excluded)."""
        return sum(t.minutes for t in self.category_totals if not t.is_free_time)

    @property
    def overage_minutes(self) -> int:
        """Minutes planned beyond a 24-hour day."""
        return max(0, self.planned_minutes - MINUTES_PER_DAY)


class OverageSeverity(str, Enum):
    """How far a day is over-scheduled."""

    NONE = "none"
    WARNING = "warning"
    DANGER = "danger"


def overage_severity(total_minutes: int) -> OverageSeverity:
    """Grade how far a day's planned minutes exceed 24 hours."""
    if total_minutes <= MINUTES_PER_DAY:
        return OverageSeverity.NONE
    if total_minutes <= MINUTES_PER_DAY * DANGER_RATIO:
        return OverageSeverity.WARNING
    return OverageSeverity.DANGER


def aggregate(
    activities: list[Activity],
    categories_by_id: dict[str, Category],
) -> list[DayBreakdown]:
    """
    Aggregate recurring activities into a breakdown for each weekday.

    Pure function - no I/O.

    Args:
        activities: Recurring activities for the week
        categories_by_id: Category lookup; activities whose category is
            missing from it are skipped entirely

    Returns:
        Seven DayBreakdowns, Sunday (0) through Saturday (6). Category
        totals are sorted by minutes descending, equal totals keeping the
        order in which their categories were first seen. Any remaining free
        time is appended last as a synthetic "free-time" total.
    """
    day_minutes: list[dict[str, int]] = [{} for _ in range(7)]

    for activity in activities:
        if activity.category_id not in categories_by_id:
            continue
        for day in activity.weekdays():
            minutes = day_minutes[day]
            minutes[activity.category_id] = minutes.get(activity.category_id, 0) + activity.minutes_per_day

    breakdowns = []
    for day, minutes in enumerate(day_minutes):
        totals = []
        for category_id, total in minutes.items():
            category = categories_by_id[category_id]
            totals.append(
                DayCategoryTotal(
                    category_id=category_id,
                    category_name=category.name,
                    category_color=category.color,
                    minutes=total,
                )
            )
        # sorted() is stable, so ties stay in first-seen order
        totals = sorted(totals, key=lambda t: -t.minutes)

        planned = sum(t.minutes for t in totals)
        free_time = max(0, MINUTES_PER_DAY - planned)
        if free_time > 0:
            totals.append(
                DayCategoryTotal(
                    category_id=FREE_TIME_ID,
                    category_name=FREE_TIME_NAME,
                    category_color=FREE_TIME_COLOR,
                    minutes=free_time,
                )
            )

        breakdowns.append(
            DayBreakdown(day_of_week=day, category_totals=totals, free_time_minutes=free_time)
        )

    return breakdowns

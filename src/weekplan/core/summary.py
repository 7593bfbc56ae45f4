"""Pure weekly summary logic - no I/O dependencies."""

from dataclasses import dataclass

from .plan import MINUTES_PER_DAY, Activity, Category, Priority

TOTAL_WEEKLY_MINUTES = 7 * MINUTES_PER_DAY


@dataclass
class BiggestCategory:
    """The category claiming the most time in the week."""

    category_id: str
    name: str
    color: str
    hours: float


@dataclass
class WeeklySummary:
    """Need/want/free totals for a whole week."""

    total_need_hours: float
    total_want_hours: float
    total_free_time_hours: float
    free_time_percentage: float
    biggest_category: BiggestCategory | None


def summarize(
    activities: list[Activity],
    categories_by_id: dict[str, Category],
) -> WeeklySummary:
    """
    Summarize recurring activities across the whole week.

    Pure function - no I/O. Activities whose category is missing from
    categories_by_id contribute nothing. Each activity counts once per
    distinct valid weekday. When several categories tie for the most
    minutes, the first one seen wins.
    """
    need_minutes = 0
    want_minutes = 0
    category_minutes: dict[str, int] = {}

    for activity in activities:
        if activity.category_id not in categories_by_id:
            continue

        entry_minutes = activity.weekly_minutes()
        if activity.priority == Priority.NEED:
            need_minutes += entry_minutes
        else:
            want_minutes += entry_minutes

        category_minutes[activity.category_id] = (
            category_minutes.get(activity.category_id, 0) + entry_minutes
        )

    biggest = None
    max_minutes = 0
    for category_id, minutes in category_minutes.items():
        if minutes > max_minutes:
            max_minutes = minutes
            category = categories_by_id[category_id]
            biggest = BiggestCategory(
                category_id=category_id,
                name=category.name,
                color=category.color,
                hours=minutes / 60,
            )

    planned_minutes = need_minutes + want_minutes
    free_minutes = max(0, TOTAL_WEEKLY_MINUTES - planned_minutes)

    return WeeklySummary(
        total_need_hours=need_minutes / 60,
        total_want_hours=want_minutes / 60,
        total_free_time_hours=free_minutes / 60,
        free_time_percentage=free_minutes / TOTAL_WEEKLY_MINUTES * 100,
        biggest_category=biggest,
    )

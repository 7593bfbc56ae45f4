"""Pure plan domain model - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

MINUTES_PER_DAY = 24 * 60

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
DAY_ABBREVIATIONS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class Priority(str, Enum):
    """Priority class of an activity."""

    NEED = "need"
    WANT = "want"


@dataclass
class Category:
    """A label with a display color used to classify activities."""

    id: str
    name: str
    color: str
    built_in: bool = False
    archived: bool = False

    @classmethod
    def from_dict(cls, category_id: str, data: dict) -> "Category":
        """Create Category from a stored record."""
        return cls(
            id=category_id,
            name=data["name"],
            color=data.get("color", ""),
            built_in=bool(data.get("builtIn", False)),
            archived=bool(data.get("archived", False)),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "color": self.color,
            "builtIn": self.built_in,
            "archived": self.archived,
        }


@dataclass
class Activity:
    """A recurring weekly time commitment."""

    id: str
    category_id: str
    priority: Priority
    days_of_week: list[int]
    minutes_per_day: int
    label: str | None = None
    start_time_local: str | None = None
    end_time_local: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def weekdays(self) -> set[int]:
        """Distinct weekday indices in [0, 6]; anything else is dropped."""
        return {d for d in self.days_of_week if 0 <= d <= 6}

    def weekly_minutes(self) -> int:
        """Minutes this activity claims across the whole week."""
        return self.minutes_per_day * len(self.weekdays())

    @classmethod
    def from_dict(cls, activity_id: str, data: dict) -> "Activity":
        """Create Activity from a stored record."""
        created = data.get("createdAt")
        updated = data.get("updatedAt")
        return cls(
            id=activity_id,
            category_id=data["categoryId"],
            priority=Priority(data.get("priority", Priority.WANT.value)),
            days_of_week=list(data.get("daysOfWeek", [])),
            minutes_per_day=data.get("minutesPerDay", 0),
            label=data.get("label") or None,
            start_time_local=data.get("startTimeLocal") or None,
            end_time_local=data.get("endTimeLocal") or None,
            created_at=datetime.fromisoformat(created) if created else None,
            updated_at=datetime.fromisoformat(updated) if updated else None,
        )

    def to_dict(self) -> dict:
        return {
            "categoryId": self.category_id,
            "label": self.label or None,
            "priority": self.priority.value,
            "daysOfWeek": list(self.days_of_week),
            "minutesPerDay": self.minutes_per_day,
            "startTimeLocal": self.start_time_local or None,
            "endTimeLocal": self.end_time_local or None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass
class CategorySeed:
    """A built-in category created for new users."""

    name: str
    color: str
    built_in: bool = True


DEFAULT_CATEGORIES = [
    CategorySeed("Sleep", "#6366f1"),
    CategorySeed("Work", "#3b82f6"),
    CategorySeed("School", "#e0e000ff"),
    CategorySeed("Meals", "#10b981"),
    CategorySeed("Chores", "#f59e0b"),
    CategorySeed("Exercise", "#ef4444"),
    CategorySeed("Community", "#8b5cf6"),
    CategorySeed("Hobbies", "#ec4899"),
    CategorySeed("Relationships", "#14b8a6"),
]


def categories_by_id(categories: list[Category]) -> dict[str, Category]:
    """Build the id -> Category lookup consumed by aggregation."""
    return {c.id: c for c in categories}


def active_categories(categories: list[Category]) -> list[Category]:
    """Categories offered when creating new entries (archived excluded)."""
    return [c for c in categories if not c.archived]


def parse_day(value: str | int) -> int:
    """
    Resolve a weekday index from an index or a day name.

    Accepts "0".."6", full names and unambiguous prefixes ("mon", "Thu").
    Raises ValueError for anything else.
    """
    if isinstance(value, int) or value.strip().isdigit():
        index = int(value)
        if 0 <= index <= 6:
            return index
        raise ValueError(f"Day index out of range: {value}")

    prefix = value.strip().lower()
    matches = [i for i, name in enumerate(DAY_NAMES) if prefix and name.lower().startswith(prefix)]
    if len(matches) != 1:
        raise ValueError(f"Unknown day: {value!r}")
    return matches[0]


_CLOCK_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def _clock_minutes(time_local: str) -> int:
    match = _CLOCK_PATTERN.match(time_local.strip())
    if not match:
        raise ValueError(f"Expected a time as HH:mm, got {time_local!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_between(start: str, end: str) -> int:
    """
    Duration between two "HH:mm" times.

    An end earlier than the start wraps past midnight ("22:00"-"06:00" is 480).
    Raises ValueError for anything that is not a valid "HH:mm" time.
    """
    start_total = _clock_minutes(start)
    end_total = _clock_minutes(end)
    if end_total >= start_total:
        return end_total - start_total
    return MINUTES_PER_DAY - start_total + end_total

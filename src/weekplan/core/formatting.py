"""Pure display formatting - no I/O dependencies."""

from .aggregation import DayBreakdown, overage_severity, OverageSeverity
from .plan import DAY_ABBREVIATIONS, DAY_NAMES, MINUTES_PER_DAY
from .summary import WeeklySummary

WEEKDAYS = {1, 2, 3, 4, 5}


def format_minutes(minutes: int) -> str:
    """Format a minute count as "1h 30m", "2h" or "45m"."""
    if minutes == 0:
        return "0h"
    if minutes < 0:
        return f"-{format_minutes(-minutes)}"
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_hours(hours: float) -> str:
    """Format fractional hours as whole hours plus rounded minutes."""
    whole = int(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}m"


def format_percentage(percentage: float) -> str:
    return f"{percentage:.1f}%"


def format_days(days: list[int]) -> str:
    """Format a set of weekday indices for display."""
    distinct = sorted({d for d in days if 0 <= d <= 6})
    if not distinct:
        return "No days"
    if len(distinct) == 7:
        return "Every day"
    if set(distinct) == WEEKDAYS:
        return "Weekdays"
    return ", ".join(DAY_ABBREVIATIONS[d] for d in distinct)


def format_12_hour(time_24: str) -> str:
    """Format "HH:mm" as "h:mm AM/PM"; malformed input is returned unchanged."""
    hour_str, _, minute_str = time_24.partition(":")
    try:
        hour = int(hour_str)
        minute = int(minute_str)
    except ValueError:
        return time_24

    period = "PM" if hour >= 12 else "AM"
    hour_12 = hour % 12 or 12
    return f"{hour_12}:{minute:02d} {period}"


def format_day_breakdown(breakdown: DayBreakdown) -> str:
    """
    Format one day's breakdown as a text block.

    Pure function - no I/O.
    """
    lines = [f"### {DAY_NAMES[breakdown.day_of_week]}"]
    for total in breakdown.category_totals:
        share = total.minutes / MINUTES_PER_DAY * 100
        lines.append(
            f"  {total.category_name:<16} {format_minutes(total.minutes):>8}  ({share:.0f}%)"
        )

    severity = overage_severity(breakdown.planned_minutes)
    if severity != OverageSeverity.NONE:
        lines.append(
            f"  Over-scheduled by {format_minutes(breakdown.overage_minutes)} ({severity.value})"
        )
    return "\n".join(lines)


def format_summary(summary: WeeklySummary) -> str:
    """
    Format the weekly summary as a text block.

    Pure function - no I/O.
    """
    lines = [
        "Week Summary",
        f"  Need       {format_hours(summary.total_need_hours)}",
        f"  Want       {format_hours(summary.total_want_hours)}",
        f"  Free time  {format_hours(summary.total_free_time_hours)}"
        f" ({format_percentage(summary.free_time_percentage)} of week)",
    ]
    if summary.biggest_category:
        biggest = summary.biggest_category
        lines.append(f"  Biggest    {biggest.name} ({format_hours(biggest.hours)})")
    return "\n".join(lines)

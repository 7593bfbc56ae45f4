"""Tests for core per-day aggregation logic."""

import pytest

from weekplan.core.aggregation import (
    FREE_TIME_COLOR,
    FREE_TIME_ID,
    DayBreakdown,
    DayCategoryTotal,
    OverageSeverity,
    aggregate,
    overage_severity,
)
from weekplan.core.plan import Activity, Category, Priority


# Fixtures
@pytest.fixture
def categories():
    return {
        "work": Category(id="work", name="Work", color="#3b82f6"),
        "exercise": Category(id="exercise", name="Exercise", color="#ef4444"),
        "sleep": Category(id="sleep", name="Sleep", color="#6366f1"),
    }


@pytest.fixture
def make_activity():
    """Factory for creating activities."""
    counter = iter(range(1000))

    def _make(
        category_id: str,
        days: list[int],
        minutes: int,
        priority: Priority = Priority.WANT,
    ) -> Activity:
        return Activity(
            id=f"a{next(counter)}",
            category_id=category_id,
            priority=priority,
            days_of_week=days,
            minutes_per_day=minutes,
        )
    return _make


def non_free(breakdown: DayBreakdown) -> list[DayCategoryTotal]:
    return [t for t in breakdown.category_totals if not t.is_free_time]


class TestAggregate:
    def test_weekday_work_example(self, categories, make_activity):
        activities = [make_activity("work", [1, 2, 3, 4, 5], 60)]

        days = aggregate(activities, categories)

        for day in range(1, 6):
            totals = days[day].category_totals
            assert [(t.category_name, t.minutes) for t in totals] == [
                ("Work", 60),
                ("Free time", 1380),
            ]
            assert days[day].free_time_minutes == 1380
        for day in (0, 6):
            totals = days[day].category_totals
            assert len(totals) == 1
            assert totals[0].category_id == FREE_TIME_ID
            assert totals[0].minutes == 1440

    def test_always_seven_days_in_order(self, categories, make_activity):
        activities = [
            make_activity("sleep", [6, 0], 480),
            make_activity("work", [3], 60),
        ]
        days = aggregate(activities, categories)
        assert [d.day_of_week for d in days] == [0, 1, 2, 3, 4, 5, 6]

    def test_input_order_does_not_change_result(self, categories, make_activity):
        a = make_activity("sleep", [0, 1], 480)
        b = make_activity("work", [1], 240)
        assert aggregate([a, b], categories) == aggregate([b, a], categories)

    def test_same_category_same_day_is_summed(self, categories, make_activity):
        activities = [
            make_activity("exercise", [1], 30),
            make_activity("exercise", [1], 30),
        ]
        monday = aggregate(activities, categories)[1]
        assert [(t.category_id, t.minutes) for t in non_free(monday)] == [("exercise", 60)]

    def test_sorted_descending_with_free_time_last(self, categories, make_activity):
        activities = [
            make_activity("exercise", [2], 30),
            make_activity("sleep", [2], 480),
            make_activity("work", [2], 120),
        ]
        tuesday = aggregate(activities, categories)[2]
        assert [t.category_id for t in tuesday.category_totals] == [
            "sleep",
            "work",
            "exercise",
            FREE_TIME_ID,
        ]

    def test_free_time_stays_last_even_when_largest(self, categories, make_activity):
        wednesday = aggregate([make_activity("work", [3], 10)], categories)[3]
        assert wednesday.category_totals[-1].category_id == FREE_TIME_ID
        assert wednesday.category_totals[-1].minutes == 1430

    def test_ties_keep_first_seen_order(self, categories, make_activity):
        activities = [
            make_activity("exercise", [4], 60),
            make_activity("work", [4], 60),
        ]
        thursday = aggregate(activities, categories)[4]
        assert [t.category_id for t in non_free(thursday)] == ["exercise", "work"]

        # Stable across repeated calls
        assert aggregate(activities, categories) == aggregate(activities, categories)

    def test_unknown_category_is_skipped(self, categories, make_activity):
        activities = [
            make_activity("missing", [1, 2], 600),
            make_activity("work", [1], 60),
        ]
        days = aggregate(activities, categories)
        assert [t.category_id for t in non_free(days[1])] == ["work"]
        assert days[1].free_time_minutes == 1380
        assert days[2].free_time_minutes == 1440

    def test_out_of_range_days_are_dropped(self, categories, make_activity):
        days = aggregate([make_activity("work", [-1, 7, 3], 60)], categories)
        assert days[3].free_time_minutes == 1380
        assert all(d.free_time_minutes == 1440 for d in days if d.day_of_week != 3)

    def test_duplicate_days_count_once(self, categories, make_activity):
        friday = aggregate([make_activity("work", [5, 5, 5], 60)], categories)[5]
        assert non_free(friday)[0].minutes == 60

    def test_over_scheduled_day(self, categories, make_activity):
        monday = aggregate([make_activity("work", [1], 1500)], categories)[1]
        assert monday.free_time_minutes == 0
        assert len(monday.category_totals) == 1
        assert monday.category_totals[0].minutes == 1500
        assert monday.overage_minutes == 60

    def test_exactly_full_day_has_no_free_entry(self, categories, make_activity):
        activities = [
            make_activity("sleep", [0], 480),
            make_activity("work", [0], 960),
        ]
        sunday = aggregate(activities, categories)[0]
        assert sunday.free_time_minutes == 0
        assert FREE_TIME_ID not in [t.category_id for t in sunday.category_totals]

    def test_empty_activities_all_free(self, categories):
        days = aggregate([], categories)
        assert len(days) == 7
        for d in days:
            assert d.free_time_minutes == 1440
            assert [(t.category_id, t.minutes, t.category_color) for t in d.category_totals] == [
                (FREE_TIME_ID, 1440, FREE_TIME_COLOR)
            ]

    def test_uses_current_category_name_and_color(self, categories, make_activity):
        activity = make_activity("work", [1], 60)
        categories["work"] = Category(id="work", name="Job", color="#000000")
        total = non_free(aggregate([activity], categories)[1])[0]
        assert total.category_name == "Job"
        assert total.category_color == "#000000"

    def test_archived_category_still_counts(self, categories, make_activity):
        categories["work"].archived = True
        monday = aggregate([make_activity("work", [1], 60)], categories)[1]
        assert non_free(monday)[0].minutes == 60

    def test_zero_minutes_activity(self, categories, make_activity):
        monday = aggregate([make_activity("work", [1], 0)], categories)[1]
        assert monday.free_time_minutes == 1440
        assert [(t.category_id, t.minutes) for t in monday.category_totals] == [
            ("work", 0),
            (FREE_TIME_ID, 1440),
        ]

    def test_minutes_add_up_to_full_day(self, categories, make_activity):
        activities = [
            make_activity("sleep", [0, 1, 2, 3, 4, 5, 6], 480),
            make_activity("work", [1, 2, 3, 4, 5], 480),
            make_activity("exercise", [1, 3, 5], 45),
        ]
        for d in aggregate(activities, categories):
            total = sum(t.minutes for t in d.category_totals)
            assert total == d.free_time_minutes + d.planned_minutes
            assert d.free_time_minutes + d.planned_minutes == 1440

    def test_does_not_mutate_inputs(self, categories, make_activity):
        activity = make_activity("work", [3, 1, 1], 60)
        aggregate([activity], categories)
        assert activity.days_of_week == [3, 1, 1]
        assert set(categories) == {"work", "exercise", "sleep"}


class TestOverageSeverity:
    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, OverageSeverity.NONE),
            (1440, OverageSeverity.NONE),
            (1441, OverageSeverity.WARNING),
            (1800, OverageSeverity.WARNING),
            (1801, OverageSeverity.DANGER),
        ],
    )
    def test_thresholds(self, minutes, expected):
        assert overage_severity(minutes) == expected

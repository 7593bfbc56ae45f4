"""Shared workflow layer between the CLI and the functional core.

Each function takes an explicit store, loads the user's plan through the
store ports, and hands it to the pure aggregation code.
"""

import logging

from .adapters.json_store import JsonPlanStore
from .config import Config
from .core.aggregation import DayBreakdown, aggregate
from .core.plan import Activity, Category, categories_by_id
from .core.summary import WeeklySummary, summarize
from .ports import ActivityStore, CategoryStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> JsonPlanStore:
    """Resolve the plan store from config."""
    return JsonPlanStore(config.resolve_data_dir())


def load_plan(
    activity_store: ActivityStore,
    category_store: CategoryStore,
    user_id: str,
) -> tuple[list[Activity], dict[str, Category]]:
    """Fetch a user's activities and category lookup."""
    activities = activity_store.list_activities(user_id)
    categories = categories_by_id(category_store.list_categories(user_id))
    logger.debug(
        f"Loaded {len(activities)} activities and {len(categories)} categories for {user_id}"
    )
    return activities, categories


def compute_week(store: JsonPlanStore, user_id: str) -> list[DayBreakdown]:
    """Per-day breakdowns for a user's week, Sunday first."""
    activities, categories = load_plan(store, store, user_id)
    return aggregate(activities, categories)


def compute_day(store: JsonPlanStore, user_id: str, day: int) -> DayBreakdown:
    """Breakdown for a single weekday."""
    return compute_week(store, user_id)[day]


def compute_summary(store: JsonPlanStore, user_id: str) -> WeeklySummary:
    """Weekly need/want/free summary for a user."""
    activities, categories = load_plan(store, store, user_id)
    return summarize(activities, categories)


def week_order(start_day: int) -> list[int]:
    """Weekday indices in display order, starting at start_day."""
    return [(start_day + i) % 7 for i in range(7)]

"""JSON file-based plan storage adapter."""

import json
import logging
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path

from weekplan.core.plan import DEFAULT_CATEGORIES, Activity, Category

logger = logging.getLogger(__name__)

CATEGORIES_FILE = "categories.json"
ACTIVITIES_FILE = "activities.json"


class StoreErrorKind(Enum):
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


class StoreError(Exception):
    """Raised when a store operation fails."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class JsonPlanStore:
    """
    JSON file-based storage for categories and activities.

    Implements the CategoryStore and ActivityStore protocols. Each user gets a
    directory holding categories.json and activities.json, each a JSON object
    of records keyed by id.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _user_dir(self, user_id: str) -> Path:
        return self.data_dir / "users" / user_id

    def _read(self, user_id: str, filename: str) -> dict[str, dict]:
        path = self._user_dir(user_id) / filename
        if not path.exists():
            return {}
        try:
            records = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise StoreError(StoreErrorKind.CORRUPT, f"{path} is not valid JSON: {e}") from e
        if not isinstance(records, dict):
            raise StoreError(StoreErrorKind.CORRUPT, f"{path} does not contain a JSON object")
        logger.debug(f"Read {len(records)} records from {path}")
        return records

    def _write(self, user_id: str, filename: str, records: dict[str, dict]) -> None:
        path = self._user_dir(user_id) / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records, indent=2))
        logger.debug(f"Wrote {len(records)} records to {path}")

    @staticmethod
    def _parse_category(category_id: str, data: dict) -> Category:
        try:
            return Category.from_dict(category_id, data)
        except (KeyError, TypeError) as e:
            raise StoreError(StoreErrorKind.CORRUPT, f"Malformed category record {category_id}: {e}") from e

    @staticmethod
    def _parse_activity(activity_id: str, data: dict) -> Activity:
        try:
            return Activity.from_dict(activity_id, data)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(StoreErrorKind.CORRUPT, f"Malformed activity record {activity_id}: {e}") from e

    # ============== Categories ==============

    def list_categories(self, user_id: str) -> list[Category]:
        """List all categories for a user, archived ones included."""
        records = self._read(user_id, CATEGORIES_FILE)
        return [self._parse_category(cid, data) for cid, data in records.items()]

    def get_category(self, user_id: str, category_id: str) -> Category | None:
        """Get a single category, or None if it does not exist."""
        data = self._read(user_id, CATEGORIES_FILE).get(category_id)
        if data is None:
            return None
        return self._parse_category(category_id, data)

    def create_category(
        self,
        user_id: str,
        name: str,
        color: str,
        built_in: bool = False,
        archived: bool = False,
    ) -> str:
        """Create a category and return its id."""
        records = self._read(user_id, CATEGORIES_FILE)
        category = Category(
            id=uuid.uuid4().hex,
            name=name,
            color=color,
            built_in=built_in,
            archived=archived,
        )
        records[category.id] = category.to_dict()
        self._write(user_id, CATEGORIES_FILE, records)
        return category.id

    def update_category(self, user_id: str, category_id: str, **updates) -> None:
        """Update fields of an existing category (name, color, built_in, archived)."""
        records = self._read(user_id, CATEGORIES_FILE)
        if category_id not in records:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"No category with id {category_id}")
        category = self._parse_category(category_id, records[category_id])
        for key, value in updates.items():
            if key == "id" or not hasattr(category, key):
                raise ValueError(f"Unknown category field: {key}")
            setattr(category, key, value)
        records[category_id] = category.to_dict()
        self._write(user_id, CATEGORIES_FILE, records)

    def delete_category(self, user_id: str, category_id: str) -> None:
        """Delete a category. Activities referencing it are left in place."""
        records = self._read(user_id, CATEGORIES_FILE)
        if records.pop(category_id, None) is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"No category with id {category_id}")
        self._write(user_id, CATEGORIES_FILE, records)

    def seed_default_categories(self, user_id: str) -> list[str]:
        """Create the built-in categories a new user starts with."""
        return [
            self.create_category(user_id, seed.name, seed.color, built_in=seed.built_in)
            for seed in DEFAULT_CATEGORIES
        ]

    # ============== Activities ==============

    def list_activities(self, user_id: str) -> list[Activity]:
        """List all activities for a user."""
        records = self._read(user_id, ACTIVITIES_FILE)
        return [self._parse_activity(aid, data) for aid, data in records.items()]

    def get_activity(self, user_id: str, activity_id: str) -> Activity | None:
        """Get a single activity, or None if it does not exist."""
        data = self._read(user_id, ACTIVITIES_FILE).get(activity_id)
        if data is None:
            return None
        return self._parse_activity(activity_id, data)

    def create_activity(self, user_id: str, activity: Activity) -> str:
        """Store a new activity and return its generated id."""
        records = self._read(user_id, ACTIVITIES_FILE)
        now = datetime.now()
        activity.id = uuid.uuid4().hex
        activity.created_at = now
        activity.updated_at = now
        records[activity.id] = activity.to_dict()
        self._write(user_id, ACTIVITIES_FILE, records)
        return activity.id

    def update_activity(self, user_id: str, activity_id: str, **updates) -> None:
        """Update fields of an existing activity and bump its updated_at."""
        records = self._read(user_id, ACTIVITIES_FILE)
        if activity_id not in records:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"No activity with id {activity_id}")
        activity = self._parse_activity(activity_id, records[activity_id])
        for key, value in updates.items():
            if key in ("id", "created_at", "updated_at") or not hasattr(activity, key):
                raise ValueError(f"Unknown activity field: {key}")
            setattr(activity, key, value)
        activity.updated_at = datetime.now()
        records[activity_id] = activity.to_dict()
        self._write(user_id, ACTIVITIES_FILE, records)

    def delete_activity(self, user_id: str, activity_id: str) -> None:
        records = self._read(user_id, ACTIVITIES_FILE)
        if records.pop(activity_id, None) is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"No activity with id {activity_id}")
        self._write(user_id, ACTIVITIES_FILE, records)

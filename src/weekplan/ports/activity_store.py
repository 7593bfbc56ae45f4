"""Activity store interface."""

from typing import Protocol

from weekplan.core.plan import Activity


class ActivityStore(Protocol):
    """Interface for reading a user's recurring activities from any backend."""

    def list_activities(self, user_id: str) -> list[Activity]:
        """List all activities for a user."""
        ...

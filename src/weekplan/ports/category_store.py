"""Category store interface."""

from typing import Protocol

from weekplan.core.plan import Category


class CategoryStore(Protocol):
    """Interface for reading a user's categories from any backend."""

    def list_categories(self, user_id: str) -> list[Category]:
        """List all categories for a user, archived ones included."""
        ...

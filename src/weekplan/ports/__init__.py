"""Ports - interfaces/protocols for external dependencies."""

from .activity_store import ActivityStore
from .category_store import CategoryStore

__all__ = [
    "ActivityStore",
    "CategoryStore",
]

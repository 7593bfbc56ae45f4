"""Adapters - I/O implementations of ports."""

from .json_store import JsonPlanStore, StoreError, StoreErrorKind

__all__ = [
    "JsonPlanStore",
    "StoreError",
    "StoreErrorKind",
]

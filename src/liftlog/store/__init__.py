"""Row-store access for liftlog."""

from .base import Filter, Order, RowStore, StoreError, desc, eq, ilike, in_
from .engine import get_db_path, init_db, seed_exercises
from .sqlite import SQLiteRowStore

__all__ = [
    "desc",
    "eq",
    "Filter",
    "get_db_path",
    "ilike",
    "in_",
    "init_db",
    "open_store",
    "Order",
    "RowStore",
    "seed_exercises",
    "SQLiteRowStore",
    "StoreError",
]


def open_store(db_path=None) -> SQLiteRowStore:
    """Return the default store for the configured data directory."""
    return SQLiteRowStore(db_path or get_db_path())

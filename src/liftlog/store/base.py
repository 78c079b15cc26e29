"""Protocol for the generic table-oriented row store."""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from ..errors import BackendError


class StoreError(BackendError):
    """A row-store call failed; carries the backend message verbatim."""


@dataclass(frozen=True)
class Filter:
    """A predicate on one column."""

    column: str
    op: str  # "eq", "ilike" or "in"
    value: Any


@dataclass(frozen=True)
class Order:
    """Sort key for select calls."""

    column: str
    ascending: bool = True


def eq(column: str, value: Any) -> Filter:
    return Filter(column, "eq", value)


def ilike(column: str, pattern: str) -> Filter:
    """Case-insensitive LIKE match (use % for wildcards)."""
    return Filter(column, "ilike", pattern)


def in_(column: str, values: Sequence[Any]) -> Filter:
    return Filter(column, "in", list(values))


def desc(column: str) -> Order:
    return Order(column, ascending=False)


@runtime_checkable
class RowStore(Protocol):
    """Read/insert/update/delete addressed by table name and filters.

    Rows are plain dicts. List and dict values round-trip as-is.
    """

    async def select(
        self,
        table: str,
        *,
        filters: Sequence[Filter] = (),
        order: Sequence[Order] = (),
        limit: int | None = None,
    ) -> list[dict]:
        """Return all rows matching every filter."""
        ...

    async def select_one(self, table: str, *, filters: Sequence[Filter] = ()) -> dict | None:
        """Return the first matching row, or None."""
        ...

    async def count(self, table: str, *, filters: Sequence[Filter] = ()) -> int:
        """Count matching rows."""
        ...

    async def insert(self, table: str, row: dict) -> dict:
        """Insert one row and return it as stored (with its id)."""
        ...

    async def insert_many(self, table: str, rows: Sequence[dict]) -> list[dict]:
        """Insert several rows in one call and return them as stored."""
        ...

    async def update(self, table: str, values: dict, *, filters: Sequence[Filter]) -> int:
        """Update matching rows, returning how many changed."""
        ...

    async def delete(self, table: str, *, filters: Sequence[Filter]) -> int:
        """Delete matching rows, returning how many were removed."""
        ...

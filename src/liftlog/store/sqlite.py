"""Row store backed by a local SQLite file."""

import json
import re
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

import aiosqlite
import structlog

from .base import Filter, Order, StoreError
from .schema import TABLES, TableSpec

logger = structlog.get_logger(__name__)

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")

_OPERATORS = {
    "eq": "{col} = ?",
    "ilike": "lower({col}) LIKE lower(?)",
}


class SQLiteRowStore:
    """RowStore implementation over aiosqlite.

    Opens one connection per call. insert_many commits once, so a bulk insert
    either lands completely or not at all.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path

    async def select(
        self,
        table: str,
        *,
        filters: Sequence[Filter] = (),
        order: Sequence[Order] = (),
        limit: int | None = None,
    ) -> list[dict]:
        spec = self._table(table)
        where, params = self._where(filters)
        sql = f"SELECT * FROM {spec.name}{where}"
        if order:
            parts = []
            for o in order:
                self._check_identifier(o.column)
                parts.append(f"{o.column} {'ASC' if o.ascending else 'DESC'}")
            sql += " ORDER BY " + ", ".join(parts)
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(sql, params)
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise self._error(table, "select", e) from e
        return [self._decode(spec, row) for row in rows]

    async def select_one(self, table: str, *, filters: Sequence[Filter] = ()) -> dict | None:
        rows = await self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None

    async def count(self, table: str, *, filters: Sequence[Filter] = ()) -> int:
        spec = self._table(table)
        where, params = self._where(filters)
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(f"SELECT COUNT(*) FROM {spec.name}{where}", params)
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise self._error(table, "count", e) from e
        return row[0] if row else 0

    async def insert(self, table: str, row: dict) -> dict:
        inserted = await self.insert_many(table, [row])
        return inserted[0]

    async def insert_many(self, table: str, rows: Sequence[dict]) -> list[dict]:
        spec = self._table(table)
        if not rows:
            return []

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("PRAGMA foreign_keys = ON")
                db.row_factory = aiosqlite.Row
                ids = []
                for row in rows:
                    encoded = self._encode(spec, row)
                    columns = list(encoded)
                    for col in columns:
                        self._check_identifier(col)
                    placeholders = ", ".join("?" for _ in columns)
                    cursor = await db.execute(
                        f"INSERT INTO {spec.name} ({', '.join(columns)}) VALUES ({placeholders})",
                        [encoded[c] for c in columns],
                    )
                    ids.append(cursor.lastrowid)
                await db.commit()

                stored = []
                for row_id in ids:
                    cursor = await db.execute(f"SELECT * FROM {spec.name} WHERE id = ?", (row_id,))
                    stored.append(self._decode(spec, await cursor.fetchone()))
        except aiosqlite.Error as e:
            raise self._error(table, "insert", e) from e

        logger.debug("rows_inserted", table=table, count=len(stored))
        return stored

    async def update(self, table: str, values: dict, *, filters: Sequence[Filter]) -> int:
        spec = self._table(table)
        if not filters:
            raise StoreError("update requires at least one filter", table=table)
        encoded = self._encode(spec, values)
        for col in encoded:
            self._check_identifier(col)
        assignments = ", ".join(f"{col} = ?" for col in encoded)
        where, params = self._where(filters)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("PRAGMA foreign_keys = ON")
                cursor = await db.execute(
                    f"UPDATE {spec.name} SET {assignments}{where}",
                    [*encoded.values(), *params],
                )
                await db.commit()
                return cursor.rowcount
        except aiosqlite.Error as e:
            raise self._error(table, "update", e) from e

    async def delete(self, table: str, *, filters: Sequence[Filter]) -> int:
        spec = self._table(table)
        if not filters:
            raise StoreError("delete requires at least one filter", table=table)
        where, params = self._where(filters)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("PRAGMA foreign_keys = ON")
                cursor = await db.execute(f"DELETE FROM {spec.name}{where}", params)
                await db.commit()
                return cursor.rowcount
        except aiosqlite.Error as e:
            raise self._error(table, "delete", e) from e

    def _table(self, table: str) -> TableSpec:
        spec = TABLES.get(table)
        if spec is None:
            raise StoreError(f'relation "{table}" does not exist', table=table)
        return spec

    def _check_identifier(self, name: str) -> None:
        if not _IDENTIFIER.match(name):
            raise StoreError(f"invalid column name: {name!r}")

    def _where(self, filters: Sequence[Filter]) -> tuple[str, list[Any]]:
        clauses = []
        params: list[Any] = []
        for f in filters:
            self._check_identifier(f.column)
            if f.op == "in":
                if not f.value:
                    # Empty IN list matches nothing
                    clauses.append("0")
                    continue
                clauses.append(f"{f.column} IN ({', '.join('?' for _ in f.value)})")
                params.extend(self._scalar(v) for v in f.value)
            elif f.op in _OPERATORS:
                clauses.append(_OPERATORS[f.op].format(col=f.column))
                params.append(self._scalar(f.value))
            else:
                raise StoreError(f"unsupported filter operator: {f.op}")
        if not clauses:
            return "", params
        return " WHERE " + " AND ".join(clauses), params

    @staticmethod
    def _scalar(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, datetime):
            return value.isoformat()
        return value

    def _encode(self, spec: TableSpec, row: dict) -> dict:
        encoded = {}
        for key, value in row.items():
            if key == "id" and value is None:
                continue
            if key in spec.json_columns and value is not None:
                encoded[key] = json.dumps(value)
            else:
                encoded[key] = self._scalar(value)
        return encoded

    def _decode(self, spec: TableSpec, row: aiosqlite.Row) -> dict:
        data = dict(row)
        for col in spec.json_columns:
            if data.get(col) is not None:
                data[col] = json.loads(data[col])
        for col in spec.bool_columns:
            if col in data and data[col] is not None:
                data[col] = bool(data[col])
        return data

    def _error(self, table: str, action: str, error: Exception) -> StoreError:
        logger.error("store_call_failed", table=table, action=action, error=str(error))
        return StoreError(str(error), table=table)

"""
Keyed record collections backed by SQLite.

A ``Collection`` stores records of one entity kind in its own table.
It offers the three primitives the services need (insert, get by
key, list in insertion order) plus small conveniences built on
them.  There is no update or delete: records are immutable once
stored.
"""

import logging
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.db import COLLECTION_TABLES, get_connection, get_cursor

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Collection(Generic[RecordT]):
    """A key → record mapping stored in one SQLite table."""

    def __init__(self, table: str, model: Type[RecordT], db_path: str) -> None:
        if table not in COLLECTION_TABLES:
            raise ValueError(f"Unknown collection table: {table}")
        self.table = table
        self.model = model
        self.db_path = db_path

    def __repr__(self) -> str:
        return f"<Collection {self.table} ({self.model.__name__})>"

    def insert(self, key: str, record: RecordT) -> None:
        """Store ``record`` under a key that is not yet present.

        Key freshness is the caller's responsibility; inserting an
        existing key raises ``sqlite3.IntegrityError``.
        """
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"INSERT INTO {self.table} (id, data, created_at) VALUES (?, ?, ?)",
                (key, record.model_dump_json(by_alias=True), getattr(record, "created_at", "")),
            )
        logger.debug("Inserted %s into %s", key, self.table)

    def get(self, key: str) -> Optional[RecordT]:
        """Return the record stored under ``key`` or ``None``."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT data FROM {self.table} WHERE id = ?", (key,)
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return self.model.model_validate_json(row["data"])

    def values(self) -> List[RecordT]:
        """Return all records in insertion order."""
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(f"SELECT data FROM {self.table} ORDER BY seq").fetchall()
        finally:
            conn.close()
        return [self.model.model_validate_json(row["data"]) for row in rows]

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [record for record in self.values() if predicate(record)]

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(f"SELECT COUNT(*) AS count FROM {self.table}").fetchone()
        finally:
            conn.close()
        return row["count"]

    def __len__(self) -> int:
        return self.count()

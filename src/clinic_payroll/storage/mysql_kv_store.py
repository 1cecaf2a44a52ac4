from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Sequence

from .connection import DatabaseConnection
from .kv_store import KeyValueStore
from .mysql_base import db_cursor, fetch_document, fetch_documents


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MySQLKeyValueStore(KeyValueStore):
    """``kv_store`` table: one JSON document per key (see schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "kv_store"):
        self._conn_factory = conn_factory
        self._table = table

    def get(self, key: str) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT `value` FROM {self._table} WHERE `key`=%s", (key,))
            return fetch_document(cur)

    def set(self, key: str, value: dict[str, Any]) -> None:
        self.mset([(key, value)])

    def mset(self, items: Iterable[tuple[str, dict[str, Any]]]) -> None:
        params = [(key, json.dumps(value, ensure_ascii=False, default=str)) for key, value in items]
        if not params:
            return

        # single transaction, so a bulk save is all-or-nothing
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"""
                INSERT INTO {self._table}(`key`, `value`)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE `value`=VALUES(`value`)
                """,
                params,
            )

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE `key`=%s", (key,))
            return cur.rowcount > 0

    def get_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT `value` FROM {self._table} WHERE `key` LIKE %s ORDER BY `key` ASC",
                (escape_like(prefix) + "%",),
            )
            return fetch_documents(cur)

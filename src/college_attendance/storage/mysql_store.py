from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_STORE_NAMESPACE
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .store import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    """Key-value namespace stored as rows of the ``kv_store`` table."""

    def __init__(self, conn_factory: DatabaseConnection, *, namespace: str = DEFAULT_STORE_NAMESPACE):
        self._conn_factory = conn_factory
        self._namespace = namespace

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT store_value
                FROM kv_store
                WHERE namespace=%s AND store_key=%s
                """,
                (self._namespace, key),
            )
            r = fetchone(cur)
            if not r:
                return None
            return r["store_value"]

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(namespace, store_key, store_value)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (self._namespace, key, value),
            )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM kv_store WHERE namespace=%s AND store_key=%s",
                (self._namespace, key),
            )

    def keys(self) -> list[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT store_key FROM kv_store WHERE namespace=%s ORDER BY store_key",
                (self._namespace,),
            )
            return [r["store_key"] for r in fetchall(cur)]

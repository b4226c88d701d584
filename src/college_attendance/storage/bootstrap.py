from __future__ import annotations

import logging

from ..core.constants import SESSION_SCOPED_KEYS
from .connection import DatabaseConnection
from .mysql_base import db_cursor
from .store import KeyValueStore

logger = logging.getLogger(__name__)

KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    namespace VARCHAR(64) NOT NULL,
    store_key VARCHAR(128) NOT NULL,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    PRIMARY KEY (namespace, store_key)
)
"""


def ensure_schema(conn_factory: DatabaseConnection) -> None:
    """Create the key-value table if it does not exist (idempotent)."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(KV_SCHEMA)
    logger.info("kv_store table ready")


def reset_session_keys(store: KeyValueStore) -> None:
    """Drop every collection key; the stored identity is left alone."""
    for key in SESSION_SCOPED_KEYS:
        store.delete(key)
    logger.info("cleared session-scoped keys: %s", ", ".join(SESSION_SCOPED_KEYS))

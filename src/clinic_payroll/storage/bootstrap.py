from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..core.constants import SETTINGS_KEY
from ..settings.model import DEFAULT_RATE_CONFIG
from .connection import DatabaseConnection, DBConfig
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql holds DDL only; no ';' inside string literals.
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create the key-value table (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(db_config)
    sql = Path(schema_path).read_text(encoding="utf-8")

    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied: %s -> %s", schema_path, target.describe())


def ensure_default_settings(store: KeyValueStore) -> bool:
    """Seed ``system:settings`` with the defaults when missing.

    Returns True when a document was written.
    """
    if store.get(SETTINGS_KEY) is not None:
        return False
    store.set(SETTINGS_KEY, DEFAULT_RATE_CONFIG.to_dict())
    logger.info("default system settings seeded")
    return True

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """One unit of work: commit on success, roll back and re-raise on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        logger.warning("transaction rolled back on %s", conn_factory.config.describe())
        raise
    finally:
        cur.close()
        conn.close()


def load_json(raw: Any) -> Optional[Dict[str, Any]]:
    # JSON columns come back as str, or bytes with some connector builds.
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw)
    return raw


def fetch_document(cur, column: str = "value") -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return load_json(row[column]) if row else None


def fetch_documents(cur, column: str = "value") -> List[Dict[str, Any]]:
    return [load_json(row[column]) for row in cur.fetchall() or []]

from __future__ import annotations

from contextlib import contextmanager, suppress
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back on error.

    Driver errors surface as StorageError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise StorageError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        with suppress(mysql.connector.Error):
            conn.close()


def _rollback_quietly(conn) -> None:
    # A dropped connection fails the rollback too; keep the original error.
    with suppress(mysql.connector.Error):
        conn.rollback()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

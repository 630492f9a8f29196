from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Agent
from .repository import AgentRepository


def _to_agent(row: Dict[str, Any]) -> Agent:
    return Agent(
        id=int(row["id"]),
        name=row["name"],
        note=row["note"],
        badge_code=row.get("matricule"),
    )


class MySQLAgentRepository(AgentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Agent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, note, matricule FROM agents ORDER BY id")
            return [_to_agent(r) for r in fetchall(cur)]

    def get_by_id(self, agent_id: int) -> Optional[Agent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, note, matricule FROM agents WHERE id=%s", (int(agent_id),))
            row = fetchone(cur)
            return _to_agent(row) if row else None

    def get_by_badge_code(self, badge_code: str) -> Optional[Agent]:
        # Binary comparison: badge codes match exactly, case included.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, note, matricule FROM agents WHERE matricule = %s COLLATE utf8mb4_bin LIMIT 1",
                (badge_code,),
            )
            row = fetchone(cur)
            return _to_agent(row) if row else None

    def create(self, *, name: str, note: str, badge_code: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO agents(name, note, matricule) VALUES(%s,%s,%s)",
                (name, note, badge_code),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, agent_id: int) -> bool:
        # Explicit delete of presences too, so the cascade holds even without the FK.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM presences WHERE agent_id=%s", (int(agent_id),))
            cur.execute("DELETE FROM agents WHERE id=%s", (int(agent_id),))
            return cur.rowcount > 0

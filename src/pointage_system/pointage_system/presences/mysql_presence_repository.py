from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent, PunchRow
from .repository import PresenceRepository


class MySQLPresenceRepository(PresenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(
        self,
        *,
        agent_id: int,
        punch_type: str,
        time: str,
        source: str,
        metadata: Optional[str] = None,
    ) -> PunchEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO presences(agent_id, `type`, `time`, source, metadata)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(agent_id), punch_type, time, source, metadata),
            )
            return PunchEvent(
                id=int(cur.lastrowid),
                agent_id=int(agent_id),
                type=punch_type,
                time=time,
                source=source,
                metadata=metadata,
            )

    def list_with_agent_names(self, *, name_filter: Optional[str] = None) -> Sequence[PunchRow]:
        where = ""
        params: tuple = ()
        if name_filter:
            where = "WHERE a.name LIKE %s COLLATE utf8mb4_bin"
            params = (f"%{name_filter}%",)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT p.`time` AS time, p.`type` AS type, a.name AS nom
                FROM presences p
                LEFT JOIN agents a ON a.id = p.agent_id
                {where}
                ORDER BY p.`time` DESC
                """,
                params,
            )
            return [
                PunchRow(time=r["time"], type=r.get("type") or "", nom=r.get("nom"))
                for r in fetchall(cur)
            ]

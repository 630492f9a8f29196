from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .agents.mysql_agent_repository import MySQLAgentRepository
from .agents.repository import AgentRepository
from .agents.service import AgentService
from .auth.service import AuthService
from .common.datetime_utils import parse_hhmm
from .core.constants import ARRIVAL_THRESHOLD, DEPARTURE_REFERENCE
from .database.connection import DBConfig, DatabaseConnection
from .presences.history import HistoryService
from .presences.mysql_presence_repository import MySQLPresenceRepository
from .presences.policy import AttendancePolicy, FixedThresholdPolicy
from .presences.repository import PresenceRepository
from .presences.service import PunchService


@dataclass(frozen=True)
class Container:
    agents_repo: AgentRepository
    presences_repo: PresenceRepository

    auth_service: AuthService
    agent_service: AgentService
    punch_service: PunchService
    history_service: HistoryService


def assemble_container(
    *,
    agents_repo: AgentRepository,
    presences_repo: PresenceRepository,
    admin_username: str = "admin",
    admin_password: str = "1234",
    policy: Optional[AttendancePolicy] = None,
) -> Container:
    return Container(
        agents_repo=agents_repo,
        presences_repo=presences_repo,
        auth_service=AuthService(admin_username, admin_password),
        agent_service=AgentService(agents_repo),
        punch_service=PunchService(agents_repo, presences_repo),
        history_service=HistoryService(presences_repo, policy=policy),
    )


def _as_time(value: str | time | None, default: time) -> time:
    if value is None:
        return default
    if isinstance(value, time):
        return value
    return parse_hhmm(value)


def build_container(
    *,
    db_config: dict,
    admin_username: str = "admin",
    admin_password: str = "1234",
    arrival_threshold: str | time | None = None,
    departure_reference: str | time | None = None,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    policy = FixedThresholdPolicy(
        arrival_limit=_as_time(arrival_threshold, ARRIVAL_THRESHOLD),
        departure_reference=_as_time(departure_reference, DEPARTURE_REFERENCE),
    )

    return assemble_container(
        agents_repo=MySQLAgentRepository(conn),
        presences_repo=MySQLPresenceRepository(conn),
        admin_username=admin_username,
        admin_password=admin_password,
        policy=policy,
    )

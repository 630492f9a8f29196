from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..agents.model import Agent
from ..agents.repository import AgentRepository
from ..common.datetime_utils import now_utc, to_iso_timestamp
from ..common.validators import parse_leading_int
from ..core.constants import DASHBOARD_PUNCH_TYPE, DEFAULT_PUNCH_TYPE
from ..core.enums import PunchSource, PunchType
from ..core.exceptions import AgentNotFoundError, ValidationError
from .model import PunchEvent
from .repository import PresenceRepository


class PunchService:
    """Use case: record a punch (pointage) for an agent.

    Every call appends a new event; nothing is deduplicated.
    """

    def __init__(self, agents: AgentRepository, presences: PresenceRepository):
        self._agents = agents
        self._presences = presences

    def resolve_agent(self, badge_code: Optional[str]) -> Agent:
        """Badge code first (exact match), then the code read as an agent id."""
        if not badge_code or not str(badge_code).strip():
            raise ValidationError("Code badge obligatoire")

        badge_code = str(badge_code)
        agent = self._agents.get_by_badge_code(badge_code)
        if agent:
            return agent

        agent_id = parse_leading_int(badge_code)
        if agent_id is not None:
            agent = self._agents.get_by_id(agent_id)
            if agent:
                return agent

        raise AgentNotFoundError(f"Aucun agent pour le badge {badge_code!r}")

    def record_punch(
        self,
        badge_code: Optional[str],
        punch_type: Optional[str] = None,
        source: str = PunchSource.BADGEUSE_API.value,
        *,
        now: Optional[datetime] = None,
    ) -> Agent:
        agent = self.resolve_agent(badge_code)
        self._insert(agent, punch_type or DEFAULT_PUNCH_TYPE, source, now)
        return agent

    def record_dashboard_punch(self, agent_id: int, *, now: Optional[datetime] = None) -> Agent:
        """One-click punch from the dashboard: the agent is known by id."""
        agent = self._agents.get_by_id(int(agent_id))
        if not agent:
            raise AgentNotFoundError(f"Agent {agent_id} introuvable")

        self._insert(agent, DASHBOARD_PUNCH_TYPE, PunchSource.DASHBOARD.value, now)
        return agent

    def _insert(self, agent: Agent, punch_type: str, source: str, now: Optional[datetime]) -> PunchEvent:
        now = now or now_utc()
        if isinstance(punch_type, PunchType):
            punch_type = punch_type.value
        if isinstance(source, PunchSource):
            source = source.value
        return self._presences.insert(
            agent_id=agent.id,
            punch_type=punch_type,
            time=to_iso_timestamp(now),
            source=source,
            metadata=None,
        )

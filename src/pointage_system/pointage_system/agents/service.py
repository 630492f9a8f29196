from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_str, require_non_empty
from ..core.exceptions import AgentNotFoundError
from .model import Agent
from .repository import AgentRepository


class AgentService:
    """Use case: manage the agent directory (admin)."""

    def __init__(self, agents: AgentRepository):
        self._agents = agents

    def list_agents(self) -> Sequence[Agent]:
        return self._agents.list_all()

    def find_agent_by_id(self, agent_id: int) -> Optional[Agent]:
        return self._agents.get_by_id(int(agent_id))

    def find_agent_by_badge_code(self, badge_code: str) -> Optional[Agent]:
        return self._agents.get_by_badge_code(badge_code)

    def create_agent(self, *, name: Optional[str], note: Optional[str], badge_code: Optional[str] = None) -> Agent:
        """Register an agent.

        Name and note are required. A blank badge code is stored as NULL;
        uniqueness of a present badge code is enforced by storage (StorageError).
        """
        name = require_non_empty(name, "Nom")
        note = require_non_empty(note, "Poste")
        badge_code = optional_str(badge_code)

        agent_id = self._agents.create(name=name, note=note, badge_code=badge_code)
        return Agent(id=agent_id, name=name, note=note, badge_code=badge_code)

    def delete_agent(self, agent_id: int) -> None:
        if not self._agents.delete_by_id(int(agent_id)):
            raise AgentNotFoundError(f"Agent {agent_id} introuvable")

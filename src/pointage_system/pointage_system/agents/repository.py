from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Agent


class AgentRepository(Protocol):
    """Repository interface for agents.

    Services depend on this protocol, not on a concrete database.
    """

    def list_all(self) -> Sequence[Agent]:
        raise NotImplementedError

    def get_by_id(self, agent_id: int) -> Optional[Agent]:
        raise NotImplementedError

    def get_by_badge_code(self, badge_code: str) -> Optional[Agent]:
        raise NotImplementedError

    def create(self, *, name: str, note: str, badge_code: Optional[str] = None) -> int:
        raise NotImplementedError

    def delete_by_id(self, agent_id: int) -> bool:
        """Delete the agent and its punch events."""

        raise NotImplementedError

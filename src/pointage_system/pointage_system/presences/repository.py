from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PunchEvent, PunchRow


class PresenceRepository(Protocol):
    def insert(
        self,
        *,
        agent_id: int,
        punch_type: str,
        time: str,
        source: str,
        metadata: Optional[str] = None,
    ) -> PunchEvent:
        """Append one punch and return the stored row."""

        raise NotImplementedError

    def list_with_agent_names(self, *, name_filter: Optional[str] = None) -> Sequence[PunchRow]:
        """All punches left-joined with agent names, newest first.

        `name_filter` keeps rows whose agent name contains it (case-sensitive).
        """

        raise NotImplementedError

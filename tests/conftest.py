from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from src.pointage_system.pointage_system.agents.model import Agent
from src.pointage_system.pointage_system.container import assemble_container
from src.pointage_system.pointage_system.core.exceptions import StorageError
from src.pointage_system.pointage_system.presences.model import PunchEvent, PunchRow


class InMemoryAgents:
    def __init__(self, agents: Optional[list[Agent]] = None):
        self.by_id: dict[int, Agent] = {a.id: a for a in agents or []}
        self.presences: Optional["InMemoryPresences"] = None
        self._id = max(self.by_id, default=0)

    def list_all(self):
        return [self.by_id[k] for k in sorted(self.by_id)]

    def get_by_id(self, agent_id: int) -> Optional[Agent]:
        return self.by_id.get(agent_id)

    def get_by_badge_code(self, badge_code: str) -> Optional[Agent]:
        for a in self.by_id.values():
            if a.badge_code is not None and a.badge_code == badge_code:
                return a
        return None

    def create(self, *, name: str, note: str, badge_code: Optional[str] = None) -> int:
        if badge_code is not None and self.get_by_badge_code(badge_code):
            raise StorageError(f"Duplicate entry '{badge_code}' for key 'uq_agents_matricule'")
        self._id += 1
        self.by_id[self._id] = Agent(id=self._id, name=name, note=note, badge_code=badge_code)
        return self._id

    def delete_by_id(self, agent_id: int) -> bool:
        if agent_id not in self.by_id:
            return False
        if self.presences is not None:
            self.presences.events = [e for e in self.presences.events if e.agent_id != agent_id]
        del self.by_id[agent_id]
        return True


class InMemoryPresences:
    def __init__(self, agents: InMemoryAgents):
        self._agents = agents
        self.events: list[PunchEvent] = []
        self._id = 0
        agents.presences = self

    def insert(self, *, agent_id: int, punch_type: str, time: str, source: str, metadata=None) -> PunchEvent:
        self._id += 1
        event = PunchEvent(id=self._id, agent_id=agent_id, type=punch_type, time=time, source=source, metadata=metadata)
        self.events.append(event)
        return event

    def add_orphan(self, *, punch_type: str, time: str, source: str = "dashboard") -> int:
        self._id += 1
        self.events.append(PunchEvent(id=self._id, agent_id=None, type=punch_type, time=time, source=source))
        return self._id

    def list_with_agent_names(self, *, name_filter: Optional[str] = None):
        rows = []
        for e in self.events:
            agent = self._agents.get_by_id(e.agent_id) if e.agent_id is not None else None
            nom = agent.name if agent else None
            if name_filter and (nom is None or name_filter not in nom):
                continue
            rows.append(PunchRow(time=e.time, type=e.type, nom=nom))
        rows.sort(key=lambda r: r.time, reverse=True)
        return rows


class FailingPresences:
    """Every call fails like a lost database connection."""

    def insert(self, **kwargs) -> PunchEvent:
        raise StorageError("Lost connection to MySQL server")

    def list_with_agent_names(self, *, name_filter=None):
        raise StorageError("Lost connection to MySQL server")


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 10, 8, 20, 0, tzinfo=timezone.utc)


@pytest.fixture
def agents_repo():
    return InMemoryAgents(
        [
            Agent(id=1, name="Alice", note="Accueil", badge_code="A1"),
            Agent(id=2, name="Bruno", note="Technicien", badge_code="B2"),
            Agent(id=3, name="Chantal", note="Comptable", badge_code=None),
        ]
    )


@pytest.fixture
def presences_repo(agents_repo):
    return InMemoryPresences(agents_repo)


@pytest.fixture
def container(agents_repo, presences_repo):
    return assemble_container(agents_repo=agents_repo, presences_repo=presences_repo)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.pointage_system.pointage_system.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    client.post("/login", data={"username": "admin", "password": "1234"})
    return client


@pytest.fixture
def failing_presences():
    return FailingPresences()

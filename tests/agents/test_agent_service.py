from __future__ import annotations

import pytest

from src.pointage_system.pointage_system.agents.service import AgentService
from src.pointage_system.pointage_system.core.exceptions import AgentNotFoundError, StorageError, ValidationError


def test_create_agent_strips_and_stores_blank_badge_as_none(agents_repo):
    svc = AgentService(agents_repo)

    agent = svc.create_agent(name="  Didier ", note="Gardien", badge_code="   ")

    assert agent.name == "Didier"
    assert agent.badge_code is None
    assert agents_repo.get_by_id(agent.id) == agent


@pytest.mark.parametrize("name,note", [("", "Gardien"), ("Didier", ""), (None, None)])
def test_create_agent_requires_name_and_note(agents_repo, name, note):
    with pytest.raises(ValidationError):
        AgentService(agents_repo).create_agent(name=name, note=note)


def test_duplicate_badge_code_is_storage_error(agents_repo):
    with pytest.raises(StorageError):
        AgentService(agents_repo).create_agent(name="Eve", note="RH", badge_code="A1")


def test_agents_without_badge_can_coexist(agents_repo):
    svc = AgentService(agents_repo)
    svc.create_agent(name="Eve", note="RH")
    svc.create_agent(name="Fabrice", note="RH")

    assert len(svc.list_agents()) == 5


def test_find_agent_by_badge_code(agents_repo):
    svc = AgentService(agents_repo)

    assert svc.find_agent_by_badge_code("B2").name == "Bruno"
    assert svc.find_agent_by_badge_code("nope") is None
    assert svc.find_agent_by_id(3).name == "Chantal"


def test_delete_agent_cascades_punches(agents_repo, presences_repo):
    presences_repo.insert(agent_id=1, punch_type="arrivee", time="2024-01-10T08:00:00.000Z", source="dashboard")
    presences_repo.insert(agent_id=2, punch_type="arrivee", time="2024-01-10T08:00:00.000Z", source="dashboard")

    AgentService(agents_repo).delete_agent(1)

    assert agents_repo.get_by_id(1) is None
    assert [e.agent_id for e in presences_repo.events] == [2]


def test_delete_unknown_agent(agents_repo):
    with pytest.raises(AgentNotFoundError):
        AgentService(agents_repo).delete_agent(99)

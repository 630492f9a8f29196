from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PunchEvent:
    """Entité du domaine : pointage (immuable une fois enregistré).

    Shape of a stored `presences` row, as returned by `PresenceRepository.insert`.
    """

    id: int
    agent_id: Optional[int]
    type: str
    time: str
    source: str
    metadata: Optional[str] = None


@dataclass(frozen=True)
class PunchRow:
    """Read-model: a punch joined with its agent's name (None when orphaned)."""

    time: str
    type: str
    nom: Optional[str]


@dataclass(frozen=True)
class DailyRecord:
    """One history line: an agent's first arrival and last departure for a day."""

    nom: Optional[str]
    work_date: date
    arrivee: Optional[str] = None
    arrivee_retard: bool = False
    depart: Optional[str] = None
    heures_sup: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nom": self.nom,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "arrivee": self.arrivee,
            "arriveeRetard": self.arrivee_retard,
            "depart": self.depart,
            "heuresSup": self.heures_sup,
        }

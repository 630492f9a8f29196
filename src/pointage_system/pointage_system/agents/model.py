from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Agent:
    """Entité du domaine : Agent (membre du personnel suivi).

    `note` is the role/post shown as "poste" in the UI; `badge_code` is the
    optional, unique "matricule" read by the badge devices.
    """

    id: int
    name: str
    note: str
    badge_code: Optional[str] = None

from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Types de pointage connus (le stockage accepte aussi des libellés libres)."""

    ARRIVEE = "arrivee"
    DEPART = "depart"
    POINTAGE = "pointage"
    BADGE = "badge"


class PunchSource(str, Enum):
    """Canal d'origine d'un pointage."""

    DASHBOARD = "dashboard"
    BADGEUSE_VIRTUELLE = "badgeuse_virtuelle"
    BADGEUSE_API = "badgeuse_api"

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import format_hhmm, format_overtime, parse_iso_timestamp
from ..core.enums import PunchType
from .model import DailyRecord, PunchRow
from .policy import AttendancePolicy, FixedThresholdPolicy
from .repository import PresenceRepository


@dataclass
class _DayGroup:
    nom: Optional[str]
    work_date: date
    arrivee: Optional[datetime] = None
    depart: Optional[datetime] = None


def aggregate_daily_records(rows: Iterable[PunchRow], policy: AttendancePolicy) -> list[DailyRecord]:
    """Reduce raw punches to one DailyRecord per (agent name, UTC day).

    Earliest "arrivee" and latest "depart" win; other punch types only make
    the day show up. Records come out in first-seen order of `rows`.
    """
    groups: dict[tuple[Optional[str], date], _DayGroup] = {}

    for r in rows:
        ts = parse_iso_timestamp(r.time)
        key = (r.nom, ts.date())
        g = groups.get(key)
        if not g:
            g = _DayGroup(nom=r.nom, work_date=ts.date())
            groups[key] = g

        if r.type == PunchType.ARRIVEE.value:
            if g.arrivee is None or ts < g.arrivee:
                g.arrivee = ts
        elif r.type == PunchType.DEPART.value:
            if g.depart is None or ts > g.depart:
                g.depart = ts

    out: list[DailyRecord] = []
    for g in groups.values():
        overtime = policy.overtime_minutes(g.depart) if g.depart else None
        out.append(
            DailyRecord(
                nom=g.nom,
                work_date=g.work_date,
                arrivee=format_hhmm(g.arrivee) if g.arrivee else None,
                arrivee_retard=policy.is_late(g.arrivee) if g.arrivee else False,
                depart=format_hhmm(g.depart) if g.depart else None,
                heures_sup=format_overtime(overtime) if overtime is not None else None,
            )
        )
    return out


class HistoryService:
    """Use case: daily attendance history (historique)."""

    def __init__(self, presences: PresenceRepository, *, policy: Optional[AttendancePolicy] = None):
        self._presences = presences
        self._policy = policy or FixedThresholdPolicy()

    def build_history(self, name_filter: Optional[str] = None) -> list[DailyRecord]:
        rows = self._presences.list_with_agent_names(name_filter=name_filter or None)
        return aggregate_daily_records(rows, self._policy)

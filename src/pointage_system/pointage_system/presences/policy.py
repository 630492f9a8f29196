from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from ..core.constants import ARRIVAL_THRESHOLD, DEPARTURE_REFERENCE


class AttendancePolicy(ABC):
    """Strategy Pattern: how an arrival/departure is classified."""

    @abstractmethod
    def is_late(self, arrival: datetime) -> bool:
        raise NotImplementedError

    @abstractmethod
    def overtime_minutes(self, departure: datetime) -> Optional[int]:
        raise NotImplementedError


def _minute_of_day(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class FixedThresholdPolicy(AttendancePolicy):
    """Same reference times for every agent and every day.

    Only hour:minute is compared (seconds ignored), on the clock of the
    stored timestamp (UTC).
    """

    arrival_limit: time = ARRIVAL_THRESHOLD
    departure_reference: time = DEPARTURE_REFERENCE

    def is_late(self, arrival: datetime) -> bool:
        return _minute_of_day(arrival) > _minute_of_day(self.arrival_limit)

    def overtime_minutes(self, departure: datetime) -> Optional[int]:
        extra = _minute_of_day(departure) - _minute_of_day(self.departure_reference)
        return extra if extra > 0 else None

"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from datetime import time

from .enums import PunchType

DEFAULT_PUNCH_TYPE = PunchType.BADGE.value
DASHBOARD_PUNCH_TYPE = PunchType.POINTAGE.value

ARRIVAL_THRESHOLD = time(8, 15)
DEPARTURE_REFERENCE = time(17, 0)

SESSION_HOURS = 2

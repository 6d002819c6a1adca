# session_planner/urgency.py
import math
from datetime import date, datetime
from typing import Union

import pandas as pd

from .models import UrgencyTier

# tier -> display colour used by hosting UIs
URGENCY_COLORS = {
    UrgencyTier.CRITICAL: "#dc2626",  # red
    UrgencyTier.HIGH: "#ea580c",      # orange
    UrgencyTier.MEDIUM: "#ca8a04",    # yellow
    UrgencyTier.LOW: "#16a34a",       # green
}

URGENT_WITHIN_DAYS = 3


def days_until(deadline: date, now: Union[date, datetime]) -> int:
    """Whole days from now to the deadline (local midnight), rounded up."""
    delta = pd.Timestamp(deadline).normalize() - pd.Timestamp(now)
    return math.ceil(delta.total_seconds() / 86400)


def classify_urgency(deadline: date, now: Union[date, datetime]) -> UrgencyTier:
    days = days_until(deadline, now)
    if days <= 1:
        return UrgencyTier.CRITICAL
    if days <= 3:
        return UrgencyTier.HIGH
    if days <= 7:
        return UrgencyTier.MEDIUM
    return UrgencyTier.LOW


def is_low_priority_urgent(deadline, importance: bool, now) -> bool:
    """Due within three days but not flagged as important."""
    if deadline is None:
        return False
    return days_until(deadline, now) <= URGENT_WITHIN_DAYS and importance is False


def urgency_color(tier: UrgencyTier) -> str:
    return URGENCY_COLORS[tier]

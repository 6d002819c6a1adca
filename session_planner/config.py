# session_planner/config.py
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .models import CapacityProfile

DEFAULT_WORK_DAYS = "1,2,3,4,5"  # Monday..Friday, 0 = Sunday
DEFAULT_DAILY_HOURS = "8"


def parse_work_days(raw: str) -> frozenset:
    """Parse a comma separated list of weekday indices, e.g. '1,2,3'."""
    return frozenset(int(part) for part in raw.split(",") if part.strip())


def load_capacity(env: Optional[Mapping[str, str]] = None) -> CapacityProfile:
    """
    Build the user's capacity profile from the environment (.env supported).

    WORK_DAYS: comma separated weekday indices (0 = Sunday).
    DAILY_AVAILABLE_HOURS: max work hours per work day.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return CapacityProfile(
        work_days=parse_work_days(env.get("WORK_DAYS", DEFAULT_WORK_DAYS)),
        daily_available_hours=float(env.get("DAILY_AVAILABLE_HOURS", DEFAULT_DAILY_HOURS)),
    )

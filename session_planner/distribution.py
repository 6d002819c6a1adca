# session_planner/distribution.py
import logging
from datetime import date
from typing import Iterable, Tuple

import numpy as np
import pandas as pd

from .models import CapacityProfile, PlanCode, SessionPlan

logger = logging.getLogger(__name__)

# Share of raw capacity a plan may use; the rest is slack for other work.
CAPACITY_SAFETY_MARGIN = 0.8

INVALID_RANGE_LABEL = "Invalid date range"
NO_WORK_DAYS_LABEL = "No work days"
DAILY_LABEL = "Daily"


def _as_day(value) -> pd.Timestamp:
    """Local calendar day (midnight) for a date, datetime or Timestamp."""
    return pd.Timestamp(value).normalize()


def work_days_between(start: date, deadline: date, work_days: Iterable[int]) -> pd.DatetimeIndex:
    """
    Every calendar day in [start, deadline] whose weekday index is a work day.

    Weekday indices follow the 0 = Sunday convention used by CapacityProfile;
    pandas' dayofweek is 0 = Monday, hence the shift.
    """
    days = pd.date_range(_as_day(start), _as_day(deadline), freq="D")
    weekday_idx = (days.dayofweek + 1) % 7
    mask = np.isin(weekday_idx, list(work_days))
    return days[mask]


def calendar_days_between(start: date, deadline: date) -> int:
    """Whole calendar days from start to deadline, negative when inverted."""
    return (_as_day(deadline) - _as_day(start)).days


def count_work_days(start: date, deadline: date, work_days: Iterable[int]) -> int:
    return len(work_days_between(start, deadline, work_days))


def compute_session_plan(start: date,
                         deadline: date,
                         session_duration_hours: float,
                         capacity: CapacityProfile) -> SessionPlan:
    """
    Split a task into one session per work day between start and deadline
    and check the result against the user's capacity.

    Never raises: invalid or incomplete input maps to a coded SessionPlan.
    """
    if start is None or deadline is None or session_duration_hours is None:
        # missing input, nothing to plan yet
        return SessionPlan()

    days_diff = calendar_days_between(start, deadline)
    if days_diff <= 0:
        return SessionPlan(
            frequency_label=INVALID_RANGE_LABEL,
            feasible=False,
            warning="Deadline must be after start date",
            code=PlanCode.INVALID_RANGE,
        )

    n_work_days = count_work_days(start, deadline, capacity.work_days)
    if n_work_days == 0:
        return SessionPlan(
            frequency_label=NO_WORK_DAYS_LABEL,
            feasible=False,
            warning="No work days in the selected range",
            code=PlanCode.NO_WORK_DAYS,
        )

    if session_duration_hours <= 0:
        # not enough input yet, not an error
        return SessionPlan(work_days_in_range=n_work_days)

    # daily cadence only: one session per work day
    session_count = n_work_days
    total_time = session_duration_hours * session_count

    daily_cap = capacity.daily_available_hours
    total_capacity = n_work_days * daily_cap
    feasible = True
    warning = ""
    code = PlanCode.OK

    if session_duration_hours > daily_cap:
        feasible = False
        warning = (f"Session duration ({session_duration_hours:.1f}h) exceeds "
                   f"daily capacity ({daily_cap:g}h)")
        code = PlanCode.SESSION_EXCEEDS_DAILY_CAPACITY
    elif total_time > total_capacity * CAPACITY_SAFETY_MARGIN:
        feasible = False
        warning = f"Total time ({total_time:.1f}h) may exceed available capacity"
        code = PlanCode.EXCEEDS_CAPACITY_MARGIN

    if not feasible:
        logger.debug("Infeasible session plan %s -> %s: %s", start, deadline, warning)

    return SessionPlan(
        total_time=total_time,
        session_count=session_count,
        frequency_label=DAILY_LABEL,
        feasible=feasible,
        warning=warning,
        code=code,
        work_days_in_range=n_work_days,
    )


def session_duration(hours, minutes) -> float:
    """Combine form inputs into hours; blank or non-numeric parts count as 0."""
    def _to_int(v) -> int:
        try:
            return int(v)
        except (TypeError, ValueError):
            return 0

    return _to_int(hours) + _to_int(minutes) / 60


def split_hours_minutes(total_hours: float) -> Tuple[int, int]:
    """(hours, minutes) pair as written back into the estimate fields."""
    hours = int(np.floor(total_hours))
    minutes = int(round((total_hours - hours) * 60))
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return hours, minutes


def format_hours(total_hours: float) -> str:
    """Short display form, e.g. '2h 30m', '3h', '45m'."""
    total_minutes = int(round(total_hours * 60))
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


def daily_load(start: date, deadline: date, plan: SessionPlan,
               capacity: CapacityProfile) -> pd.DataFrame:
    """
    Per-work-day hours implied by a plan, for display.

    Returns columns: day, hours, capacity
    """
    if plan.session_count == 0:
        return pd.DataFrame(columns=["day", "hours", "capacity"])

    days = work_days_between(start, deadline, capacity.work_days)
    per_session = plan.total_time / plan.session_count
    return pd.DataFrame({
        "day": days,
        "hours": per_session,
        "capacity": capacity.daily_available_hours,
    })

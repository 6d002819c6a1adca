# session_planner/conflicts.py
import logging

from .distribution import calendar_days_between, count_work_days
from .models import (
    CapacityProfile,
    ConflictCode,
    ConflictVerdict,
    DeadlineType,
    SessionFrequency,
    TaskDraft,
)

logger = logging.getLogger(__name__)


def check_deadline_conflict(task: TaskDraft, capacity: CapacityProfile) -> ConflictVerdict:
    """
    Can the task's effort, spread evenly over the work days up to the
    deadline, fit the user's daily hours?

    Advisory only. On conflict the only viable cadence is daily sessions,
    so that is what gets recommended.
    """
    if task.deadline is None or task.deadline_type == DeadlineType.NONE:
        return ConflictVerdict()
    if task.start_date is None:
        return ConflictVerdict()

    if calendar_days_between(task.start_date, task.deadline) < 0:
        verdict = ConflictVerdict(
            has_conflict=True,
            reason="Deadline is before the start date",
            code=ConflictCode.INVALID_RANGE,
            recommended_frequency=SessionFrequency.DAILY,
        )
        logger.info("Deadline conflict (%s): %s", task.deadline, verdict.reason)
        return verdict

    n_work_days = count_work_days(task.start_date, task.deadline, capacity.work_days)

    if n_work_days == 0:
        verdict = ConflictVerdict(
            has_conflict=True,
            reason="No work days available between the start date and the deadline",
            code=ConflictCode.NO_WORK_DAYS,
            recommended_frequency=SessionFrequency.DAILY,
        )
        logger.info("Deadline conflict (%s): %s", task.deadline, verdict.reason)
        return verdict

    required = task.estimated_hours / n_work_days
    if required > capacity.daily_available_hours:
        verdict = ConflictVerdict(
            has_conflict=True,
            reason=(f"Needs {required:.1f}h per work day over {n_work_days} work day(s), "
                    f"but only {capacity.daily_available_hours:g}h are available per day"),
            code=ConflictCode.EXCEEDS_DAILY_CAPACITY,
            recommended_frequency=SessionFrequency.DAILY,
            required_daily_hours=required,
        )
        logger.info("Deadline conflict (%s): %s", task.deadline, verdict.reason)
        return verdict

    return ConflictVerdict(required_daily_hours=required)

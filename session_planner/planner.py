# session_planner/planner.py
import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Union

from .conflicts import check_deadline_conflict
from .distribution import compute_session_plan
from .models import CapacityProfile, TaskAssessment, TaskDraft
from .urgency import classify_urgency, is_low_priority_urgent
from .validation import one_sitting_errors, validate_task_draft

logger = logging.getLogger(__name__)


def assess_task(task: TaskDraft,
                capacity: CapacityProfile,
                now: Union[date, datetime],
                session_duration_hours: Optional[float] = None) -> TaskAssessment:
    """
    Run the whole engine for one task draft.

    session_duration_hours: when given, effort is estimated per session
                            (one session per work day) instead of taken
                            from task.estimated_hours.
    now: the caller's current instant; nothing here reads the clock.
    """
    # Sanity: one-sitting tasks must be rejected upstream if they cannot fit a day
    problems = one_sitting_errors(task, capacity)
    if problems:
        raise ValueError("; ".join(problems))

    # 1) Session distribution (skipped for one-sitting tasks)
    session_plan = None
    effective_hours = task.estimated_hours
    if (not task.is_one_time_task
            and session_duration_hours is not None
            and task.deadline is not None):
        session_plan = compute_session_plan(
            start=task.start_date,
            deadline=task.deadline,
            session_duration_hours=session_duration_hours,
            capacity=capacity,
        )
        if session_plan.total_time > 0:
            effective_hours = session_plan.total_time

    # 2) Deadline conflict on the effort actually planned
    draft = task
    if effective_hours != task.estimated_hours:
        draft = replace(task, estimated_hours=effective_hours)
    conflict = check_deadline_conflict(draft, capacity)

    # 3) Urgency (independent, reads only the deadline)
    urgency = None
    low_priority_urgent = False
    if task.deadline is not None:
        urgency = classify_urgency(task.deadline, now)
        low_priority_urgent = is_low_priority_urgent(task.deadline, task.importance, now)

    today = now.date() if isinstance(now, datetime) else now
    errors = validate_task_draft(draft, capacity, today)

    logger.debug(
        "Assessed task: hours=%.2f plan=%s conflict=%s urgency=%s",
        effective_hours,
        session_plan.code.value if session_plan else None,
        conflict.code.value,
        urgency.label if urgency is not None else None,
    )

    return TaskAssessment(
        effective_hours=effective_hours,
        conflict=conflict,
        session_plan=session_plan,
        urgency=urgency,
        low_priority_urgent=low_priority_urgent,
        errors=tuple(errors),
    )

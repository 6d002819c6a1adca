# session_planner/validation.py
from datetime import date
from typing import List

from .models import CapacityProfile, TaskDraft

MAX_REASONABLE_HOURS = 100


def validate_task_draft(task: TaskDraft, capacity: CapacityProfile, today: date) -> List[str]:
    """
    Form-level checks a draft must pass before it is saved.

    Returns human readable messages; an empty list means the draft is valid.
    """
    errors: List[str] = []

    if task.estimated_hours <= 0:
        errors.append("Estimated time must be greater than 0")
    if task.estimated_hours > MAX_REASONABLE_HOURS:
        errors.append(f"Estimated time seems unreasonably high (over {MAX_REASONABLE_HOURS} hours)")

    if task.deadline is not None and task.deadline < today:
        errors.append("Deadline cannot be in the past")

    errors.extend(one_sitting_errors(task, capacity))
    return errors


def one_sitting_errors(task: TaskDraft, capacity: CapacityProfile) -> List[str]:
    if not task.is_one_time_task:
        return []

    errors = []
    if task.deadline is None:
        errors.append("One-sitting tasks require a deadline")
    if task.estimated_hours > capacity.daily_available_hours:
        errors.append(
            f"One-sitting task ({task.estimated_hours:g}h) exceeds your daily "
            f"available hours ({capacity.daily_available_hours:g}h)"
        )
    return errors

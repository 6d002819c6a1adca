from .conflicts import check_deadline_conflict
from .distribution import compute_session_plan
from .models import (
    CapacityProfile,
    ConflictCode,
    ConflictVerdict,
    DeadlineType,
    PlanCode,
    SchedulingPreference,
    SessionFrequency,
    SessionPlan,
    TaskAssessment,
    TaskDraft,
    UrgencyTier,
)
from .planner import assess_task
from .urgency import classify_urgency, is_low_priority_urgent

__all__ = [
    "CapacityProfile",
    "ConflictCode",
    "ConflictVerdict",
    "DeadlineType",
    "PlanCode",
    "SchedulingPreference",
    "SessionFrequency",
    "SessionPlan",
    "TaskAssessment",
    "TaskDraft",
    "UrgencyTier",
    "assess_task",
    "check_deadline_conflict",
    "classify_urgency",
    "compute_session_plan",
    "is_low_priority_urgent",
]

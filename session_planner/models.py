# session_planner/models.py
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import FrozenSet, Optional


class DeadlineType(str, Enum):
    HARD = "hard"
    SOFT = "soft"
    NONE = "none"


class SchedulingPreference(str, Enum):
    CONSISTENT = "consistent"
    OPPORTUNISTIC = "opportunistic"
    INTENSIVE = "intensive"


class SessionFrequency(str, Enum):
    DAILY = "daily"


class PlanCode(str, Enum):
    OK = "ok"
    INVALID_RANGE = "invalid_range"
    NO_WORK_DAYS = "no_work_days"
    INSUFFICIENT_INPUT = "insufficient_input"
    SESSION_EXCEEDS_DAILY_CAPACITY = "session_exceeds_daily_capacity"
    EXCEEDS_CAPACITY_MARGIN = "exceeds_capacity_margin"


class ConflictCode(str, Enum):
    NONE = "none"
    NO_WORK_DAYS = "no_work_days"
    INVALID_RANGE = "invalid_range"
    EXCEEDS_DAILY_CAPACITY = "exceeds_daily_capacity"


class UrgencyTier(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class CapacityProfile:
    # weekday indices, 0 = Sunday ... 6 = Saturday
    work_days: FrozenSet[int] = frozenset({1, 2, 3, 4, 5})
    daily_available_hours: float = 8.0

    def __post_init__(self):
        object.__setattr__(self, "work_days", frozenset(self.work_days))
        if self.daily_available_hours <= 0:
            raise ValueError("daily_available_hours must be positive")
        bad = [d for d in self.work_days if not 0 <= d <= 6]
        if bad:
            raise ValueError(f"work_days must be weekday indices 0-6, got {sorted(bad)}")


@dataclass
class TaskDraft:
    estimated_hours: float
    start_date: Optional[date]
    deadline: Optional[date] = None
    deadline_type: DeadlineType = DeadlineType.NONE
    scheduling_preference: SchedulingPreference = SchedulingPreference.CONSISTENT
    is_one_time_task: bool = False
    importance: bool = False

    def __post_init__(self):
        self.deadline_type = resolve_deadline_type(self.deadline, self.deadline_type)
        self.scheduling_preference = SchedulingPreference(self.scheduling_preference)


@dataclass(frozen=True)
class SessionPlan:
    total_time: float = 0.0
    session_count: int = 0
    frequency_label: str = ""
    feasible: bool = True
    warning: str = ""
    code: PlanCode = PlanCode.INSUFFICIENT_INPUT
    work_days_in_range: int = 0


@dataclass(frozen=True)
class ConflictVerdict:
    has_conflict: bool = False
    reason: Optional[str] = None
    code: ConflictCode = ConflictCode.NONE
    recommended_frequency: Optional[SessionFrequency] = None
    required_daily_hours: Optional[float] = None


@dataclass(frozen=True)
class TaskAssessment:
    effective_hours: float
    conflict: ConflictVerdict
    session_plan: Optional[SessionPlan] = None
    urgency: Optional[UrgencyTier] = None
    low_priority_urgent: bool = False
    errors: tuple = field(default_factory=tuple)


def resolve_deadline_type(deadline: Optional[date], deadline_type) -> DeadlineType:
    """
    No deadline always means 'none'; a deadline that was left as 'none'
    is promoted to 'hard'.
    """
    deadline_type = DeadlineType(deadline_type or DeadlineType.NONE)
    if deadline is None:
        return DeadlineType.NONE
    if deadline_type == DeadlineType.NONE:
        return DeadlineType.HARD
    return deadline_type

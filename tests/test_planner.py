"""
Semantic tests: assess_task facade, draft validation and capacity config.

Invariants:
- one-sitting tasks that cannot fit a day are rejected with ValueError
- one-sitting tasks bypass session distribution
- session mode feeds the plan's total into the conflict check
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from session_planner.config import load_capacity, parse_work_days
from session_planner.models import (
    CapacityProfile,
    ConflictCode,
    DeadlineType,
    PlanCode,
    TaskDraft,
    UrgencyTier,
)
from session_planner.planner import assess_task
from session_planner.validation import validate_task_draft

CAPACITY = CapacityProfile(work_days=frozenset({1, 2, 3, 4, 5}), daily_available_hours=8)
NOW = datetime(2024, 1, 1, 9, 0)


def test_one_sitting_without_deadline_is_rejected() -> None:
    task = TaskDraft(estimated_hours=2, start_date=date(2024, 1, 1), is_one_time_task=True)

    with pytest.raises(ValueError, match="require a deadline"):
        assess_task(task, CAPACITY, now=NOW)


def test_one_sitting_longer_than_a_day_is_rejected() -> None:
    task = TaskDraft(
        estimated_hours=9,
        start_date=date(2024, 1, 1),
        deadline=date(2024, 1, 5),
        is_one_time_task=True,
    )

    with pytest.raises(ValueError, match="exceeds your daily available hours"):
        assess_task(task, CAPACITY, now=NOW)


def test_one_sitting_skips_session_plan() -> None:
    task = TaskDraft(
        estimated_hours=3,
        start_date=date(2024, 1, 1),
        deadline=date(2024, 1, 5),
        is_one_time_task=True,
        importance=True,
    )

    result = assess_task(task, CAPACITY, now=NOW, session_duration_hours=2)

    assert result.session_plan is None
    assert result.effective_hours == 3
    assert result.conflict.has_conflict is False
    assert result.errors == ()


def test_session_mode_uses_plan_total() -> None:
    task = TaskDraft(
        estimated_hours=0,
        start_date=date(2024, 1, 1),
        deadline=date(2024, 1, 7),
        deadline_type=DeadlineType.HARD,
    )

    result = assess_task(task, CAPACITY, now=NOW, session_duration_hours=2)

    assert result.session_plan.code == PlanCode.OK
    assert result.effective_hours == 10
    assert result.conflict.required_daily_hours == 2
    assert result.urgency == UrgencyTier.MEDIUM
    assert result.errors == ()


def test_total_mode_has_no_session_plan() -> None:
    task = TaskDraft(
        estimated_hours=40,
        start_date=date(2024, 1, 5),
        deadline=date(2024, 1, 7),
        deadline_type=DeadlineType.HARD,
    )

    result = assess_task(task, CAPACITY, now=NOW)

    assert result.session_plan is None
    assert result.conflict.code == ConflictCode.EXCEEDS_DAILY_CAPACITY
    assert result.low_priority_urgent is False  # deadline is 6 days out


def test_low_priority_urgent_is_reported() -> None:
    task = TaskDraft(estimated_hours=1, start_date=date(2024, 1, 1), deadline=date(2024, 1, 2))

    result = assess_task(task, CAPACITY, now=NOW)

    assert result.urgency == UrgencyTier.CRITICAL
    assert result.low_priority_urgent is True


def test_validation_messages() -> None:
    task = TaskDraft(estimated_hours=0, start_date=date(2024, 1, 1), deadline=date(2023, 12, 31))

    errors = validate_task_draft(task, CAPACITY, today=date(2024, 1, 1))

    assert "Estimated time must be greater than 0" in errors
    assert "Deadline cannot be in the past" in errors


def test_validation_flags_unreasonable_estimate() -> None:
    task = TaskDraft(estimated_hours=150, start_date=date(2024, 1, 1))
    errors = validate_task_draft(task, CAPACITY, today=date(2024, 1, 1))
    assert errors == ["Estimated time seems unreasonably high (over 100 hours)"]


def test_capacity_requires_positive_hours() -> None:
    with pytest.raises(ValueError):
        CapacityProfile(work_days=frozenset({1}), daily_available_hours=0)


def test_capacity_rejects_unknown_weekday() -> None:
    with pytest.raises(ValueError):
        CapacityProfile(work_days=frozenset({7}), daily_available_hours=8)


def test_load_capacity_from_mapping() -> None:
    capacity = load_capacity({"WORK_DAYS": "0, 6", "DAILY_AVAILABLE_HOURS": "3.5"})

    assert capacity.work_days == frozenset({0, 6})
    assert capacity.daily_available_hours == 3.5


def test_load_capacity_defaults() -> None:
    capacity = load_capacity({})

    assert capacity == CapacityProfile()
    assert parse_work_days("") == frozenset()

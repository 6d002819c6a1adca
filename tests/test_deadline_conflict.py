"""
Semantic tests: deadline conflict detector.

Invariant:
Effort spread evenly over the work days in [start, deadline] must not need
more than the daily available hours; otherwise the verdict is a conflict
recommending daily sessions. No deadline means no check.
"""

from __future__ import annotations

from datetime import date

from session_planner.conflicts import check_deadline_conflict
from session_planner.models import (
    CapacityProfile,
    ConflictCode,
    DeadlineType,
    SessionFrequency,
    TaskDraft,
)

CAPACITY = CapacityProfile(work_days=frozenset({1, 2, 3, 4, 5}), daily_available_hours=8)


def test_no_deadline_is_never_a_conflict() -> None:
    task = TaskDraft(estimated_hours=500, start_date=date(2024, 1, 1))

    verdict = check_deadline_conflict(task, CAPACITY)

    assert task.deadline_type == DeadlineType.NONE
    assert verdict.has_conflict is False
    assert verdict.recommended_frequency is None


def test_deadline_type_none_skips_check() -> None:
    task = TaskDraft(estimated_hours=500, start_date=date(2024, 1, 1), deadline=date(2024, 1, 2))
    task.deadline_type = DeadlineType.NONE

    assert check_deadline_conflict(task, CAPACITY).has_conflict is False


def test_single_work_day_cannot_absorb_forty_hours() -> None:
    """40h with one work day and an 8h day must recommend daily sessions."""
    task = TaskDraft(
        estimated_hours=40,
        start_date=date(2024, 1, 5),   # Friday
        deadline=date(2024, 1, 7),     # Sunday
        deadline_type=DeadlineType.HARD,
    )

    verdict = check_deadline_conflict(task, CAPACITY)

    assert verdict.has_conflict is True
    assert verdict.code == ConflictCode.EXCEEDS_DAILY_CAPACITY
    assert verdict.recommended_frequency == SessionFrequency.DAILY
    assert verdict.required_daily_hours == 40
    assert "8h" in verdict.reason


def test_no_work_days_before_deadline_is_a_conflict() -> None:
    task = TaskDraft(
        estimated_hours=1,
        start_date=date(2024, 1, 6),   # Saturday
        deadline=date(2024, 1, 7),
        deadline_type=DeadlineType.SOFT,
    )

    verdict = check_deadline_conflict(task, CAPACITY)

    assert verdict.has_conflict is True
    assert verdict.code == ConflictCode.NO_WORK_DAYS
    assert verdict.recommended_frequency == SessionFrequency.DAILY


def test_deadline_before_start_is_an_inverted_range() -> None:
    """An inverted range is reported apart from an empty work-day set."""
    task = TaskDraft(estimated_hours=1, start_date=date(2024, 1, 10), deadline=date(2024, 1, 1))

    verdict = check_deadline_conflict(task, CAPACITY)

    assert verdict.has_conflict is True
    assert verdict.code == ConflictCode.INVALID_RANGE
    assert verdict.reason == "Deadline is before the start date"
    assert verdict.recommended_frequency == SessionFrequency.DAILY


def test_missing_start_date_is_not_checked() -> None:
    task = TaskDraft(estimated_hours=40, start_date=None, deadline=date(2024, 1, 7))

    verdict = check_deadline_conflict(task, CAPACITY)

    assert verdict.has_conflict is False
    assert verdict.code == ConflictCode.NONE


def test_effort_that_fits_is_not_a_conflict() -> None:
    task = TaskDraft(
        estimated_hours=40,
        start_date=date(2024, 1, 1),
        deadline=date(2024, 1, 7),
        deadline_type=DeadlineType.HARD,
    )

    verdict = check_deadline_conflict(task, CAPACITY)

    assert verdict.has_conflict is False
    assert verdict.required_daily_hours == 8
    assert verdict.reason is None


def test_deadline_with_none_type_is_promoted_to_hard() -> None:
    task = TaskDraft(estimated_hours=1, start_date=date(2024, 1, 1), deadline=date(2024, 1, 3))
    assert task.deadline_type == DeadlineType.HARD

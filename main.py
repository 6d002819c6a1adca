# demo.py
from datetime import date, datetime

import matplotlib.pyplot as plt

from session_planner.config import load_capacity
from session_planner.distribution import daily_load, format_hours
from session_planner.logger import get_logger
from session_planner.models import DeadlineType, SchedulingPreference, TaskDraft
from session_planner.planner import assess_task

logger = get_logger()


def main():
    capacity = load_capacity()
    now = datetime(2024, 1, 1, 9, 0)

    task = TaskDraft(
        estimated_hours=0,
        start_date=date(2024, 1, 1),
        deadline=date(2024, 1, 12),
        deadline_type=DeadlineType.HARD,
        scheduling_preference=SchedulingPreference.CONSISTENT,
        importance=True,
    )

    assessment = assess_task(task, capacity, now=now, session_duration_hours=2.5)
    plan = assessment.session_plan

    print("=== Session plan ===")
    print(f"Sessions:  {plan.session_count} ({plan.frequency_label})")
    print(f"Total:     {format_hours(plan.total_time)}")
    print(f"Feasible:  {plan.feasible} {plan.warning}")
    print(f"Urgency:   {assessment.urgency.label}")
    if assessment.conflict.has_conflict:
        print(f"Conflict:  {assessment.conflict.reason}")

    load = daily_load(task.start_date, task.deadline, plan, capacity)
    logger.info("Planned %d sessions over %d work days", plan.session_count, len(load))

    # Plot per-day load against capacity
    plt.figure(figsize=(10, 3))
    plt.bar(load["day"], load["hours"], label="Session hours")
    plt.plot(load["day"], load["capacity"], color="red", linestyle="--", label="Daily capacity")
    plt.title("Planned Hours per Work Day")
    plt.xlabel("Day")
    plt.ylabel("Hours")
    plt.legend()
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()

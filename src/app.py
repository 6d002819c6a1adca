import streamlit as st
import pandas as pd
import plotly.express as px
from datetime import datetime

from session_planner.config import load_capacity
from session_planner.distribution import (
    daily_load,
    format_hours,
    session_duration,
    split_hours_minutes,
)
from session_planner.logger import get_logger
from session_planner.models import (
    CapacityProfile,
    DeadlineType,
    SchedulingPreference,
    TaskDraft,
)
from session_planner.planner import assess_task
from session_planner.urgency import urgency_color

from prometheus_client import start_http_server, Summary, Counter

logger = get_logger()

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


# ✅ Create metric only once
if "ASSESS_TIME" not in st.session_state:
    st.session_state.ASSESS_TIME = Summary(
        "task_assessment_seconds",
        "Time spent assessing a task draft",
    )
ASSESS_TIME = st.session_state.ASSESS_TIME

# ✅ Create conflict counter only once
if "CONFLICT_COUNTER" not in st.session_state:
    st.session_state.CONFLICT_COUNTER = Counter(
        "deadline_conflicts_total",
        "Count of deadline conflicts by reason code",
        ["code"],
    )
CONFLICT_COUNTER = st.session_state.CONFLICT_COUNTER


# ✅ Start metrics server only once
if "metrics_started" not in st.session_state:
    start_http_server(8000)
    st.session_state.metrics_started = True


# Session State Setup
if "capacity" not in st.session_state:
    st.session_state.capacity = load_capacity()


# Sidebar: Capacity
st.sidebar.title("Task Time Budget")

st.sidebar.subheader("Weekly capacity")
cap = st.session_state.capacity
work_day_names = st.sidebar.multiselect(
    "Work days",
    options=WEEKDAYS,
    default=[WEEKDAYS[d] for d in sorted(cap.work_days)],
)
daily_hours = st.sidebar.number_input(
    "Available hours per work day", min_value=0.5, max_value=24.0, step=0.5,
    value=float(cap.daily_available_hours),
)
st.session_state.capacity = CapacityProfile(
    work_days=frozenset(WEEKDAYS.index(name) for name in work_day_names),
    daily_available_hours=float(daily_hours),
)


# Main: Task draft
st.title("Plan a Task")

now = datetime.now()
today = now.date()

estimation_mode = st.radio("Estimate by", ["Total time", "Per session"], horizontal=True)

col1, col2 = st.columns(2)
with col1:
    start_date = st.date_input("Start date", value=today)
    has_deadline = st.checkbox("Has deadline?", value=True)
    deadline = st.date_input("Deadline", value=today) if has_deadline else None
    deadline_type = st.selectbox(
        "Deadline type",
        [t.value for t in DeadlineType],
        index=0,
        disabled=not has_deadline,
    )
with col2:
    preference = st.selectbox("Scheduling preference", [p.value for p in SchedulingPreference])
    importance = st.checkbox("Important?", value=False)
    one_sitting = st.checkbox("Complete in one sitting?", value=False)

session_hours = None
if estimation_mode == "Total time":
    c_h, c_m = st.columns(2)
    with c_h:
        est_h = st.number_input("Hours", min_value=0, max_value=100, value=2)
    with c_m:
        est_m = st.number_input("Minutes", min_value=0, max_value=59, step=5, value=0)
    estimated_hours = session_duration(est_h, est_m)
else:
    c_h, c_m = st.columns(2)
    with c_h:
        s_h = st.text_input("Session hours", value="2")
    with c_m:
        s_m = st.text_input("Session minutes", value="0")
    session_hours = session_duration(s_h, s_m)
    estimated_hours = 0.0

draft = TaskDraft(
    estimated_hours=estimated_hours,
    start_date=start_date,
    deadline=deadline,
    deadline_type=deadline_type,
    scheduling_preference=preference,
    is_one_time_task=one_sitting,
    importance=importance,
)

try:
    with ASSESS_TIME.time():
        assessment = assess_task(draft, st.session_state.capacity, now=now,
                                 session_duration_hours=session_hours)
except ValueError as e:
    logger.info("Rejected one-sitting draft: %s", e)
    st.error(str(e))
    st.stop()


# Results
st.markdown("### Estimate")
hours, minutes = split_hours_minutes(assessment.effective_hours)
st.write(f"Total effort: **{format_hours(assessment.effective_hours)}** ({hours}h {minutes}m)")

if assessment.urgency is not None:
    color = urgency_color(assessment.urgency)
    st.markdown(
        f"Urgency: <span style='color:{color}'>{assessment.urgency.label}</span>",
        unsafe_allow_html=True,
    )

plan = assessment.session_plan
if plan is not None:
    st.markdown("### Session plan")
    if plan.frequency_label:
        st.write(f"{plan.session_count} sessions · {plan.frequency_label}")
    if not plan.feasible:
        st.warning(plan.warning)

    load = daily_load(start_date, deadline, plan, st.session_state.capacity)
    if not load.empty:
        fig = px.bar(load, x="day", y="hours",
                     labels={"day": "Day", "hours": "Hours"})
        fig.add_hline(y=st.session_state.capacity.daily_available_hours, line_dash="dash")
        st.plotly_chart(fig, use_container_width=True)

if assessment.conflict.has_conflict:
    CONFLICT_COUNTER.labels(code=assessment.conflict.code.value).inc()
    st.warning(
        "Frequency preference may not allow completion before deadline. "
        f"{assessment.conflict.reason}. "
        f'Recommended: switch to "{assessment.conflict.recommended_frequency.value}" frequency, '
        "or daily scheduling will be used instead."
    )

if assessment.low_priority_urgent:
    st.warning(
        "This task is low priority but has an urgent deadline. "
        "It may not be scheduled if you have more important urgent tasks."
    )

if assessment.errors:
    st.error("Please fix these issues:\n" + "\n".join(f"- {e}" for e in assessment.errors))
elif plan is None and not one_sitting and estimation_mode == "Per session":
    st.info("Set a deadline to compute a session plan.")

if st.checkbox("Show raw assessment"):
    st.dataframe(pd.DataFrame([{
        "effective_hours": assessment.effective_hours,
        "plan_code": plan.code.value if plan else None,
        "conflict_code": assessment.conflict.code.value,
        "urgency": assessment.urgency.label if assessment.urgency is not None else None,
    }]))

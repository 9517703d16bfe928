"""ClubCoach — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import uuid
from datetime import date, timedelta

import streamlit as st

from coaching_engine.engine import CoachingEngine
from coaching_engine.exceptions import InvalidEntityError, SnapshotFormatError
from coaching_engine.lifecycle import (
    GoalDeleted,
    WorkTypeRemoved,
    add_work_type_preset,
    deactivate_goal,
    delete_goal,
    register_goal,
    remove_work_type,
)
from coaching_engine.math.balance import distribution_frame
from coaching_engine.math.coverage import progress_bar_fraction
from coaching_engine.models.enums import (
    BalanceIssueKind,
    Cadence,
    RecommendationKind,
    StudentLevel,
)
from coaching_engine.models.goal import Goal, default_target_for
from coaching_engine.models.trace import PassStatus
from coaching_engine.models.week_plan import WeekPlan
from coaching_engine.models.work_type import PREDEFINED_WORK_TYPES

from helpers import (
    CADENCE_LABELS,
    CATEGORY_COLORS,
    DAY_NAMES,
    LEVEL_LABELS,
    completed_days_by_goal,
    confidence_band,
    current_week_plan,
    days_remaining,
    filter_recommendations,
    format_date_range,
    format_percentage,
    list_clubs,
    load_club,
    progress_frame,
    replace_week_plan,
    sample_snapshot,
    save_club,
    work_type_names,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(page_title="ClubCoach", page_icon="🥊", layout="wide")


@st.cache_resource
def get_engine() -> CoachingEngine:
    return CoachingEngine()


def _snapshot():
    if "snapshot" not in st.session_state:
        st.session_state["snapshot"] = sample_snapshot(date.today())
    return st.session_state["snapshot"]


def _set_snapshot(snapshot) -> None:
    """Store a mutated snapshot and refresh every goal's progress."""
    engine = get_engine()
    st.session_state["snapshot"] = engine.refresh_progress(
        snapshot, completed_days_by_goal(snapshot)
    )


# ---------------------------------------------------------------------------
# Sidebar — club files
# ---------------------------------------------------------------------------

st.sidebar.title("Club")

clubs = list_clubs()
if clubs:
    selected_club = st.sidebar.selectbox("Saved clubs", clubs)
    if st.sidebar.button("Load"):
        try:
            _set_snapshot(load_club(selected_club))
            st.sidebar.success(f"Loaded {selected_club}")
        except SnapshotFormatError as e:
            st.sidebar.error(f"Could not load {selected_club}: {e}")

club_name = st.sidebar.text_input("Save as", value="my_club")
if st.sidebar.button("Save"):
    path = save_club(club_name, _snapshot())
    st.sidebar.success(f"Saved to {path.name}")

if st.sidebar.button("Reset to demo data"):
    _set_snapshot(sample_snapshot(date.today()))

snapshot = _snapshot()
engine = get_engine()

tab_goals, tab_week, tab_recs, tab_types = st.tabs(
    ["Goals", "Weekly Balance", "Recommendations", "Work Types"]
)

# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

with tab_goals:
    st.subheader("Goal progress")
    active = len(snapshot.active_goals)
    done = sum(1 for p in snapshot.progress if p.is_completed)
    st.caption(f"{active} active goals · {done} completed")

    if not snapshot.goals:
        st.info("No goals yet.")
    for goal in snapshot.goals:
        progress = snapshot.progress_for(goal.id)
        with st.container(border=True):
            title = goal.name if goal.is_active else f"{goal.name} (inactive)"
            st.markdown(f"**{title}** — {format_date_range(goal.start_date, goal.end_date)}")
            left = days_remaining(goal, date.today())
            st.caption(
                ", ".join(work_type_names(goal.work_types, snapshot.work_types))
                + f" · {left} day{'' if left == 1 else 's'} remaining"
            )
            if progress is not None:
                st.progress(
                    progress_bar_fraction(goal, progress),
                    text=(
                        f"{format_percentage(progress.current_percentage)} / "
                        f"{goal.target_percentage}% · "
                        f"{progress.completed_days}/{progress.total_days} days"
                    ),
                )
            col_a, col_b = st.columns(2)
            if goal.is_active and col_a.button("Deactivate", key=f"deact_{goal.id}"):
                _set_snapshot(deactivate_goal(snapshot, goal.id))
                st.rerun()
            if col_b.button("Delete", key=f"del_{goal.id}"):
                _set_snapshot(delete_goal(snapshot, GoalDeleted(goal.id)))
                st.rerun()

    if snapshot.goals:
        st.dataframe(progress_frame(snapshot), hide_index=True)

    st.subheader("New goal")
    level = st.selectbox(
        "Student level", list(StudentLevel), format_func=lambda lv: LEVEL_LABELS[lv]
    )
    with st.form("new_goal"):
        name = st.text_input("Name")
        description = st.text_area("Description")
        cadence = st.selectbox(
            "Cadence", list(Cadence), index=1, format_func=lambda c: CADENCE_LABELS[c]
        )
        target = st.slider("Target %", 50, 100, default_target_for(level), step=5)
        chosen = st.multiselect(
            "Work types",
            [wt.id for wt in snapshot.work_types],
            format_func=lambda wt_id: snapshot.work_type(wt_id).name,
        )
        start = st.date_input("Start", value=date.today())
        end = st.date_input("End", value=date.today() + timedelta(days=6))
        if st.form_submit_button("Create goal"):
            try:
                goal = Goal(
                    id=f"g_{uuid.uuid4().hex[:8]}",
                    name=name,
                    description=description,
                    cadence=cadence,
                    work_types=tuple(chosen),
                    target_percentage=target,
                    student_level=level,
                    start_date=start,
                    end_date=end,
                )
            except InvalidEntityError as e:
                st.error(str(e))
            else:
                _set_snapshot(register_goal(snapshot, goal))
                st.rerun()

# ---------------------------------------------------------------------------
# Weekly balance
# ---------------------------------------------------------------------------

with tab_week:
    plan = current_week_plan(snapshot, date.today())
    if plan is None and st.button("Start a plan for this week"):
        fresh = WeekPlan.for_week(f"wp_{uuid.uuid4().hex[:8]}", date.today())
        _set_snapshot(replace_week_plan(snapshot, fresh))
        st.rerun()
    if plan is None and snapshot.week_plans:
        plan = snapshot.week_plans[0]

    if plan is None:
        st.info("No week plan available.")
    else:
        st.subheader(plan.name)
        st.caption(format_date_range(plan.start_date, plan.end_date))

        cols = st.columns(7)
        for col, day_name, day in zip(cols, DAY_NAMES, plan.days):
            col.markdown(f"**{day_name}** {day.date:%d/%m}")
            for wt_id in sorted(day.work_types):
                work_type = snapshot.work_type(wt_id)
                if work_type is None:
                    continue
                color = CATEGORY_COLORS.get(work_type.category, "#CCCCCC")
                col.markdown(
                    f'<div style="background:{color};color:white;padding:4px 8px;'
                    f'border-radius:4px;margin:2px 0;">{work_type.name}</div>',
                    unsafe_allow_html=True,
                )

        with st.expander("Edit week"):
            day_index = st.selectbox(
                "Day", range(7), format_func=lambda i: f"{DAY_NAMES[i]} {plan.days[i].date:%d/%m}"
            )
            wt_id = st.selectbox(
                "Work type",
                [wt.id for wt in snapshot.work_types],
                format_func=lambda i: snapshot.work_type(i).name,
            )
            c1, c2, c3 = st.columns(3)
            edited = None
            if wt_id is not None and c1.button("Assign"):
                edited = plan.with_work_type(day_index, wt_id)
            if wt_id is not None and c2.button("Unassign"):
                edited = plan.without_work_type_on(day_index, wt_id)
            done = plan.days[day_index].is_completed
            if c3.button("Reopen day" if done else "Mark day completed"):
                edited = plan.with_day_completed(day_index, not done)
            if edited is not None:
                _set_snapshot(replace_week_plan(snapshot, edited))
                st.rerun()

        if st.button("Duplicate to next week"):
            copy = plan.duplicate(f"wp_{uuid.uuid4().hex[:8]}", plan.start_date + timedelta(days=7))
            _set_snapshot(replace_week_plan(snapshot, copy))
            st.rerun()

        report = engine.analyze_balance(plan, snapshot.work_types)
        st.divider()
        st.dataframe(distribution_frame(report), hide_index=True)

        if report.is_balanced:
            st.success("The week is balanced.")
        for issue in report.issues:
            if issue.kind == BalanceIssueKind.OVER_CONCENTRATION:
                st.warning(issue.message)
            else:
                st.info(issue.message)

# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

with tab_recs:
    active_goals = snapshot.active_goals
    if not active_goals:
        st.info("Create an active goal to get recommendations.")
    else:
        goal_id = st.selectbox(
            "Goal",
            [g.id for g in active_goals],
            format_func=lambda gid: snapshot.goal(gid).name,
        )
        min_confidence = st.slider("Minimum confidence", 0, 100, 0, step=5)
        search = st.text_input("Search")

        recommendations, trace = engine.recommend_with_trace(
            snapshot.goal(goal_id),
            snapshot.work_types,
            snapshot.completed_work_type_ids,
            snapshot.blocks,
        )
        shown = filter_recommendations(recommendations, min_confidence, search)
        st.caption(f"{len(shown)} of {len(recommendations)} recommendations shown")

        for confidence, tier in engine.ranker.group_by_tier(shown).items():
            label, color = confidence_band(confidence)
            st.markdown(
                f'<span style="color:{color};font-weight:bold;">{confidence}% '
                f"({label})</span>",
                unsafe_allow_html=True,
            )
            for rec in tier:
                kind = "Block" if rec.kind == RecommendationKind.BLOCK else "Work type"
                st.markdown(
                    f"- {kind}: **{rec.name}**  \n  <small>{rec.reason}</small>",
                    unsafe_allow_html=True,
                )

        with st.expander("Recommendation trace"):
            for result in trace.pass_results:
                icon = "🟢" if result.status == PassStatus.FIRED else "⚪"
                st.markdown(f"{icon} **{result.pass_id}** — {result.explanation}")
            st.markdown(f"**Ranking:** {trace.ranking_notes}")

# ---------------------------------------------------------------------------
# Work types
# ---------------------------------------------------------------------------

with tab_types:
    st.subheader("Catalog")
    for wt in snapshot.work_types:
        c1, c2 = st.columns([4, 1])
        c1.markdown(f"**{wt.name}** · _{wt.category.name.lower()}_ — {wt.description}")
        if c2.button("Delete", key=f"del_wt_{wt.id}"):
            _set_snapshot(remove_work_type(snapshot, WorkTypeRemoved(wt.id)))
            st.rerun()

    st.subheader("Presets")
    for i, preset in enumerate(PREDEFINED_WORK_TYPES):
        if st.button(f"Add {preset.name}", key=f"preset_{i}"):
            new_id = f"wt_{preset.name.lower().replace(' ', '_')}"
            _set_snapshot(add_work_type_preset(snapshot, preset, new_id))
            st.rerun()

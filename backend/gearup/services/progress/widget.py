"""
Widget read path - builds the home-screen widget state
Read-only: looks each habit up by (habit_id, today) and never writes
"""
from datetime import datetime
from typing import Optional

from gearup.models.summary import WidgetState
from gearup.storage import RecordStore
from gearup.utils.timezone import today_key
from .aggregator import daily_summary, motivational_tier, progress_color


def build_widget_state(store: RecordStore, now: Optional[datetime] = None) -> WidgetState:
    """
    Compute what the widget renders for today

    Args:
        store: Record store to read from
        now: Clock override

    Returns:
        WidgetState with today's summary, status line, message and ring color
    """
    today = today_key(now)
    habits = store.get_habits()
    # One snapshot of the progress document, indexed by (habit_id, date)
    progress_index = {(p.habit_id, p.date): p for p in store.get_habit_progress()}
    progress_by_habit = {habit.id: progress_index.get((habit.id, today)) for habit in habits}

    summary = daily_summary(habits, progress_by_habit)
    return WidgetState(
        date=today,
        summary=summary,
        status_text=f"{summary.completed_count} of {summary.total_count} habits completed",
        motivational_message=motivational_tier(summary.percentage),
        progress_color=progress_color(summary.percentage)
    )

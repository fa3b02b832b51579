"""
Progress Aggregator - whole-day completion metrics
Pure and deterministic: the habits screen and the home-screen widget both
derive their numbers from these functions over the same snapshot
"""
from typing import Dict, List, Optional

from gearup.core.constants import (
    MOTIVATIONAL_TIERS,
    MOTIVATIONAL_FALLBACK,
    PROGRESS_COLORS,
    PROGRESS_COLOR_FALLBACK,
)
from gearup.models.habit import Habit, HabitProgress
from gearup.models.summary import DailySummary


def daily_summary(habits: List[Habit], progress_by_habit_id: Dict[str, Optional[HabitProgress]]) -> DailySummary:
    """
    Count completed habits for one day

    Args:
        habits: All habits
        progress_by_habit_id: That day's progress keyed by habit id (missing = not started)

    Returns:
        DailySummary with percentage = floor(completed * 100 / total), 0 with no habits
    """
    total = len(habits)
    completed = 0
    for habit in habits:
        progress = progress_by_habit_id.get(habit.id)
        if progress is not None and progress.is_completed:
            completed += 1

    percentage = completed * 100 // total if total > 0 else 0
    return DailySummary(completed_count=completed, total_count=total, percentage=percentage)


def motivational_tier(percentage: int) -> str:
    """Message of the highest tier whose threshold is <= percentage"""
    for threshold, message in MOTIVATIONAL_TIERS:
        if percentage >= threshold:
            return message
    return MOTIVATIONAL_FALLBACK


def progress_color(percentage: int) -> str:
    """Hex color for the widget progress ring"""
    for threshold, color in PROGRESS_COLORS:
        if percentage >= threshold:
            return color
    return PROGRESS_COLOR_FALLBACK

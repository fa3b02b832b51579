"""
Habit progress arithmetic
Pure functions over Habit/HabitProgress snapshots, no store access
"""
from datetime import datetime
from typing import Optional

from gearup.models.habit import Habit, HabitProgress
from gearup.utils.timezone import get_local_now, format_timestamp, today_key


def progress_percentage(progress: Optional[HabitProgress], target_value: int) -> int:
    """
    Completion percentage of one habit for one day

    Args:
        progress: Progress record, None counts as zero
        target_value: The habit's target

    Returns:
        floor(current / target * 100) clamped to [0, 100]; 0 if target <= 0
    """
    if progress is None:
        return 0
    return progress.progress_percentage(target_value)


def increment_habit(habit: Habit, existing: Optional[HabitProgress],
                    date: Optional[str] = None, now: Optional[datetime] = None) -> HabitProgress:
    """
    Add one unit of progress to a habit for a day.

    The value saturates at the habit's target. completed_at is stamped when
    the record first becomes complete and stays absent while incomplete.

    Args:
        habit: The habit being advanced
        existing: Current progress for (habit.id, date), or None
        date: Day key, defaults to today (ignored when existing is given)
        now: Clock used for completed_at, defaults to local now

    Returns:
        A new HabitProgress; the input is not modified
    """
    now = now or get_local_now()
    if existing is None:
        existing = HabitProgress(habit_id=habit.id, date=date or today_key(now))

    new_value = min(existing.current_value + 1, habit.target_value)
    is_completed = new_value >= habit.target_value

    if not is_completed:
        completed_at = None
    elif existing.is_completed and existing.completed_at:
        completed_at = existing.completed_at
    else:
        completed_at = format_timestamp(now)

    return existing.model_copy(update={
        "current_value": new_value,
        "is_completed": is_completed,
        "completed_at": completed_at
    })

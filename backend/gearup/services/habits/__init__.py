"""
Habits module - Habit CRUD and daily progress
"""
from . import progress
from . import service

from .progress import progress_percentage, increment_habit
from .service import (
    ensure_defaults_seeded,
    list_habits,
    get_habit,
    add_habit,
    update_habit,
    delete_habit,
    mark_habit_progress,
    find_water_habit,
    mark_water_habit,
    get_today_habits,
    reset_habits,
    format_progress_share
)

__all__ = [
    'progress',
    'service',
    'progress_percentage',
    'increment_habit',
    'ensure_defaults_seeded',
    'list_habits',
    'get_habit',
    'add_habit',
    'update_habit',
    'delete_habit',
    'mark_habit_progress',
    'find_water_habit',
    'mark_water_habit',
    'get_today_habits',
    'reset_habits',
    'format_progress_share'
]

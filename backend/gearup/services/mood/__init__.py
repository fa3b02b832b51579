"""
Mood module - mood journal entries and display helpers
"""
from .service import (
    display_time,
    display_date,
    list_mood_entries,
    get_todays_mood,
    get_mood_entries_for_range,
    save_mood,
    clear_moods,
    format_mood_summary,
    format_mood_share
)

__all__ = [
    'display_time',
    'display_date',
    'list_mood_entries',
    'get_todays_mood',
    'get_mood_entries_for_range',
    'save_mood',
    'clear_moods',
    'format_mood_summary',
    'format_mood_share'
]

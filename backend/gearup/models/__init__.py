"""
Pydantic models for the application
"""
from gearup.models.habit import (
    Habit,
    HabitProgress,
    AddHabitRequest,
    UpdateHabitRequest
)
from gearup.models.mood import MoodType, MoodEntry, SaveMoodRequest
from gearup.models.settings import ReminderSettings, UpdateReminderSettingsRequest
from gearup.models.summary import DailySummary, WidgetState

__all__ = [
    "Habit",
    "HabitProgress",
    "AddHabitRequest",
    "UpdateHabitRequest",
    "MoodType",
    "MoodEntry",
    "SaveMoodRequest",
    "ReminderSettings",
    "UpdateReminderSettingsRequest",
    "DailySummary",
    "WidgetState"
]

"""
Record Store - Centralized persistence layer
Habits, habit progress, mood entries and the reminder settings record,
each stored as one JSON document under a stable key
"""
import json
import logging
import threading
import uuid
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from gearup.core.constants import (
    KEY_HABITS,
    KEY_HABIT_PROGRESS,
    KEY_MOOD_ENTRIES,
    KEY_SETTINGS,
    DEFAULT_HABITS,
)
from gearup.core.exceptions import InvalidReminderSettingsError
from gearup.models.habit import Habit, HabitProgress
from gearup.models.mood import MoodEntry
from gearup.models.settings import ReminderSettings
from .backend import KeyValueBackend

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Default habits get name-derived ids so repeated reads agree before they are persisted
DEFAULT_HABIT_NAMESPACE = uuid.UUID("6f1c2a8e-3b7d-4c59-9e0a-2d4f8b61c7a3")


def default_habits() -> List[Habit]:
    """Seed habits used only while the habit collection has never been saved"""
    return [
        Habit(
            id=str(uuid.uuid5(DEFAULT_HABIT_NAMESPACE, name)),
            name=name,
            description=description,
            target_value=target,
            unit=unit,
            icon=icon
        )
        for name, description, target, unit, icon in DEFAULT_HABITS
    ]


class RecordStore:
    """
    Whole-collection key-value store.

    Every read re-fetches the stored document and every save replaces it.
    Read-modify-write helpers hold a per-collection lock, since reminder
    jobs run on a background thread next to request handlers.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend
        self._locks = {
            KEY_HABITS: threading.RLock(),
            KEY_HABIT_PROGRESS: threading.RLock(),
            KEY_MOOD_ENTRIES: threading.RLock(),
            KEY_SETTINGS: threading.RLock(),
        }

    def lock(self, key: str) -> threading.RLock:
        """Lock guarding read-modify-write cycles on one collection"""
        return self._locks[key]

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def _load_list(self, key: str, model: Type[T]) -> Optional[List[T]]:
        """
        Load a collection document. Returns None when the key is absent or
        the stored blob is corrupt, so callers substitute their default.
        """
        raw = self.backend.read(key)
        if raw is None:
            return None
        try:
            return TypeAdapter(List[model]).validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Corrupt '{key}' document, falling back to default: {e}")
            return None

    def _load_items(self, key: str, model: Type[T]) -> Optional[List[T]]:
        """
        Load a collection item by item. Items failing validation are dropped
        with a warning and the rest are kept; only an unparsable document
        falls back to the default.
        """
        raw = self.backend.read(key)
        if raw is None:
            return None
        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Corrupt '{key}' document, falling back to default: {e}")
            return None
        if not isinstance(items, list):
            logger.warning(f"Corrupt '{key}' document, expected a list")
            return None

        valid = []
        for index, item in enumerate(items):
            try:
                valid.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Dropping invalid '{key}' item #{index}: {e}")
        return valid

    def _save_list(self, key: str, items: List[BaseModel]) -> None:
        payload = json.dumps([item.model_dump() for item in items], ensure_ascii=False)
        self.backend.write(key, payload)

    # ========================================================================
    # HABITS
    # ========================================================================

    def get_habits(self) -> List[Habit]:
        """All habits, or the default seed set if the collection was never saved"""
        habits = self._load_list(KEY_HABITS, Habit)
        return habits if habits is not None else default_habits()

    def save_habits(self, habits: List[Habit]) -> None:
        with self.lock(KEY_HABITS):
            self._save_list(KEY_HABITS, habits)

    def clear_all_habits(self) -> None:
        """Remove habits and progress; the next read returns the defaults again"""
        with self.lock(KEY_HABITS), self.lock(KEY_HABIT_PROGRESS):
            self.backend.delete(KEY_HABITS)
            self.backend.delete(KEY_HABIT_PROGRESS)

    # ========================================================================
    # HABIT PROGRESS
    # ========================================================================

    def get_habit_progress(self) -> List[HabitProgress]:
        progress = self._load_list(KEY_HABIT_PROGRESS, HabitProgress)
        return progress if progress is not None else []

    def save_habit_progress(self, progress: List[HabitProgress]) -> None:
        with self.lock(KEY_HABIT_PROGRESS):
            self._save_list(KEY_HABIT_PROGRESS, progress)

    def get_habit_progress_for_date(self, habit_id: str, date: str) -> Optional[HabitProgress]:
        """Progress for the (habit_id, date) natural key, or None"""
        for progress in self.get_habit_progress():
            if progress.habit_id == habit_id and progress.date == date:
                return progress
        return None

    def update_habit_progress(self, habit_progress: HabitProgress) -> None:
        """Upsert on (habit_id, date)"""
        with self.lock(KEY_HABIT_PROGRESS):
            all_progress = self.get_habit_progress()
            for index, existing in enumerate(all_progress):
                if existing.habit_id == habit_progress.habit_id and existing.date == habit_progress.date:
                    all_progress[index] = habit_progress
                    break
            else:
                all_progress.append(habit_progress)
            self.save_habit_progress(all_progress)

    def delete_habit_progress(self, habit_id: str) -> int:
        """Remove every progress record of a habit, for all dates"""
        with self.lock(KEY_HABIT_PROGRESS):
            all_progress = self.get_habit_progress()
            remaining = [p for p in all_progress if p.habit_id != habit_id]
            removed = len(all_progress) - len(remaining)
            if removed:
                self.save_habit_progress(remaining)
            return removed

    def clear_habit_progress(self) -> None:
        with self.lock(KEY_HABIT_PROGRESS):
            self.backend.delete(KEY_HABIT_PROGRESS)

    # ========================================================================
    # MOOD ENTRIES
    # ========================================================================

    def get_mood_entries(self) -> List[MoodEntry]:
        """Mood entries, newest first by insertion"""
        entries = self._load_items(KEY_MOOD_ENTRIES, MoodEntry)
        return entries if entries is not None else []

    def save_mood_entries(self, entries: List[MoodEntry]) -> None:
        with self.lock(KEY_MOOD_ENTRIES):
            self._save_list(KEY_MOOD_ENTRIES, entries)

    def add_mood_entry(self, entry: MoodEntry) -> None:
        with self.lock(KEY_MOOD_ENTRIES):
            entries = self.get_mood_entries()
            entries.insert(0, entry)
            self.save_mood_entries(entries)

    def get_todays_mood_entry(self, today: str) -> Optional[MoodEntry]:
        """First stored entry whose date matches"""
        for entry in self.get_mood_entries():
            if entry.date == today:
                return entry
        return None

    def get_mood_entries_for_date_range(self, start_date: str, end_date: str) -> List[MoodEntry]:
        """Entries with start_date <= date <= end_date (canonical string comparison)"""
        return [e for e in self.get_mood_entries() if start_date <= e.date <= end_date]

    def clear_mood_entries(self) -> None:
        with self.lock(KEY_MOOD_ENTRIES):
            self.backend.delete(KEY_MOOD_ENTRIES)

    # ========================================================================
    # SETTINGS
    # ========================================================================

    def get_settings(self) -> ReminderSettings:
        raw = self.backend.read(KEY_SETTINGS)
        if raw is None:
            return ReminderSettings()
        try:
            return ReminderSettings.model_validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Corrupt '{KEY_SETTINGS}' document, using defaults: {e}")
            return ReminderSettings()

    def save_settings(self, reminder_settings: ReminderSettings) -> None:
        with self.lock(KEY_SETTINGS):
            self.backend.write(KEY_SETTINGS, reminder_settings.model_dump_json())

    def update_settings(self, **changes) -> ReminderSettings:
        with self.lock(KEY_SETTINGS):
            current = self.get_settings().model_dump()
            current.update(changes)
            # Re-validate so range constraints still hold after the change
            try:
                updated = ReminderSettings.model_validate(current)
            except ValidationError as e:
                raise InvalidReminderSettingsError(f"Invalid reminder settings: {e}")
            self.save_settings(updated)
            return updated

    def is_reminders_enabled(self) -> bool:
        return self.get_settings().enabled

    def set_reminders_enabled(self, enabled: bool) -> None:
        self.update_settings(enabled=enabled)

    def get_reminder_interval(self) -> int:
        return self.get_settings().interval_minutes

    def set_reminder_interval(self, interval_minutes: int) -> None:
        self.update_settings(interval_minutes=interval_minutes)

    def get_reminder_start_time(self) -> int:
        return self.get_settings().start_minute

    def set_reminder_start_time(self, minutes: int) -> None:
        self.update_settings(start_minute=minutes)

    def get_reminder_end_time(self) -> int:
        return self.get_settings().end_minute

    def set_reminder_end_time(self, minutes: int) -> None:
        self.update_settings(end_minute=minutes)

    def is_first_launch(self) -> bool:
        return self.get_settings().first_launch

    def set_first_launch_complete(self) -> None:
        self.update_settings(first_launch=False)

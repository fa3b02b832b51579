"""
Record store tests - defaults, corrupt-blob recovery, upserts
"""
import json

import pytest

from gearup.core.constants import KEY_HABITS, KEY_HABIT_PROGRESS, KEY_MOOD_ENTRIES, KEY_SETTINGS
from gearup.core.exceptions import InvalidReminderSettingsError
from gearup.models.habit import Habit, HabitProgress
from gearup.models.mood import MoodEntry
from gearup.models.settings import ReminderSettings
from gearup.storage import JsonFileBackend, MemoryBackend, RecordStore


def test_default_habits_when_never_saved(store):
    habits = store.get_habits()

    assert [h.name for h in habits] == ["Drink Water", "Exercise", "Meditation", "Reading", "Sleep"]
    assert [h.target_value for h in habits] == [8, 30, 15, 30, 8]
    assert [h.unit for h in habits] == ["glasses", "minutes", "minutes", "minutes", "hours"]
    assert habits[0].icon == "💧"


def test_default_habit_ids_are_stable_across_reads(store):
    assert [h.id for h in store.get_habits()] == [h.id for h in store.get_habits()]


def test_saved_empty_habit_list_is_not_replaced_by_defaults(store):
    store.save_habits([])

    assert store.get_habits() == []


def test_empty_collections_and_default_settings(store):
    assert store.get_habit_progress() == []
    assert store.get_mood_entries() == []

    settings = store.get_settings()
    assert settings.enabled is True
    assert settings.interval_minutes == 60
    assert settings.start_minute == 480
    assert settings.end_minute == 1320
    assert settings.first_launch is True


@pytest.mark.parametrize("blob", ["not json", "{\"a\": 1}", "[{\"name\": \"\"}]", "[1, 2]"])
def test_corrupt_habits_fall_back_to_defaults(blob):
    store = RecordStore(MemoryBackend({KEY_HABITS: blob}))

    assert len(store.get_habits()) == 5


def test_corrupt_collections_fall_back_to_empty():
    store = RecordStore(MemoryBackend({
        KEY_HABIT_PROGRESS: "[{\"habit_id\": 3",
        KEY_MOOD_ENTRIES: "null",
    }))

    assert store.get_habit_progress() == []
    assert store.get_mood_entries() == []


def test_corrupt_settings_fall_back_to_defaults():
    store = RecordStore(MemoryBackend({KEY_SETTINGS: "{\"interval_minutes\": -5}"}))

    assert store.get_settings() == ReminderSettings()


def test_update_habit_progress_upserts_on_natural_key(store):
    store.update_habit_progress(HabitProgress(habit_id="h1", date="2026-05-12", current_value=1))
    store.update_habit_progress(HabitProgress(habit_id="h1", date="2026-05-12", current_value=2))
    store.update_habit_progress(HabitProgress(habit_id="h1", date="2026-05-13", current_value=1))

    all_progress = store.get_habit_progress()
    assert len(all_progress) == 2
    assert store.get_habit_progress_for_date("h1", "2026-05-12").current_value == 2
    assert store.get_habit_progress_for_date("h2", "2026-05-12") is None


def test_mood_entries_are_prepended_and_first_match_wins(store):
    first = MoodEntry(emoji="😊", mood_name="Happy", date="2026-05-12", timestamp="2026-05-12 08:00:00")
    second = MoodEntry(emoji="😢", mood_name="Sad", date="2026-05-12", timestamp="2026-05-12 20:00:00")
    store.add_mood_entry(first)
    store.add_mood_entry(second)

    assert [e.id for e in store.get_mood_entries()] == [second.id, first.id]
    assert store.get_todays_mood_entry("2026-05-12").id == second.id


def test_mood_range_is_inclusive(store):
    for day in ("2026-05-01", "2026-05-05", "2026-05-10"):
        store.add_mood_entry(MoodEntry(emoji="😐", mood_name="Neutral", date=day, timestamp=f"{day} 12:00:00"))

    dates = sorted(e.date for e in store.get_mood_entries_for_date_range("2026-05-01", "2026-05-05"))
    assert dates == ["2026-05-01", "2026-05-05"]


def test_scalar_settings_accessors(store):
    store.set_reminders_enabled(False)
    store.set_reminder_interval(90)
    store.set_reminder_start_time(420)
    store.set_reminder_end_time(1200)
    store.set_first_launch_complete()

    assert store.is_reminders_enabled() is False
    assert store.get_reminder_interval() == 90
    assert store.get_reminder_start_time() == 420
    assert store.get_reminder_end_time() == 1200
    assert store.is_first_launch() is False


def test_invalid_settings_value_is_rejected(store):
    with pytest.raises(InvalidReminderSettingsError):
        store.set_reminder_interval(0)
    assert store.get_reminder_interval() == 60


def test_clear_all_habits_restores_defaults(store):
    store.save_habits([Habit(name="Stretch", target_value=1, unit="times")])
    store.update_habit_progress(HabitProgress(habit_id="x", date="2026-05-12"))

    store.clear_all_habits()

    assert len(store.get_habits()) == 5
    assert store.get_habit_progress() == []


def test_json_file_backend_persists_and_recovers(tmp_path):
    store = RecordStore(JsonFileBackend(str(tmp_path / "data")))
    habit = Habit(name="Stretch", target_value=3, unit="sets", icon="🤸")
    store.save_habits([habit])

    reopened = RecordStore(JsonFileBackend(str(tmp_path / "data")))
    assert reopened.get_habits() == [habit]

    (tmp_path / "data" / "habits.json").write_text("{broken", encoding="utf-8")
    assert len(reopened.get_habits()) == 5


def test_json_file_backend_leaves_no_temp_files(tmp_path):
    backend = JsonFileBackend(str(tmp_path))
    backend.write("settings", "{}")
    backend.write("settings", "{\"enabled\": false}")

    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]
    backend.delete("settings")
    backend.delete("settings")
    assert backend.read("settings") is None


def test_clear_habit_progress_keeps_habits(store):
    store.save_habits([Habit(id="h1", name="Walk", target_value=1, unit="km")])
    store.update_habit_progress(HabitProgress(habit_id="h1", date="2026-05-12"))

    store.clear_habit_progress()

    assert store.get_habit_progress() == []
    assert [h.id for h in store.get_habits()] == ["h1"]


def test_invalid_mood_entry_does_not_discard_the_rest():
    store = RecordStore(MemoryBackend({KEY_MOOD_ENTRIES: json.dumps([
        {"id": "b", "emoji": "😐", "mood_name": "Neutral", "timestamp": None, "date": "2026-05-10"},
        {"id": "c", "mood_name": "Sad"},
        {"id": "a", "emoji": "😊", "mood_name": "Happy",
         "timestamp": "2026-05-11 08:00:00", "date": "2026-05-11"},
    ])}))

    entries = store.get_mood_entries()

    assert [e.id for e in entries] == ["b", "a"]
    assert entries[0].timestamp == ""
    assert entries[1].timestamp == "2026-05-11 08:00:00"

"""
Mood journal tests - taxonomy, today's-entry overwrite, display helpers
"""
import json

import pytest

from gearup.core.constants import KEY_MOOD_ENTRIES
from gearup.core.exceptions import InvalidMoodDataError
from gearup.models.mood import MoodEntry, MoodType
from gearup.services import mood as mood_service
from gearup.storage import MemoryBackend, RecordStore

from conftest import local_time


def test_taxonomy_has_seven_moods():
    moods = MoodType.all_moods()

    assert len(moods) == 7
    assert [m.display_name for m in moods] == [
        "Very Happy", "Happy", "Excited", "Neutral", "Tired", "Sad", "Angry"
    ]
    assert len({m.emoji for m in moods}) == 7


def test_from_emoji_exact_match():
    assert MoodType.from_emoji("😊") is MoodType.HAPPY
    assert MoodType.from_emoji("😡") is MoodType.ANGRY
    assert MoodType.from_emoji("🙂") is None
    assert MoodType.from_emoji("") is None


def test_save_mood_then_overwrite_same_day(store, now):
    created = mood_service.save_mood(store, MoodType.HAPPY, "Good start", now=now)
    assert created["updated"] is False
    assert len(store.get_mood_entries()) == 1

    later = local_time(2026, 5, 12, 21, 15)
    updated = mood_service.save_mood(store, MoodType.TIRED, "Long day", now=later)

    entries = store.get_mood_entries()
    assert updated["updated"] is True
    assert len(entries) == 1
    assert entries[0].id == created["data"].id
    assert entries[0].date == "2026-05-12"
    assert (entries[0].emoji, entries[0].mood_name, entries[0].note) == ("😴", "Tired", "Long day")
    assert entries[0].timestamp == "2026-05-12 21:15:00"


def test_new_day_creates_new_entry_at_front(store, now):
    mood_service.save_mood(store, MoodType.SAD, now=now)
    tomorrow = local_time(2026, 5, 13, 8, 0)
    mood_service.save_mood(store, MoodType.EXCITED, now=tomorrow)

    entries = store.get_mood_entries()
    assert [e.date for e in entries] == ["2026-05-13", "2026-05-12"]
    assert mood_service.get_todays_mood(store, now=tomorrow).mood_name == "Excited"


def test_save_without_mood_is_rejected(store, now):
    with pytest.raises(InvalidMoodDataError):
        mood_service.save_mood(store, None, "note only", now=now)
    assert store.get_mood_entries() == []


def test_clear_moods(store, now):
    mood_service.save_mood(store, MoodType.NEUTRAL, now=now)
    mood_service.clear_moods(store)
    assert store.get_mood_entries() == []


def test_display_time():
    assert mood_service.display_time("2026-05-12 07:05:09") == "07:05"
    assert mood_service.display_time("12/05/2026 7pm") == "Unknown"
    assert mood_service.display_time(None) == "Unknown"


def test_display_date_relative_labels(now):
    assert mood_service.display_date("2026-05-12 00:00:00", now) == "Today"
    assert mood_service.display_date("2026-05-11 23:59:59", now) == "Yesterday"
    assert mood_service.display_date("2026-05-10 12:00:00", now) == "May 10"
    assert mood_service.display_date("garbage", now) == "Unknown"


def test_display_date_just_after_midnight():
    now = local_time(2026, 5, 12, 0, 1)
    assert mood_service.display_date("2026-05-11 23:59:00", now) == "Yesterday"


def test_display_date_across_dst_change():
    # US clocks moved forward on 2026-03-08, so that day had 23 hours
    now = local_time(2026, 3, 9, 0, 30)
    assert mood_service.display_date("2026-03-08 00:10:00", now) == "Yesterday"
    assert mood_service.display_date("2026-03-07 23:50:00", now) == "Mar 07"


def test_display_date_across_year_boundary():
    now = local_time(2027, 1, 1, 9, 0)
    assert mood_service.display_date("2026-12-31 22:00:00", now) == "Yesterday"


def test_mood_summary_uses_recent_entries(store):
    for day in range(1, 10):
        stamp = f"2026-05-{day:02d} 10:00:00"
        store.add_mood_entry(MoodEntry(emoji="😊", mood_name="Happy", note=f"day {day}",
                                       timestamp=stamp, date=stamp[:10]))

    summary = mood_service.format_mood_summary(store, now=local_time(2026, 5, 9, 12, 0))

    assert summary.startswith("My Mood Summary")
    assert "😊 Today - day 9" in summary
    assert "😊 Yesterday - day 8" in summary
    assert "day 3" in summary
    assert "day 2" not in summary


def test_mood_summary_empty(store):
    assert mood_service.format_mood_summary(store) is None


def test_mood_share_text():
    entry = MoodEntry(emoji="🤩", mood_name="Excited", note="Trip booked")
    text = mood_service.format_mood_share(entry)

    assert text.startswith("My mood today: 🤩 Excited")
    assert "\"Trip booked\"" in text


def _store_with_entries(entries):
    return RecordStore(MemoryBackend({KEY_MOOD_ENTRIES: json.dumps(entries)}))


def test_save_keeps_history_next_to_a_broken_entry(now):
    store = _store_with_entries([
        {"id": "b", "emoji": "😐", "mood_name": "Neutral", "timestamp": None, "date": "2026-05-10"},
        {"id": "a", "emoji": "😊", "mood_name": "Happy",
         "timestamp": "2026-05-11 08:00:00", "date": "2026-05-11"},
    ])

    listed = mood_service.list_mood_entries(store)
    assert [e.id for e in listed] == ["b", "a"]
    assert mood_service.display_date(listed[0].timestamp, now) == "Unknown"
    assert mood_service.display_time(listed[0].timestamp) == "Unknown"

    result = mood_service.save_mood(store, MoodType.HAPPY, now=now)

    assert [e.id for e in store.get_mood_entries()] == [result["data"].id, "b", "a"]


def test_entry_without_timestamp_is_not_treated_as_today(now):
    store = _store_with_entries([{"id": "old", "emoji": "😐", "mood_name": "Neutral"}])

    old = store.get_mood_entries()[0]
    assert old.timestamp == ""
    assert old.date == ""
    assert mood_service.display_date(old.timestamp, now) == "Unknown"
    assert mood_service.get_todays_mood(store, now=now) is None

    result = mood_service.save_mood(store, MoodType.SAD, now=now)

    assert result["updated"] is False
    entries = store.get_mood_entries()
    assert [e.id for e in entries] == [result["data"].id, "old"]
    assert entries[1].emoji == "😐"

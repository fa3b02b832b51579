"""
Mood Service - mood journal entries and their display formatting
"""
from datetime import datetime, timedelta
from typing import Optional, Dict, Any, List
import logging

from gearup.core.constants import (
    KEY_MOOD_ENTRIES,
    TIMESTAMP_FORMAT,
    DISPLAY_TIME_FORMAT,
    DISPLAY_DATE_FORMAT,
    UNKNOWN_DISPLAY,
    MOOD_SUMMARY_ENTRIES,
)
from gearup.core.exceptions import InvalidMoodDataError
from gearup.models.mood import MoodEntry, MoodType
from gearup.storage import RecordStore
from gearup.utils.timezone import get_local_now, format_timestamp, today_key

logger = logging.getLogger(__name__)


# ============================================================================
# DISPLAY FORMATTING
# ============================================================================

def _parse_timestamp(timestamp: str) -> datetime:
    return datetime.strptime(timestamp, TIMESTAMP_FORMAT)


def display_time(timestamp: str) -> str:
    """'HH:MM' of a stored timestamp, or 'Unknown' if it cannot be parsed"""
    try:
        return _parse_timestamp(timestamp).strftime(DISPLAY_TIME_FORMAT)
    except (TypeError, ValueError):
        return UNKNOWN_DISPLAY


def display_date(timestamp: str, now: Optional[datetime] = None) -> str:
    """
    Relative day label for a stored timestamp

    Compares calendar dates, not elapsed hours, so an entry from 23:59 is
    'Yesterday' one minute after midnight.

    Returns:
        'Today', 'Yesterday', 'MMM dd' for older entries, or 'Unknown'
    """
    try:
        entry_date = _parse_timestamp(timestamp).date()
    except (TypeError, ValueError):
        return UNKNOWN_DISPLAY

    today = (now or get_local_now()).date()
    if entry_date == today:
        return "Today"
    if entry_date == today - timedelta(days=1):
        return "Yesterday"
    return entry_date.strftime(DISPLAY_DATE_FORMAT)


# ============================================================================
# ENTRIES
# ============================================================================

def list_mood_entries(store: RecordStore) -> List[MoodEntry]:
    return store.get_mood_entries()


def get_todays_mood(store: RecordStore, now: Optional[datetime] = None) -> Optional[MoodEntry]:
    return store.get_todays_mood_entry(today_key(now))


def get_mood_entries_for_range(store: RecordStore, start_date: str, end_date: str) -> List[MoodEntry]:
    return store.get_mood_entries_for_date_range(start_date, end_date)


def save_mood(store: RecordStore, mood: Optional[MoodType], note: str = "",
              now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Save today's mood. If an entry for today already exists it is
    overwritten in place (same id, same position) instead of adding a new one.

    Args:
        store: Record store
        mood: Selected mood
        note: Optional note
        now: Clock override

    Returns:
        Dict with status, message, whether an entry was updated, and the entry

    Raises:
        InvalidMoodDataError: If no mood was selected
    """
    if mood is None:
        raise InvalidMoodDataError("Please select a mood")

    now = now or get_local_now()
    today = today_key(now)
    note = (note or "").strip()

    with store.lock(KEY_MOOD_ENTRIES):
        entries = store.get_mood_entries()
        existing_index = next((i for i, e in enumerate(entries) if e.date == today), None)

        if existing_index is not None:
            existing = entries[existing_index]
            entry = existing.model_copy(update={
                "emoji": mood.emoji,
                "mood_name": mood.display_name,
                "note": note,
                "timestamp": format_timestamp(now)
            })
            entries[existing_index] = entry
            store.save_mood_entries(entries)
            updated = True
        else:
            entry = MoodEntry(
                emoji=mood.emoji,
                mood_name=mood.display_name,
                note=note,
                timestamp=format_timestamp(now),
                date=today
            )
            store.add_mood_entry(entry)
            updated = False

    logger.info(f"Mood {'updated' if updated else 'saved'}: {mood.display_name}")

    return {
        "status": "success",
        "message": f"Mood {'updated' if updated else 'saved'}! {mood.emoji}",
        "updated": updated,
        "data": entry
    }


def clear_moods(store: RecordStore) -> Dict[str, Any]:
    store.clear_mood_entries()
    logger.info("Mood history has been cleared")
    return {"status": "success", "message": "Mood history has been cleared"}


# ============================================================================
# SHARING
# ============================================================================

def format_mood_summary(store: RecordStore, now: Optional[datetime] = None) -> Optional[str]:
    """Text summary of the most recent entries, None when there is nothing to share"""
    recent = store.get_mood_entries()[:MOOD_SUMMARY_ENTRIES]
    if not recent:
        return None

    lines = ["My Mood Summary 📊", ""]
    for entry in recent:
        line = f"{entry.emoji} {display_date(entry.timestamp, now)}"
        if entry.note:
            line += f" - {entry.note}"
        lines.append(line)
    lines.append("")
    lines.append("Tracked with GearUp - Your Personal Wellness Companion 💚")
    return "\n".join(lines)


def format_mood_share(entry: MoodEntry) -> str:
    text = f"My mood today: {entry.emoji} {entry.mood_name}"
    if entry.note:
        text += f"\n\n\"{entry.note}\""
    return text + "\n\nTracked with GearUp 💚"

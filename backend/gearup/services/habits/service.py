"""
Habits Service - Business logic for habit management
Handles creating, editing, deleting and advancing habits
"""
from datetime import datetime
from typing import Optional, Dict, Any, List
import logging

from gearup.core.constants import KEY_HABITS, KEY_HABIT_PROGRESS, WATER_HABIT_ICON, WATER_HABIT_NAME
from gearup.core.exceptions import HabitNotFoundError, InvalidHabitDataError
from gearup.models.habit import Habit, HabitProgress
from gearup.storage import RecordStore
from gearup.utils.timezone import get_local_now, today_key
from gearup.services.progress.aggregator import daily_summary
from .progress import increment_habit, progress_percentage

logger = logging.getLogger(__name__)


def _validate_habit_fields(name: str, target_value: Optional[int], unit: str) -> None:
    """
    Raises:
        InvalidHabitDataError: If a required field is empty or target <= 0
    """
    if not name or not name.strip() or not unit or not unit.strip():
        raise InvalidHabitDataError("Please fill all required fields")
    if target_value is None or target_value <= 0:
        raise InvalidHabitDataError("Please enter a valid target value")


def ensure_defaults_seeded(store: RecordStore) -> bool:
    """
    On first launch persist the default habits so their ids become stable,
    then flip the first-launch flag. Later calls are no-ops.

    Returns:
        True if this call performed the seeding
    """
    if not store.is_first_launch():
        return False

    store.save_habits(store.get_habits())
    store.set_first_launch_complete()
    logger.info("First launch: default habits persisted")
    return True


def list_habits(store: RecordStore) -> List[Habit]:
    return store.get_habits()


def get_habit(store: RecordStore, habit_id: str) -> Habit:
    """
    Raises:
        HabitNotFoundError: If no habit has this id
    """
    for habit in store.get_habits():
        if habit.id == habit_id:
            return habit
    raise HabitNotFoundError(f"No habit with id '{habit_id}' found")


def add_habit(store: RecordStore, name: str, target_value: int, unit: str,
              description: str = "", icon: str = "💪") -> Dict[str, Any]:
    """
    Add a new habit and initialize today's (empty) progress for it

    Returns:
        Dict with status, message, and created habit data

    Raises:
        InvalidHabitDataError: If name/unit are empty or target_value <= 0
    """
    _validate_habit_fields(name, target_value, unit)

    habit = Habit(
        name=name.strip(),
        description=description.strip(),
        target_value=target_value,
        unit=unit.strip(),
        icon=icon
    )

    with store.lock(KEY_HABITS):
        habits = store.get_habits()
        habits.append(habit)
        store.save_habits(habits)

    store.update_habit_progress(HabitProgress(habit_id=habit.id, date=today_key()))
    logger.info(f"Habit added: {habit.name} ({habit.id})")

    return {
        "status": "success",
        "message": "Habit added",
        "data": habit
    }


def update_habit(store: RecordStore, habit_id: str, name: str, target_value: int, unit: str,
                 description: str = "", icon: str = "💪") -> Dict[str, Any]:
    """
    Edit a habit in place; the id (and so its progress history) is preserved

    Raises:
        InvalidHabitDataError: If the new values fail validation
        HabitNotFoundError: If no habit has this id
    """
    _validate_habit_fields(name, target_value, unit)

    with store.lock(KEY_HABITS):
        habits = store.get_habits()
        for index, habit in enumerate(habits):
            if habit.id == habit_id:
                updated = habit.model_copy(update={
                    "name": name.strip(),
                    "description": description.strip(),
                    "target_value": target_value,
                    "unit": unit.strip(),
                    "icon": icon
                })
                habits[index] = updated
                store.save_habits(habits)
                break
        else:
            raise HabitNotFoundError(f"No habit with id '{habit_id}' found")

    return {
        "status": "success",
        "message": "Habit updated",
        "data": updated
    }


def delete_habit(store: RecordStore, habit_id: str) -> Dict[str, Any]:
    """
    Delete a habit and every progress record that references it

    Raises:
        HabitNotFoundError: If no habit has this id
    """
    with store.lock(KEY_HABITS):
        habits = store.get_habits()
        remaining = [h for h in habits if h.id != habit_id]
        if len(remaining) == len(habits):
            raise HabitNotFoundError(f"No habit with id '{habit_id}' found")
        store.save_habits(remaining)

    removed = store.delete_habit_progress(habit_id)
    logger.info(f"Habit {habit_id} deleted along with {removed} progress record(s)")

    return {
        "status": "success",
        "message": "Habit deleted",
        "habit_id": habit_id,
        "progress_removed": removed
    }


def mark_habit_progress(store: RecordStore, habit_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Advance a habit by one unit for today and persist the result

    Returns:
        Dict with status, habit, updated progress and percentage

    Raises:
        HabitNotFoundError: If no habit has this id
    """
    now = now or get_local_now()
    habit = get_habit(store, habit_id)
    today = today_key(now)

    with store.lock(KEY_HABIT_PROGRESS):
        existing = store.get_habit_progress_for_date(habit.id, today)
        updated = increment_habit(habit, existing, date=today, now=now)
        store.update_habit_progress(updated)

    just_completed = updated.is_completed and not (existing and existing.is_completed)
    if just_completed:
        logger.info(f"🎉 {habit.name} completed!")

    return {
        "status": "success",
        "habit": habit,
        "progress": updated,
        "percentage": progress_percentage(updated, habit.target_value),
        "just_completed": just_completed
    }


def find_water_habit(habits: List[Habit]) -> Optional[Habit]:
    """The hydration habit: matched by its water icon, then by name"""
    for habit in habits:
        if habit.icon == WATER_HABIT_ICON:
            return habit
    for habit in habits:
        if habit.name.strip().lower() == WATER_HABIT_NAME.lower():
            return habit
    return None


def mark_water_habit(store: RecordStore, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Handler for the reminder notification's "mark water habit" action

    Raises:
        HabitNotFoundError: If there is no hydration habit
    """
    habit = find_water_habit(store.get_habits())
    if habit is None:
        raise HabitNotFoundError("No water habit found")
    return mark_habit_progress(store, habit.id, now=now)


def progress_map_for_date(store: RecordStore, date: str) -> Dict[str, HabitProgress]:
    """Progress records of one day keyed by habit id"""
    return {p.habit_id: p for p in store.get_habit_progress() if p.date == date}


def get_today_habits(store: RecordStore, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Get all habits with today's progress

    Returns:
        Dict with status, date, list of habits with progress info and the day summary
    """
    today = today_key(now)
    habits = store.get_habits()
    progress_by_habit = progress_map_for_date(store, today)

    result = []
    for habit in habits:
        progress = progress_by_habit.get(habit.id) or HabitProgress(habit_id=habit.id, date=today)
        result.append({
            "habit": habit,
            "progress": progress,
            "percentage": progress_percentage(progress, habit.target_value)
        })

    return {
        "status": "success",
        "date": today,
        "habits": result,
        "summary": daily_summary(habits, progress_by_habit)
    }


def reset_habits(store: RecordStore) -> Dict[str, Any]:
    """Drop all habits and progress; defaults become visible again"""
    store.clear_all_habits()
    logger.info("All habits have been reset")
    return {"status": "success", "message": "All habits have been reset"}


def format_progress_share(store: RecordStore, now: Optional[datetime] = None) -> str:
    """
    Plain-text daily progress report for sharing

    Raises:
        HabitNotFoundError: If there are no habits to share
    """
    now = now or get_local_now()
    habits = store.get_habits()
    if not habits:
        raise HabitNotFoundError("No habits to share")

    progress_by_habit = progress_map_for_date(store, today_key(now))
    rule = "━" * 34

    lines = [f"📈 My GearUp Progress - {now.strftime('%B %d, %Y')}", rule, ""]
    for habit in habits:
        progress = progress_by_habit.get(habit.id)
        current = progress.current_value if progress else 0
        percentage = progress_percentage(progress, habit.target_value)
        lines.append(f"{habit.icon} {habit.name}")
        lines.append(f"   Progress: {current}/{habit.target_value} {habit.unit} ({percentage}%)")
        lines.append("")

    summary = daily_summary(habits, progress_by_habit)
    lines.append(rule)
    lines.append(
        f"🎯 Overall: {summary.completed_count}/{summary.total_count} "
        f"habits completed ({summary.percentage}%)"
    )
    lines.append("")
    lines.append("Shared from GearUp - Your Wellness Companion 🌱")
    return "\n".join(lines)

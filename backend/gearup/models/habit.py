"""
Pydantic models for habits and per-day habit progress
"""
import uuid
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from gearup.utils.timezone import today_key


def _new_id() -> str:
    return str(uuid.uuid4())


class Habit(BaseModel):
    """A trackable daily activity with a numeric daily target"""
    id: str = Field(default_factory=_new_id, description="Opaque id, stable for the record's lifetime")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(default="", description="Optional description")
    target_value: int = Field(default=1, gt=0, description="Daily target, always positive")
    unit: str = Field(default="times", description="Unit label, e.g. 'glasses'")
    icon: str = Field(default="💪", description="Icon/label token")
    is_active: bool = Field(default=True)
    created_date: str = Field(default_factory=today_key, description="Creation date (YYYY-MM-DD)")


class HabitProgress(BaseModel):
    """One habit's accumulated value for one calendar date; natural key is (habit_id, date)"""
    habit_id: str
    date: str = Field(..., description="Calendar date (YYYY-MM-DD)")
    current_value: int = Field(default=0, ge=0)
    is_completed: bool = False
    completed_at: Optional[str] = Field(default=None, description="Set when is_completed turns true")

    def progress_percentage(self, target_value: int) -> int:
        """floor(current / target * 100) clamped to 100; 0 for a non-positive target"""
        if target_value <= 0:
            return 0
        return min(self.current_value * 100 // target_value, 100)


class AddHabitRequest(BaseModel):
    """Request model for adding a new habit"""
    name: str = Field(..., description="Habit name")
    description: str = Field(default="", description="Optional description")
    target_value: int = Field(..., description="Daily target (positive integer)")
    unit: str = Field(..., description="Unit label")
    icon: str = Field(default="💪", description="Icon token")

    @field_validator('name', 'unit', 'description')
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim surrounding whitespace so blank input is caught by the service"""
        return v.strip()


class UpdateHabitRequest(AddHabitRequest):
    """Request model for editing a habit in place (id is preserved)"""
    pass

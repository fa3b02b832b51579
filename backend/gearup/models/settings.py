"""
Pydantic models for the reminder settings record
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from gearup.core.constants import (
    DEFAULT_REMINDERS_ENABLED,
    DEFAULT_REMINDER_INTERVAL_MINUTES,
    DEFAULT_REMINDER_START_MINUTE,
    DEFAULT_REMINDER_END_MINUTE,
    DEFAULT_FIRST_LAUNCH,
    MINUTES_PER_DAY,
)


class ReminderSettings(BaseModel):
    """Singleton settings record persisted under the 'settings' key"""
    enabled: bool = DEFAULT_REMINDERS_ENABLED
    interval_minutes: int = Field(default=DEFAULT_REMINDER_INTERVAL_MINUTES, gt=0)
    start_minute: int = Field(default=DEFAULT_REMINDER_START_MINUTE, ge=0, lt=MINUTES_PER_DAY)
    end_minute: int = Field(default=DEFAULT_REMINDER_END_MINUTE, ge=0, lt=MINUTES_PER_DAY)
    first_launch: bool = DEFAULT_FIRST_LAUNCH


def parse_clock(value: str) -> int:
    """Convert 'HH:MM' (24-hour) to minutes since midnight"""
    parsed = datetime.strptime(value, "%H:%M")
    return parsed.hour * 60 + parsed.minute


def format_clock(minutes: int) -> str:
    """Convert minutes since midnight to 'HH:MM'"""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class UpdateReminderSettingsRequest(BaseModel):
    """Partial update of the reminder settings; omitted fields keep their value"""
    enabled: Optional[bool] = Field(None, description="Turn hydration reminders on/off")
    interval_minutes: Optional[int] = Field(None, description="Minutes between reminders")
    start_time: Optional[str] = Field(None, description="Window start in HH:MM format (24-hour)")
    end_time: Optional[str] = Field(None, description="Window end in HH:MM format (24-hour)")

    @field_validator('start_time', 'end_time')
    @classmethod
    def validate_time_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate time format is HH:MM if provided"""
        if v is None:
            return v
        try:
            datetime.strptime(v, "%H:%M")
            return v
        except ValueError:
            raise ValueError(f"Invalid time format '{v}'. Use HH:MM (24-hour format)")

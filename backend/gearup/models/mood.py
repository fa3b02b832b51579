"""
Pydantic models for the mood journal
"""
import uuid
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class MoodType(str, Enum):
    """Fixed mood taxonomy; each variant carries an emoji and display name"""
    VERY_HAPPY = "very_happy"
    HAPPY = "happy"
    EXCITED = "excited"
    NEUTRAL = "neutral"
    TIRED = "tired"
    SAD = "sad"
    ANGRY = "angry"

    @property
    def emoji(self) -> str:
        return _MOOD_DETAILS[self][0]

    @property
    def display_name(self) -> str:
        return _MOOD_DETAILS[self][1]

    @classmethod
    def from_emoji(cls, emoji: str) -> Optional["MoodType"]:
        """Exact-match lookup, None if the emoji is not part of the taxonomy"""
        for mood in cls:
            if mood.emoji == emoji:
                return mood
        return None

    @classmethod
    def all_moods(cls) -> List["MoodType"]:
        return list(cls)


_MOOD_DETAILS = {
    MoodType.VERY_HAPPY: ("😄", "Very Happy"),
    MoodType.HAPPY: ("😊", "Happy"),
    MoodType.EXCITED: ("🤩", "Excited"),
    MoodType.NEUTRAL: ("😐", "Neutral"),
    MoodType.TIRED: ("😴", "Tired"),
    MoodType.SAD: ("😢", "Sad"),
    MoodType.ANGRY: ("😡", "Angry"),
}


def _new_id() -> str:
    return str(uuid.uuid4())


class MoodEntry(BaseModel):
    """One dated mood log"""
    id: str = Field(default_factory=_new_id)
    emoji: str
    mood_name: str
    note: str = ""
    timestamp: str = Field(default="", description="YYYY-MM-DD HH:MM:SS, local; blank when unknown")
    date: str = Field(default="", description="YYYY-MM-DD, natural key for today's mood")

    @field_validator("note", "timestamp", "date", mode="before")
    @classmethod
    def coerce_text(cls, v):
        """Stored entries may carry null or non-string values; keep them renderable"""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)


class SaveMoodRequest(BaseModel):
    """Request model for saving (or overwriting) today's mood"""
    mood: Optional[MoodType] = Field(None, description="Selected mood")
    note: str = Field(default="", description="Optional free-text note")

"""Models for AI-backed wellness features."""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    """Mood sentiment buckets."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    CRITICAL = "critical"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> "Sentiment":
        """Normalize free-form model output, defaulting to neutral."""
        if not value:
            return cls.NEUTRAL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NEUTRAL


class MoodEntry(BaseModel):
    """A journaled feeling with its detected sentiment."""
    
    id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    note: str
    sentiment: Sentiment = Sentiment.NEUTRAL


class MoodInsight(BaseModel):
    """AI reflection on a mood note."""
    
    sentiment: str = "neutral"
    tone: str = ""
    themes: list[str] = Field(default_factory=list)
    insight: str = ""


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single chat turn."""
    
    id: str = Field(default_factory=lambda: str(uuid4()))
    role: ChatRole
    content: str
    is_audio: bool = False
    
    @property
    def is_user(self) -> bool:
        return self.role == ChatRole.USER


class Exercise(BaseModel):
    name: str
    sets: int = 3
    reps: str = "10"
    description: str = ""


class WorkoutPlan(BaseModel):
    """A generated routine."""
    
    name: str
    exercises: list[Exercise] = Field(default_factory=list)


class PersonalityResult(BaseModel):
    """Archetype inferred from quiz answers."""
    
    archetype: str
    emoji: str = "✨"
    traits: list[str] = Field(default_factory=list)
    description: str = ""
    message: str = ""


class DailyContent(BaseModel):
    """Quote and joke shown on the dashboard banner."""
    
    quote: str
    joke: str

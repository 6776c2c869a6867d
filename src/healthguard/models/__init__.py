"""Data models for the wellness dashboard."""

from .appointment import Appointment
from .health import HealthStats
from .user import Gender, User
from .wellness import (
    ChatMessage,
    ChatRole,
    DailyContent,
    Exercise,
    MoodEntry,
    MoodInsight,
    PersonalityResult,
    Sentiment,
    WorkoutPlan,
)

__all__ = [
    "Appointment",
    "HealthStats",
    "Gender",
    "User",
    "ChatMessage",
    "ChatRole",
    "DailyContent",
    "Exercise",
    "MoodEntry",
    "MoodInsight",
    "PersonalityResult",
    "Sentiment",
    "WorkoutPlan",
]

"""Business logic services."""

from .appointments import AppointmentBook
from .assistant import WellnessAI
from .chat import AssistantChat, SymptomChecker
from .dashboard import DashboardService
from .hydration import HydrationReminder
from .medical import ImageScanner, NearbyFinder, ScanMode
from .mood import MentalWellness
from .personality import PersonalityQuiz
from .profile import ProfileService
from .storage import WellnessStorage
from .workouts import PhysicalWellness
from .zen_game import ZenGame

__all__ = [
    "AppointmentBook",
    "WellnessAI",
    "AssistantChat",
    "SymptomChecker",
    "DashboardService",
    "HydrationReminder",
    "ImageScanner",
    "NearbyFinder",
    "ScanMode",
    "MentalWellness",
    "PersonalityQuiz",
    "ProfileService",
    "WellnessStorage",
    "PhysicalWellness",
    "ZenGame",
]

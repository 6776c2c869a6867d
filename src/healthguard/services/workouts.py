"""Physical wellness: generated routines and focus mode."""

from typing import Optional

from ..models import WorkoutPlan
from .assistant import WellnessAI
from .profile import ProfileService

TARGET_AREAS = ("Abs", "Legs", "Chest", "Shoulders", "Full Body")
DIFFICULTIES = ("Beginner", "Intermediate", "Advanced")


class PhysicalWellness:
    """Holds the current routine for a session."""

    def __init__(self, ai: Optional[WellnessAI] = None):
        self.ai = ai or WellnessAI()
        self.target = TARGET_AREAS[0]
        self.difficulty = DIFFICULTIES[0]
        self.workout: Optional[WorkoutPlan] = None
        self.focus_mode = False

    def generate(self, target: str, difficulty: str) -> Optional[WorkoutPlan]:
        if target not in TARGET_AREAS:
            raise ValueError(f"Unknown target area: {target}")
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty}")

        self.target = target
        self.difficulty = difficulty
        self.workout = self.ai.generate_workout(target, difficulty)
        return self.workout

    def toggle_focus(self) -> bool:
        self.focus_mode = not self.focus_mode
        return self.focus_mode

    def complete(self, profile: ProfileService) -> bool:
        """
        Finish the current routine and collect the reward.

        Returns False when there was no routine to complete.
        """
        if self.workout is None:
            return False
        profile.complete_workout()
        self.workout = None
        return True

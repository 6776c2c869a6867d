"""Daily health statistics."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class HealthStats(BaseModel):
    """A single day's tracked numbers."""
    
    stat_date: date = Field(default_factory=date.today)
    
    # Activity
    steps: int = Field(default=0, ge=0)
    step_goal: int = Field(default=10000, gt=0)
    
    # Rest and screens
    sleep_hours: Optional[float] = Field(default=None, ge=0, le=24)
    screen_time_hours: Optional[float] = Field(default=None, ge=0, le=24)
    
    # Hydration, counted in glasses (~250ml)
    water_intake: int = Field(default=0, ge=0)
    water_goal: int = Field(default=8, gt=0)
    
    @property
    def step_progress(self) -> int:
        """Percent of the step goal reached, capped at 100."""
        return min(100, round(self.steps / self.step_goal * 100))
    
    @property
    def water_progress(self) -> float:
        """Percent of the water goal reached, capped at 100."""
        return min(100.0, self.water_intake / self.water_goal * 100)
    
    @property
    def water_ml(self) -> int:
        return self.water_intake * 250
    
    @property
    def hydration_goal_met(self) -> bool:
        return self.water_intake >= self.water_goal
    
    @property
    def step_goal_met(self) -> bool:
        return self.steps >= self.step_goal
    
    def summary(self) -> str:
        """Generate a one-line summary of the day."""
        parts = [
            f"Steps: {self.steps:,}/{self.step_goal:,} ({self.step_progress}%)",
            f"Water: {self.water_intake}/{self.water_goal} glasses",
        ]
        if self.sleep_hours is not None:
            parts.append(f"Sleep: {self.sleep_hours:.1f}h")
        if self.screen_time_hours is not None:
            parts.append(f"Screen: {self.screen_time_hours:.1f}h")
        return " | ".join(parts)

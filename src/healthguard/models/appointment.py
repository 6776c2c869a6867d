"""Doctor appointment model."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class Appointment(BaseModel):
    """A scheduled visit."""
    
    id: str = Field(default_factory=lambda: str(uuid4()))
    doctor_name: str
    specialty: str = ""
    date: datetime
    notes: Optional[str] = None
    reminder_minutes: Optional[int] = None  # Minutes before the visit
    
    @field_validator("date")
    @classmethod
    def _local_naive(cls, value: datetime) -> datetime:
        # Offsets are converted to local wall-clock time
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    
    @field_validator("reminder_minutes")
    @classmethod
    def _positive_reminder(cls, value: Optional[int]) -> Optional[int]:
        # A zero or negative lead time means "no reminder"
        if value is not None and value <= 0:
            return None
        return value
    
    @property
    def reminder_at(self) -> Optional[datetime]:
        if self.reminder_minutes is None:
            return None
        return self.date - timedelta(minutes=self.reminder_minutes)
    
    @property
    def reminder_label(self) -> Optional[str]:
        """Human-readable reminder lead time."""
        minutes = self.reminder_minutes
        if minutes is None:
            return None
        if minutes % 1440 == 0:
            days = minutes // 1440
            return f"{days} day{'s' if days != 1 else ''} before"
        if minutes % 60 == 0:
            hours = minutes // 60
            return f"{hours} hour{'s' if hours != 1 else ''} before"
        return f"{minutes} min before"
    
    def is_past(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.date < now
    
    def reminder_due(self, now: Optional[datetime] = None) -> bool:
        """True once the reminder window opens, until the visit starts."""
        now = now or datetime.now()
        if self.reminder_at is None:
            return False
        return self.reminder_at <= now < self.date

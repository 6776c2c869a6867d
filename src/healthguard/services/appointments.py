"""Appointment book for the medical assistant."""

from datetime import datetime
from typing import Optional

from ..models import Appointment
from .storage import WellnessStorage

REMINDER_CHOICES = {
    0: "No Reminder",
    60: "1 Hour Before",
    120: "2 Hours Before",
    1440: "24 Hours Before",
}


class AppointmentBook:
    """Add, list and remove doctor visits."""

    def __init__(self, storage: Optional[WellnessStorage] = None):
        self.storage = storage or WellnessStorage()

    def add(
        self,
        doctor_name: str,
        date: Optional[str | datetime],
        specialty: str = "",
        notes: Optional[str] = None,
        reminder_minutes: Optional[int] = 0,
    ) -> Optional[Appointment]:
        """
        Book a visit.

        Both a doctor's name and a date are required; without them
        nothing is added and None is returned.
        """
        doctor_name = (doctor_name or "").strip()
        if not doctor_name or not date:
            return None

        when = date if isinstance(date, datetime) else datetime.fromisoformat(date)
        appointment = Appointment(
            doctor_name=doctor_name,
            specialty=(specialty or "").strip(),
            date=when,
            notes=notes or None,
            reminder_minutes=reminder_minutes,
        )
        self.storage.add_appointment(appointment)
        return appointment

    def remove(self, appointment_id: str) -> bool:
        return self.storage.delete_appointment(appointment_id)

    def all(self) -> list[Appointment]:
        return self.storage.get_appointments()

    def upcoming(self, now: Optional[datetime] = None) -> list[Appointment]:
        now = now or datetime.now()
        return [a for a in self.all() if not a.is_past(now)]

    def due_reminders(self, now: Optional[datetime] = None) -> list[Appointment]:
        """Visits whose reminder window is open right now."""
        now = now or datetime.now()
        return [a for a in self.all() if a.reminder_due(now)]

"""Countdown-based hydration reminder."""

from datetime import datetime, timedelta
from typing import Optional

from ..models import HealthStats


class HydrationReminder:
    """
    Nudges the user to drink when they have gone too long without logging water.

    The reminder fires once the interval since the last drink has passed
    and today's goal is not yet met. Logging water restarts the countdown.
    """

    def __init__(self, interval_minutes: int = 30, now: Optional[datetime] = None):
        self.interval = timedelta(minutes=interval_minutes)
        self.last_drink_at = now or datetime.now()
        self.visible = False

    def record_drink(self, now: Optional[datetime] = None) -> None:
        """Restart the countdown and hide the alert."""
        self.last_drink_at = now or datetime.now()
        self.visible = False

    def dismiss(self) -> None:
        self.visible = False

    def check(self, stats: HealthStats, now: Optional[datetime] = None) -> bool:
        """
        Re-evaluate the reminder.

        Returns:
            True if the reminder should be showing
        """
        now = now or datetime.now()
        if stats.hydration_goal_met:
            self.visible = False
        elif now - self.last_drink_at > self.interval:
            self.visible = True
        return self.visible

    def minutes_since_drink(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.now()
        return int((now - self.last_drink_at).total_seconds() // 60)

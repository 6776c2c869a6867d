"""Shared profile state: user, preferences and today's stats."""

from datetime import date
from typing import Optional

from ..models import HealthStats, User
from .storage import WellnessStorage

WATER_REWARD = 1
DAILY_REWARD = 10
WORKOUT_REWARD = 50


class ProfileService:
    """
    The state every page shares.

    Wraps storage so each mutation is persisted immediately. Coin
    rewards are silently skipped while nobody is signed in.
    """

    def __init__(self, storage: Optional[WellnessStorage] = None):
        self.storage = storage or WellnessStorage()

    # --- Session ---

    @property
    def user(self) -> Optional[User]:
        return self.storage.load_user()

    @property
    def is_signed_in(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> User:
        self.storage.save_user(user)
        return user

    def start_guest(self) -> User:
        """Sign in with the default guest profile, keeping an existing one."""
        existing = self.user
        if existing is not None:
            return existing
        return self.login(User.guest())

    def logout(self) -> None:
        self.storage.save_user(None)

    # --- Preferences ---

    @property
    def dark_mode(self) -> bool:
        return self.storage.load_dark_mode()

    def toggle_dark_mode(self) -> bool:
        enabled = not self.dark_mode
        self.storage.save_dark_mode(enabled)
        return enabled

    # --- Coins ---

    def add_coins(self, amount: int) -> Optional[User]:
        user = self.user
        if user is None:
            return None
        user.add_coins(amount)
        self.storage.save_user(user)
        return user

    def claim_daily_reward(self) -> Optional[User]:
        return self.add_coins(DAILY_REWARD)

    def complete_workout(self) -> Optional[User]:
        return self.add_coins(WORKOUT_REWARD)

    # --- Stats ---

    def stats(self, stat_date: Optional[date] = None) -> HealthStats:
        return self.storage.get_or_create_stats(stat_date or date.today())

    def update_stats(self, stat_date: Optional[date] = None, **changes) -> HealthStats:
        """Merge partial changes into a day's stats."""
        current = self.stats(stat_date)
        updated = current.model_copy(update=changes)
        # Re-validate so bad numbers are rejected like on construction
        updated = HealthStats.model_validate(updated.model_dump())
        self.storage.save_stats(updated)
        return updated

    def log_water(self, stat_date: Optional[date] = None) -> HealthStats:
        """One more glass, and a coin for it."""
        current = self.stats(stat_date)
        updated = self.update_stats(current.stat_date, water_intake=current.water_intake + 1)
        self.add_coins(WATER_REWARD)
        return updated

    def log_steps(self, steps: int, stat_date: Optional[date] = None) -> HealthStats:
        """Add steps to a day's total."""
        if steps < 0:
            raise ValueError("Steps must be positive")
        current = self.stats(stat_date)
        return self.update_stats(current.stat_date, steps=current.steps + steps)

    def log_sleep(self, hours: float, stat_date: Optional[date] = None) -> HealthStats:
        return self.update_stats(stat_date, sleep_hours=hours)

    def log_screen_time(self, hours: float, stat_date: Optional[date] = None) -> HealthStats:
        return self.update_stats(stat_date, screen_time_hours=hours)

    def set_step_goal(self, raw: str, stat_date: Optional[date] = None) -> HealthStats:
        """
        Change the step goal from free text.

        Non-numeric or non-positive input leaves the goal unchanged.
        """
        try:
            value = int(str(raw).strip())
        except ValueError:
            return self.stats(stat_date)
        if value <= 0:
            return self.stats(stat_date)
        return self.update_stats(stat_date, step_goal=value)

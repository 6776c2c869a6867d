"""Local storage service using TinyDB."""

from datetime import date
from pathlib import Path
from typing import Optional

from tinydb import Query, TinyDB

from ..models import Appointment, DailyContent, HealthStats, MoodEntry, User
from ..utils.config import Settings, get_settings


class WellnessStorage:
    """
    Local storage for the profile, daily stats, mood log and appointments.

    Data is stored as JSON in the data directory, one table per record type.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._db: Optional[TinyDB] = None

    @property
    def db_path(self) -> Path:
        """Path to the database file."""
        self.settings.data_dir.mkdir(parents=True, exist_ok=True)
        return self.settings.data_dir / "healthguard.json"

    @property
    def db(self) -> TinyDB:
        """Get the TinyDB instance."""
        if self._db is None:
            self._db = TinyDB(self.db_path)
        return self._db

    def _table(self, name: str):
        # Query caching off: several storages may share the same file
        return self.db.table(name, cache_size=0)

    # --- Profile ---

    def load_user(self) -> Optional[User]:
        """Get the signed-in user, if any."""
        docs = self._table("profile").all()
        if docs and docs[0].get("user"):
            return User.model_validate(docs[0]["user"])
        return None

    def save_user(self, user: Optional[User]) -> None:
        """Persist the signed-in user. ``None`` signs out."""
        profile = self._table("profile")
        payload = user.model_dump(mode="json") if user else None
        if profile.all():
            profile.update({"user": payload})
        else:
            profile.insert({"user": payload, "dark_mode": False})

    def load_dark_mode(self) -> bool:
        docs = self._table("profile").all()
        return bool(docs and docs[0].get("dark_mode"))

    def save_dark_mode(self, enabled: bool) -> None:
        profile = self._table("profile")
        if profile.all():
            profile.update({"dark_mode": enabled})
        else:
            profile.insert({"user": None, "dark_mode": enabled})

    # --- Daily stats ---

    def save_stats(self, stats: HealthStats) -> None:
        """Save or update a day's stats."""
        Stats = Query()
        table = self._table("stats")
        stats_dict = stats.model_dump(mode="json")

        # Upsert based on stat_date
        if table.search(Stats.stat_date == stats.stat_date.isoformat()):
            table.update(stats_dict, Stats.stat_date == stats.stat_date.isoformat())
        else:
            table.insert(stats_dict)

    def get_stats(self, stat_date: date) -> Optional[HealthStats]:
        """Get stats by date."""
        Stats = Query()
        results = self._table("stats").search(Stats.stat_date == stat_date.isoformat())
        if results:
            return HealthStats.model_validate(results[0])
        return None

    def get_or_create_stats(self, stat_date: date) -> HealthStats:
        """
        Get a day's stats, creating them if missing.

        Goals carry over from the most recent earlier day so an edited
        step goal sticks.
        """
        stats = self.get_stats(stat_date)
        if stats is None:
            previous = self.get_latest_stats(before=stat_date)
            stats = HealthStats(
                stat_date=stat_date,
                step_goal=previous.step_goal if previous else self.settings.default_step_goal,
                water_goal=previous.water_goal if previous else self.settings.default_water_goal,
            )
            self.save_stats(stats)
        return stats

    def get_latest_stats(self, before: Optional[date] = None) -> Optional[HealthStats]:
        """Most recent stats strictly before ``before`` (or overall)."""
        all_stats = [HealthStats.model_validate(s) for s in self._table("stats").all()]
        if before is not None:
            all_stats = [s for s in all_stats if s.stat_date < before]
        if not all_stats:
            return None
        return max(all_stats, key=lambda s: s.stat_date)

    def get_stats_in_range(self, start_date: date, end_date: date) -> list[HealthStats]:
        """Get all stats within a date range, oldest first."""
        Stats = Query()
        results = self._table("stats").search(
            (Stats.stat_date >= start_date.isoformat()) &
            (Stats.stat_date <= end_date.isoformat())
        )
        stats = [HealthStats.model_validate(s) for s in results]
        stats.sort(key=lambda s: s.stat_date)
        return stats

    # --- Mood log ---

    def add_mood_entry(self, entry: MoodEntry) -> None:
        self._table("moods").insert(entry.model_dump(mode="json"))

    def get_mood_log(self, limit: Optional[int] = None) -> list[MoodEntry]:
        """Mood entries, newest first."""
        entries = [MoodEntry.model_validate(m) for m in self._table("moods").all()]
        entries.sort(key=lambda m: m.timestamp, reverse=True)
        return entries[:limit] if limit else entries

    # --- Appointments ---

    def add_appointment(self, appointment: Appointment) -> None:
        self._table("appointments").insert(appointment.model_dump(mode="json"))

    def get_appointments(self) -> list[Appointment]:
        """All appointments, soonest first."""
        appointments = [
            Appointment.model_validate(a) for a in self._table("appointments").all()
        ]
        appointments.sort(key=lambda a: a.date)
        return appointments

    def delete_appointment(self, appointment_id: str) -> bool:
        """Delete an appointment by id."""
        Appt = Query()
        removed = self._table("appointments").remove(Appt.id == appointment_id)
        return len(removed) > 0

    # --- Daily content cache ---

    def get_daily_content(self, content_date: date) -> Optional[DailyContent]:
        Content = Query()
        results = self._table("content").search(Content.date == content_date.isoformat())
        if results:
            return DailyContent.model_validate(results[0]["content"])
        return None

    def save_daily_content(self, content_date: date, content: DailyContent) -> None:
        Content = Query()
        table = self._table("content")
        table.upsert(
            {"date": content_date.isoformat(), "content": content.model_dump(mode="json")},
            Content.date == content_date.isoformat(),
        )

    def close(self) -> None:
        """Close the database connection."""
        if self._db:
            self._db.close()
            self._db = None

    def __enter__(self) -> "WellnessStorage":
        return self

    def __exit__(self, *args) -> None:
        self.close()

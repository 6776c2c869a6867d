"""Dashboard aggregation: daily content and weekly activity."""

from datetime import date, timedelta
from typing import Optional

import pandas as pd

from ..models import DailyContent
from .assistant import WellnessAI
from .storage import WellnessStorage


class DashboardService:
    """
    Builds the numbers shown on the home dashboard.

    The quote and joke come from the AI once per day and are cached.
    """

    def __init__(
        self,
        storage: Optional[WellnessStorage] = None,
        ai: Optional[WellnessAI] = None,
    ):
        self.storage = storage or WellnessStorage()
        self.ai = ai or WellnessAI()

    def daily_content(self, today: Optional[date] = None) -> DailyContent:
        today = today or date.today()
        cached = self.storage.get_daily_content(today)
        if cached:
            return cached

        content = self.ai.get_daily_content()
        # Only cache real answers so a later call can still reach the AI
        if self.ai.is_configured:
            self.storage.save_daily_content(today, content)
        return content

    def build_dataframe(self, end_date: Optional[date] = None, days: int = 7) -> pd.DataFrame:
        """
        One row per day for the last ``days`` days.

        Days without stats are filled with zeros.
        """
        end_date = end_date or date.today()
        start_date = end_date - timedelta(days=days - 1)

        stats = self.storage.get_stats_in_range(start_date, end_date)
        rows = [
            {
                "date": s.stat_date,
                "steps": s.steps,
                "water_intake": s.water_intake,
                "sleep_hours": s.sleep_hours or 0.0,
            }
            for s in stats
        ]

        index = pd.date_range(start_date, end_date, freq="D")
        if not rows:
            df = pd.DataFrame(
                {"steps": 0, "water_intake": 0, "sleep_hours": 0.0},
                index=index,
            )
        else:
            df = pd.DataFrame(rows)
            df["date"] = pd.to_datetime(df["date"])
            df = df.set_index("date").reindex(index, fill_value=0)

        df.index.name = "date"
        df["day"] = df.index.strftime("%a")
        return df

    def weekly_activity(self, end_date: Optional[date] = None) -> list[dict]:
        """Chart data: ``[{"name": "Mon", "steps": 4000}, ...]``, oldest first."""
        df = self.build_dataframe(end_date)
        return [
            {"name": row.day, "steps": int(row.steps)}
            for row in df.itertuples()
        ]

    def weekly_summary(self, end_date: Optional[date] = None) -> dict:
        """Totals and averages over the last week."""
        df = self.build_dataframe(end_date)
        return {
            "total_steps": int(df["steps"].sum()),
            "avg_steps": round(float(df["steps"].mean())),
            "avg_water": round(float(df["water_intake"].mean()), 1),
            "avg_sleep": round(float(df.loc[df["sleep_hours"] > 0, "sleep_hours"].mean()), 1)
            if (df["sleep_hours"] > 0).any() else None,
            "best_day": df["steps"].idxmax().strftime("%A") if df["steps"].max() > 0 else None,
        }

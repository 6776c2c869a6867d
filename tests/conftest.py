"""Shared fixtures: isolated storage and a scripted AI."""

from typing import Optional

import pytest

from healthguard.models import DailyContent, MoodInsight, PersonalityResult, WorkoutPlan
from healthguard.services import WellnessStorage
from healthguard.utils.config import Settings, get_settings


class StubAI:
    """Stands in for WellnessAI and records what it was asked."""

    is_configured = True

    def __init__(self):
        self.calls: list[tuple] = []
        self.personality: Optional[PersonalityResult] = PersonalityResult(
            archetype="The Calm Explorer",
            emoji="🌿",
            traits=["Curious", "Grounded", "Kind"],
            description="You recharge outdoors.",
            message="Keep wandering.",
        )
        self.insight: Optional[MoodInsight] = MoodInsight(
            sentiment="positive",
            tone="hopeful",
            themes=["work", "rest"],
            insight="You sound ready for a calm evening.",
        )
        self.workout: Optional[WorkoutPlan] = WorkoutPlan.model_validate({
            "name": "Core Starter",
            "exercises": [{"name": "Plank", "sets": 3, "reps": "30s"}],
        })
        self.image: Optional[str] = "data:image/png;base64,AAAA"
        self.audio: Optional[bytes] = b"ID3-fake-mp3"

    def chat_with_assistant(self, history, message):
        self.calls.append(("chat", len(history), message))
        return f"echo: {message}"

    def check_symptoms(self, description):
        self.calls.append(("symptoms", description))
        return "Rest and drink fluids."

    def get_daily_content(self):
        self.calls.append(("daily_content",))
        return DailyContent(quote="Move a little every day.", joke="My doctor says I'm fine-ish.")

    def analyze_personality(self, answers):
        self.calls.append(("personality", list(answers)))
        return self.personality

    def analyze_mood_insight(self, text):
        self.calls.append(("mood", text))
        return self.insight

    def generate_workout(self, target, difficulty):
        self.calls.append(("workout", target, difficulty))
        return self.workout

    def analyze_prescription(self, image_b64, media_type="image/jpeg"):
        self.calls.append(("prescription", media_type))
        return "Amoxicillin 500mg, three times daily."

    def analyze_xray(self, image_b64, media_type="image/jpeg"):
        self.calls.append(("xray", media_type))
        return "A chest X-ray with clear lung fields."

    def find_nearby_places(self, query, latitude, longitude):
        self.calls.append(("nearby", query, latitude, longitude))
        return f"Three places for {query}."

    def generate_wellness_image(self, prompt, aspect_ratio="1:1"):
        self.calls.append(("image", prompt, aspect_ratio))
        return self.image

    def get_soothing_voice(self, feeling):
        self.calls.append(("voice", feeling))
        return self.audio

    def called(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with no API keys and data kept under tmp_path."""
    return Settings(
        _env_file=None,
        anthropic_api_key=None,
        openai_api_key=None,
        data_dir=tmp_path,
    )


@pytest.fixture
def storage(settings):
    with WellnessStorage(settings) as s:
        yield s


@pytest.fixture
def stub_ai() -> StubAI:
    return StubAI()


@pytest.fixture
def env_data_dir(tmp_path, monkeypatch):
    """Point the cached global settings at tmp_path."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()

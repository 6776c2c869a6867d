"""Mental wellness: mood journaling, soothing voice and calming images."""

from dataclasses import dataclass
from typing import Optional

from ..models import MoodEntry, MoodInsight, Sentiment
from .assistant import IMAGE_SIZES, WellnessAI
from .safety import SafetyAlert, check_text
from .storage import WellnessStorage

ASPECT_RATIOS = tuple(IMAGE_SIZES)

EXERCISES = (
    {
        "title": "Breathing Exercise",
        "body": "Box breathing: Inhale 4s, Hold 4s, Exhale 4s, Hold 4s.",
    },
    {
        "title": "Grounding 5-4-3-2-1",
        "body": "Name 5 things you see, 4 you feel, 3 you hear...",
    },
)


@dataclass
class MoodResult:
    """Outcome of analyzing a mood note."""
    alert: Optional[SafetyAlert] = None
    insight: Optional[MoodInsight] = None
    entry: Optional[MoodEntry] = None


@dataclass
class VoiceResult:
    """Outcome of a soothing-voice request."""
    alert: Optional[SafetyAlert] = None
    audio: Optional[bytes] = None


class MentalWellness:
    """
    Mood features backed by the AI.

    Every free-text request is screened for distress first; a flagged
    note returns the safety alert and never reaches the AI.
    """

    def __init__(
        self,
        storage: Optional[WellnessStorage] = None,
        ai: Optional[WellnessAI] = None,
    ):
        self.storage = storage or WellnessStorage()
        self.ai = ai or WellnessAI()

    def analyze_text(self, note: str) -> Optional[MoodResult]:
        """
        Reflect on a note and log it to the mood journal.

        Returns None for blank input.
        """
        if not note or not note.strip():
            return None

        alert = check_text(note)
        if alert:
            return MoodResult(alert=alert)

        insight = self.ai.analyze_mood_insight(note)
        if insight is None:
            return MoodResult()

        entry = MoodEntry(note=note, sentiment=Sentiment.parse(insight.sentiment))
        self.storage.add_mood_entry(entry)
        return MoodResult(insight=insight, entry=entry)

    def soothing_voice(self, note: str) -> Optional[VoiceResult]:
        """Spoken calming message for the note. None for blank input."""
        if not note or not note.strip():
            return None

        alert = check_text(note)
        if alert:
            return VoiceResult(alert=alert)

        return VoiceResult(audio=self.ai.get_soothing_voice(note))

    def generate_image(self, prompt: str, aspect_ratio: str = "1:1") -> Optional[str]:
        """Visualize a safe haven. Blank prompts are ignored."""
        if not prompt or not prompt.strip():
            return None
        if aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio: {aspect_ratio}")
        return self.ai.generate_wellness_image(prompt, aspect_ratio)

    def mood_log(self, limit: Optional[int] = None) -> list[MoodEntry]:
        return self.storage.get_mood_log(limit)

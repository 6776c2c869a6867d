"""Tests for the AI wrapper that need no network access."""

import json

import pytest

from healthguard.models import ChatMessage, ChatRole
from healthguard.services.assistant import (
    FALLBACK_CONTENT,
    UNAVAILABLE_MESSAGE,
    WellnessAI,
    encode_image,
    extract_json,
)
from healthguard.utils.config import Settings


class TestExtractJson:
    """Tests for parsing model replies."""

    def test_plain(self):
        assert extract_json('{"quote": "q", "joke": "j"}') == {"quote": "q", "joke": "j"}

    def test_fenced(self):
        text = 'Here you go:\n```json\n{"archetype": "Sage"}\n```\nEnjoy!'
        assert extract_json(text) == {"archetype": "Sage"}

    def test_bare_fence(self):
        assert extract_json('```\n{"name": "Legs Day"}\n```') == {"name": "Legs Day"}

    def test_not_json(self):
        with pytest.raises(json.JSONDecodeError):
            extract_json("I can't help with that.")


class TestUnconfigured:
    """Tests for fallbacks when no provider key is set."""

    @pytest.fixture
    def ai(self, settings):
        return WellnessAI(settings)

    def test_not_configured(self, ai):
        assert ai.is_configured is False
        assert ai.anthropic_client is None
        assert ai.openai_client is None

    def test_text_fallbacks(self, ai):
        assert ai.chat_with_assistant([], "hello") == UNAVAILABLE_MESSAGE
        assert ai.check_symptoms("cough") == UNAVAILABLE_MESSAGE
        assert ai.find_nearby_places("pharmacy", 45.5, -122.6) == UNAVAILABLE_MESSAGE

    def test_structured_fallbacks(self, ai):
        assert ai.get_daily_content() == FALLBACK_CONTENT
        assert ai.analyze_personality([{"question": "q", "answer": "a"}]) is None
        assert ai.analyze_mood_insight("fine") is None
        assert ai.generate_workout("Abs", "Beginner") is None

    def test_media_unavailable(self, ai):
        assert ai.generate_wellness_image("a beach") is None
        assert ai.get_soothing_voice("tired") is None


class TestStructuredParsing:
    """Tests for turning model text into models."""

    def test_workout_from_reply(self, settings, monkeypatch):
        ai = WellnessAI(settings)
        reply = '```json\n{"name": "Core", "exercises": [{"name": "Plank", "sets": 2, "reps": "30s"}]}\n```'
        monkeypatch.setattr(ai, "_complete", lambda *args, **kwargs: (reply, "claude"))

        plan = ai.generate_workout("Abs", "Beginner")
        assert plan.name == "Core"
        assert plan.exercises[0].sets == 2

    def test_bad_shape_returns_none(self, settings, monkeypatch):
        ai = WellnessAI(settings)
        monkeypatch.setattr(ai, "_complete", lambda *args, **kwargs: ('{"traits": []}', "openai"))
        assert ai.analyze_personality([]) is None

    def test_chat_history_roles(self, settings, monkeypatch):
        """Test that model turns are sent as assistant turns."""
        ai = WellnessAI(settings)
        seen = {}

        def fake_complete(messages, system_prompt=None, max_tokens=1000):
            seen["messages"] = messages
            return "ok", "claude"

        monkeypatch.setattr(ai, "_complete", fake_complete)
        history = [
            ChatMessage(role=ChatRole.USER, content="hi"),
            ChatMessage(role=ChatRole.MODEL, content="hello"),
            ChatMessage(role=ChatRole.SYSTEM, content="ignored"),
        ]
        assert ai.chat_with_assistant(history, "how are you?") == "ok"
        assert [m["role"] for m in seen["messages"]] == ["user", "assistant", "user"]


class TestImageBlocks:
    def test_openai_content_conversion(self):
        blocks = [
            {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "QUJD"}},
            {"type": "text", "text": "Read this"},
        ]
        converted = WellnessAI._to_openai_content(blocks)
        assert converted[0] == {"type": "image_url", "image_url": {"url": "data:image/png;base64,QUJD"}}
        assert converted[1] == {"type": "text", "text": "Read this"}

    def test_encode_image(self):
        assert encode_image(b"ABC") == "QUJD"


class TestProviderOrder:
    """Tests for trying Claude first and OpenAI second."""

    @pytest.fixture
    def ai(self, tmp_path):
        settings = Settings(
            _env_file=None,
            anthropic_api_key="test-anthropic",
            openai_api_key="test-openai",
            data_dir=tmp_path,
        )
        return WellnessAI(settings)

    def patch_providers(self, monkeypatch, ai, claude, openai):
        calls = []

        def fake_claude(messages, system_prompt, max_tokens):
            calls.append("claude")
            return claude

        def fake_openai(messages, system_prompt, max_tokens):
            calls.append("openai")
            return openai

        monkeypatch.setattr(ai, "_try_claude", fake_claude)
        monkeypatch.setattr(ai, "_try_openai", fake_openai)
        return calls

    def test_claude_answer_skips_openai(self, ai, monkeypatch):
        calls = self.patch_providers(monkeypatch, ai, "From Claude", "From OpenAI")
        assert ai.check_symptoms("cough") == "From Claude"
        assert calls == ["claude"]

    def test_falls_through_to_openai(self, ai, monkeypatch):
        """Test that a failed Claude call is retried on OpenAI."""
        calls = self.patch_providers(monkeypatch, ai, None, "From OpenAI")
        assert ai.chat_with_assistant([], "hello") == "From OpenAI"
        assert calls == ["claude", "openai"]

    def test_vision_falls_through(self, ai, monkeypatch):
        calls = self.patch_providers(monkeypatch, ai, None, "Two medications listed.")
        assert ai.analyze_prescription("QUJD", "image/png") == "Two medications listed."
        assert calls == ["claude", "openai"]

    def test_all_providers_fail(self, ai, monkeypatch):
        calls = self.patch_providers(monkeypatch, ai, None, None)
        assert ai.check_symptoms("cough") == UNAVAILABLE_MESSAGE
        assert ai.get_daily_content() == FALLBACK_CONTENT
        assert calls == ["claude", "openai", "claude", "openai"]

    def test_only_openai_configured(self, tmp_path, monkeypatch):
        ai = WellnessAI(Settings(_env_file=None, anthropic_api_key=None,
                                 openai_api_key="test-openai", data_dir=tmp_path))
        calls = self.patch_providers(monkeypatch, ai, "From Claude", "From OpenAI")
        assert ai.check_symptoms("cough") == "From OpenAI"
        assert calls == ["openai"]

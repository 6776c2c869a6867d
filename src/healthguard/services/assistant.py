"""Generative-AI wrapper used by every wellness feature."""

import base64
import json
from typing import Optional

import anthropic
from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from ..models import (
    ChatMessage,
    ChatRole,
    DailyContent,
    MoodInsight,
    PersonalityResult,
    WorkoutPlan,
)
from ..utils.config import Settings, get_settings

UNAVAILABLE_MESSAGE = (
    "I'm sorry, but I'm unable to respond right now. Please check your API configuration."
)

FALLBACK_CONTENT = DailyContent(
    quote="Take care of your body. It's the only place you have to live.",
    joke="Why did the cookie go to the doctor? Because it felt crummy.",
)

# DALL-E 3 only renders three sizes, so 4:3 borrows the landscape one
IMAGE_SIZES = {
    "1:1": "1024x1024",
    "16:9": "1792x1024",
    "4:3": "1792x1024",
    "9:16": "1024x1792",
}


def extract_json(text: str) -> dict:
    """Parse a JSON object out of a model reply, tolerating markdown fences."""
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]
    return json.loads(text.strip())


class WellnessAI:
    """
    Thin wrapper around the generative-AI providers.

    Text and image reading try Claude first and OpenAI second. Image
    generation and speech are OpenAI-only. Every operation degrades to a
    fallback value instead of raising when no provider answers.

    IMPORTANT: Nothing returned here is medical advice.
    """

    ASSISTANT_PROMPT = """You are HealthGuard Pro, a friendly wellness assistant inside a personal health dashboard.
Answer health and lifestyle questions clearly and with careful reasoning.
Keep answers short enough to read in a chat bubble.
You are NOT a doctor: never diagnose, and recommend a healthcare provider for anything serious."""

    SYMPTOM_PROMPT = """You are a cautious symptom checker. The user describes how they feel.
Respond with:
1. Possible common causes (not a diagnosis)
2. Self-care steps that are generally safe
3. Warning signs that mean they should see a doctor or call emergency services
Always end by reminding them this is not a substitute for professional care."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._anthropic_client = None
        self._openai_client = None

    @property
    def anthropic_client(self) -> Optional[anthropic.Anthropic]:
        if self._anthropic_client is None and self.settings.anthropic_api_key:
            self._anthropic_client = anthropic.Anthropic(api_key=self.settings.anthropic_api_key)
        return self._anthropic_client

    @property
    def openai_client(self) -> Optional[OpenAI]:
        if self._openai_client is None and self.settings.openai_api_key:
            self._openai_client = OpenAI(api_key=self.settings.openai_api_key)
        return self._openai_client

    @property
    def has_claude(self) -> bool:
        return self.settings.has_claude

    @property
    def has_openai(self) -> bool:
        return self.settings.has_openai

    @property
    def is_configured(self) -> bool:
        return self.has_claude or self.has_openai

    # --- Provider plumbing ---

    def _complete(
        self,
        messages: list[dict],
        system_prompt: Optional[str] = None,
        max_tokens: int = 1000,
    ) -> tuple[Optional[str], str]:
        """
        Get a completion from Claude or OpenAI.

        ``messages`` use the Anthropic shape: ``role`` is ``user`` or
        ``assistant`` and ``content`` is a string or a list of blocks.

        Returns:
            Tuple of (text or None, provider used)
        """
        if self.has_claude:
            text = self._try_claude(messages, system_prompt, max_tokens)
            if text:
                return text, "claude"

        if self.has_openai:
            text = self._try_openai(messages, system_prompt, max_tokens)
            if text:
                return text, "openai"

        return None, "none"

    def _try_claude(
        self,
        messages: list[dict],
        system_prompt: Optional[str],
        max_tokens: int,
    ) -> Optional[str]:
        """Try to get a response from Claude."""
        if not self.anthropic_client:
            return None

        kwargs = {}
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = self.anthropic_client.messages.create(
                model=self.settings.claude_model,
                max_tokens=max_tokens,
                messages=messages,
                **kwargs,
            )
            return response.content[0].text
        except anthropic.APIError as e:
            print(f"Claude error: {e}")
            return None

    def _try_openai(
        self,
        messages: list[dict],
        system_prompt: Optional[str],
        max_tokens: int,
    ) -> Optional[str]:
        """Try to get a response from OpenAI."""
        if not self.openai_client:
            return None

        openai_messages = []
        if system_prompt:
            openai_messages.append({"role": "system", "content": system_prompt})
        for message in messages:
            openai_messages.append({
                "role": message["role"],
                "content": self._to_openai_content(message["content"]),
            })

        try:
            response = self.openai_client.chat.completions.create(
                model=self.settings.openai_model,
                messages=openai_messages,
                max_tokens=max_tokens,
                temperature=0.7,
            )
            return response.choices[0].message.content
        except OpenAIError as e:
            print(f"OpenAI error: {e}")
            return None

    @staticmethod
    def _to_openai_content(content):
        """Translate Anthropic content blocks to OpenAI's format."""
        if isinstance(content, str):
            return content
        converted = []
        for block in content:
            if block["type"] == "image":
                source = block["source"]
                converted.append({
                    "type": "image_url",
                    "image_url": {"url": f"data:{source['media_type']};base64,{source['data']}"},
                })
            else:
                converted.append({"type": "text", "text": block["text"]})
        return converted

    def _complete_json(self, prompt: str, system_prompt: Optional[str] = None) -> Optional[dict]:
        """Ask for a JSON object and parse it."""
        text, _ = self._complete(
            [{"role": "user", "content": prompt}],
            system_prompt=system_prompt,
        )
        if not text:
            return None
        try:
            return extract_json(text)
        except (json.JSONDecodeError, IndexError) as e:
            print(f"Error parsing model JSON: {e}")
            return None

    # --- Chat ---

    def chat_with_assistant(self, history: list[ChatMessage], message: str) -> str:
        """Continue the global assistant conversation."""
        messages = [
            {
                "role": "user" if m.role == ChatRole.USER else "assistant",
                "content": m.content,
            }
            for m in history
            if m.role != ChatRole.SYSTEM
        ]
        messages.append({"role": "user", "content": message})

        text, _ = self._complete(messages, system_prompt=self.ASSISTANT_PROMPT, max_tokens=1500)
        return text or UNAVAILABLE_MESSAGE

    def check_symptoms(self, description: str) -> str:
        """Describe possible causes and next steps for a symptom."""
        text, _ = self._complete(
            [{"role": "user", "content": description}],
            system_prompt=self.SYMPTOM_PROMPT,
        )
        return text or UNAVAILABLE_MESSAGE

    # --- Structured content ---

    def get_daily_content(self) -> DailyContent:
        """A motivational health quote and a light health joke."""
        data = self._complete_json(
            'Give me one short motivational health quote and one short, clean health joke. '
            'Return ONLY JSON: {"quote": "...", "joke": "..."}'
        )
        if not data:
            return FALLBACK_CONTENT
        try:
            return DailyContent.model_validate(data)
        except ValidationError as e:
            print(f"Unexpected daily content: {e}")
            return FALLBACK_CONTENT

    def analyze_personality(self, answers: list[dict]) -> Optional[PersonalityResult]:
        """Infer a playful wellness archetype from quiz answers."""
        lines = [f"- {a['question']} {a['answer']}" for a in answers]
        prompt = (
            "Based on these quiz answers, assign the person a fun wellness archetype.\n"
            + "\n".join(lines)
            + '\n\nReturn ONLY JSON: {"archetype": "...", "emoji": "<one emoji>", '
            '"traits": ["...", "...", "..."], "description": "<2 sentences>", '
            '"message": "<one encouraging sentence>"}'
        )
        data = self._complete_json(prompt)
        if not data:
            return None
        try:
            return PersonalityResult.model_validate(data)
        except ValidationError as e:
            print(f"Unexpected personality result: {e}")
            return None

    def analyze_mood_insight(self, text: str) -> Optional[MoodInsight]:
        """Sentiment, tone, themes and a short reflection for a mood note."""
        prompt = (
            f'Analyze this journal note: "{text}"\n\n'
            'Return ONLY JSON: {"sentiment": "positive|neutral|negative|critical", '
            '"tone": "<one or two words>", "themes": ["..."], '
            '"insight": "<a gentle 2-sentence reflection>"}'
        )
        data = self._complete_json(prompt)
        if not data:
            return None
        try:
            return MoodInsight.model_validate(data)
        except ValidationError as e:
            print(f"Unexpected mood insight: {e}")
            return None

    def generate_workout(self, target: str, difficulty: str) -> Optional[WorkoutPlan]:
        """A short routine for a body area and level."""
        prompt = (
            f"Create a {difficulty} home workout focused on {target}. "
            "Use 4-6 exercises that need no equipment.\n\n"
            'Return ONLY JSON: {"name": "...", "exercises": [{"name": "...", "sets": 3, '
            '"reps": "10-12", "description": "<one sentence on form>"}]}'
        )
        data = self._complete_json(prompt)
        if not data:
            return None
        try:
            return WorkoutPlan.model_validate(data)
        except ValidationError as e:
            print(f"Unexpected workout plan: {e}")
            return None

    # --- Image reading ---

    def _analyze_image(self, image_b64: str, media_type: str, instructions: str) -> str:
        messages = [{
            "role": "user",
            "content": [
                {
                    "type": "image",
                    "source": {"type": "base64", "media_type": media_type, "data": image_b64},
                },
                {"type": "text", "text": instructions},
            ],
        }]
        text, _ = self._complete(messages, max_tokens=1500)
        return text or UNAVAILABLE_MESSAGE

    def analyze_prescription(self, image_b64: str, media_type: str = "image/jpeg") -> str:
        """Read a prescription photo."""
        return self._analyze_image(
            image_b64,
            media_type,
            "This is a photo of a medical prescription. List each medication with its "
            "dosage and schedule, explain in plain language what each is commonly used "
            "for, and flag anything illegible. Remind the user to confirm with their "
            "pharmacist.",
        )

    def analyze_xray(self, image_b64: str, media_type: str = "image/jpeg") -> str:
        """Describe an X-ray image for educational purposes."""
        return self._analyze_image(
            image_b64,
            media_type,
            "This is an X-ray image. Describe the visible anatomy and any notable features "
            "in plain language for educational purposes only. Do not diagnose. Recommend "
            "that a radiologist review it.",
        )

    def find_nearby_places(self, query: str, latitude: float, longitude: float) -> str:
        """Suggest nearby health services around a coordinate."""
        prompt = (
            f"I am at latitude {latitude:.4f}, longitude {longitude:.4f}. "
            f"Suggest up to 5 places for: {query}. For each give the name, the kind of "
            "place, and why it fits. Tell me to verify hours and details before going."
        )
        text, _ = self._complete([{"role": "user", "content": prompt}])
        return text or UNAVAILABLE_MESSAGE

    # --- Media generation (OpenAI only) ---

    def generate_wellness_image(self, prompt: str, aspect_ratio: str = "1:1") -> Optional[str]:
        """
        Render a calming scene.

        Returns:
            A ``data:image/png;base64,...`` URL, or None if generation failed
        """
        if not self.openai_client:
            return None

        size = IMAGE_SIZES.get(aspect_ratio, IMAGE_SIZES["1:1"])
        try:
            response = self.openai_client.images.generate(
                model=self.settings.openai_image_model,
                prompt=f"A peaceful, calming, high quality illustration of: {prompt}",
                size=size,
                response_format="b64_json",
                n=1,
            )
            return f"data:image/png;base64,{response.data[0].b64_json}"
        except OpenAIError as e:
            print(f"Image generation error: {e}")
            return None

    def get_soothing_voice(self, feeling: str) -> Optional[bytes]:
        """
        Speak a short calming message for how the user feels.

        Returns:
            MP3 bytes, or None if speech is unavailable
        """
        if not self.openai_client:
            return None

        script, _ = self._complete(
            [{"role": "user", "content": f'I feel: "{feeling}"'}],
            system_prompt=(
                "Write a soothing message of 3-4 sentences to be read aloud slowly. "
                "Acknowledge the feeling and suggest one simple breathing step. "
                "Plain text only."
            ),
            max_tokens=300,
        )
        if not script:
            return None

        try:
            response = self.openai_client.audio.speech.create(
                model=self.settings.openai_tts_model,
                voice=self.settings.openai_tts_voice,
                input=script,
            )
            return response.content
        except OpenAIError as e:
            print(f"Speech generation error: {e}")
            return None


def encode_image(data: bytes) -> str:
    """Base64-encode raw upload bytes for the vision endpoints."""
    return base64.b64encode(data).decode("ascii")

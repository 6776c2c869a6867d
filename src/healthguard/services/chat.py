"""Conversation state for the assistant widget and the symptom checker."""

from typing import Optional

from ..models import ChatMessage, ChatRole
from .assistant import WellnessAI


class AssistantChat:
    """
    The floating "ask anything" assistant.

    History lives for the browser session only.
    """

    def __init__(self, ai: Optional[WellnessAI] = None):
        self.ai = ai or WellnessAI()
        self.messages: list[ChatMessage] = []

    def greeting(self, first_name: str) -> str:
        return f"Hi {first_name}!"

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Send a user message and collect the reply.

        Blank input is ignored and returns None.
        """
        if not text or not text.strip():
            return None

        # The reply is based on the history before this turn
        history = list(self.messages)
        self.messages.append(ChatMessage(role=ChatRole.USER, content=text))

        reply_text = self.ai.chat_with_assistant(history, text)
        reply = ChatMessage(role=ChatRole.MODEL, content=reply_text)
        self.messages.append(reply)
        return reply

    def clear(self) -> None:
        self.messages = []


class SymptomChecker:
    """Single-shot symptom questions shown as a running conversation."""

    def __init__(self, ai: Optional[WellnessAI] = None):
        self.ai = ai or WellnessAI()
        self.messages: list[ChatMessage] = []

    def submit(self, description: str) -> Optional[ChatMessage]:
        """Ask about a symptom. Blank input is ignored."""
        if not description or not description.strip():
            return None

        self.messages.append(ChatMessage(role=ChatRole.USER, content=description))
        answer = ChatMessage(role=ChatRole.MODEL, content=self.ai.check_symptoms(description))
        self.messages.append(answer)
        return answer

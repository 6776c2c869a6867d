"""Quiz flow for the personality hub."""

from dataclasses import dataclass
from typing import Optional

from ..models import PersonalityResult
from .assistant import WellnessAI


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: tuple[str, ...]


QUESTIONS = (
    QuizQuestion(
        "How do you prefer to spend your energy?",
        ("Exploring nature 🌲", "Solving puzzles 🧩", "Helping others 🤝", "Creating art 🎨"),
    ),
    QuizQuestion(
        "When facing a challenge, you:",
        ("Charge forward ⚔️", "Analyze the details 🔍", "Seek advice 🗣️", "Find a workaround 🌀"),
    ),
    QuizQuestion(
        "Your ideal recovery day involves:",
        ("Intense workout 🏋️", "Reading/Learning 📚", "Meditation/Nap 🧘", "Socializing 🎉"),
    ),
    QuizQuestion(
        "Which element resonates with you?",
        ("Fire (Passion) 🔥", "Water (Flow) 💧", "Earth (Stability) 🌍", "Air (Freedom) 🌬️"),
    ),
    QuizQuestion(
        "What is your main health goal?",
        ("Strength 💪", "Peace of Mind 🧠", "Longevity ⏳", "Balance ⚖️"),
    ),
)


class QuizError(ValueError):
    """Raised for answers the quiz cannot accept."""


class PersonalityQuiz:
    """
    Walks through the fixed questions one at a time.

    The AI is consulted once, right after the last answer.
    """

    def __init__(self, ai: Optional[WellnessAI] = None, questions: tuple[QuizQuestion, ...] = QUESTIONS):
        self.ai = ai or WellnessAI()
        self.questions = questions
        self.step = 0
        self.answers: list[dict] = []
        self.result: Optional[PersonalityResult] = None
        self.failed = False

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return len(self.answers) == self.total

    @property
    def current(self) -> Optional[QuizQuestion]:
        if self.is_finished:
            return None
        return self.questions[self.step]

    @property
    def progress(self) -> int:
        """Percent shown on the progress bar for the current question."""
        return round((self.step + 1) / self.total * 100)

    def select(self, option: str) -> Optional[PersonalityResult]:
        """
        Record an answer for the current question.

        Returns:
            The personality result once the last question is answered
        """
        question = self.current
        if question is None:
            raise QuizError("The quiz is already complete")
        if option not in question.options:
            raise QuizError(f"Unknown option: {option}")

        self.answers.append({"question": question.question, "answer": option})

        if self.step < self.total - 1:
            self.step += 1
            return None

        self.result = self.ai.analyze_personality(self.answers)
        self.failed = self.result is None
        return self.result

    def reset(self) -> None:
        self.step = 0
        self.answers = []
        self.result = None
        self.failed = False

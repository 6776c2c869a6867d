"""Per-browser session state for the web UI."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from fastapi import Request, Response

from ..services import (
    AssistantChat,
    HydrationReminder,
    PersonalityQuiz,
    PhysicalWellness,
    SymptomChecker,
    WellnessAI,
    ZenGame,
)
from ..services.medical import ScanResult
from ..utils.config import get_settings

SESSION_COOKIE = "healthguard_session"


@dataclass
class WellnessSession:
    """Component-local state that only lives while the browser tab does."""
    id: str
    chat: AssistantChat
    symptoms: SymptomChecker
    quiz: PersonalityQuiz
    game: ZenGame
    physical: PhysicalWellness
    hydration: HydrationReminder
    last_scan: Optional[ScanResult] = None
    nearby_results: Optional[str] = None
    game_mode: bool = False


# Store sessions in memory, least recently used dropped first
MAX_SESSIONS = 200
_sessions: "OrderedDict[str, WellnessSession]" = OrderedDict()


def new_session(session_id: Optional[str] = None, ai: Optional[WellnessAI] = None) -> WellnessSession:
    """Build fresh state for a browser."""
    ai = ai or get_ai()
    return WellnessSession(
        id=session_id or str(uuid4()),
        chat=AssistantChat(ai),
        symptoms=SymptomChecker(ai),
        quiz=PersonalityQuiz(ai),
        game=ZenGame(),
        physical=PhysicalWellness(ai),
        hydration=HydrationReminder(get_settings().hydration_reminder_minutes),
    )


def find_session(request: Request) -> Optional[WellnessSession]:
    """The session for this request's cookie, without creating one."""
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id and session_id in _sessions:
        _sessions.move_to_end(session_id)
        return _sessions[session_id]
    return None


def get_session(request: Request) -> WellnessSession:
    """Get or create the session for this request's cookie."""
    session = find_session(request)
    if session is not None:
        return session

    session = new_session(request.cookies.get(SESSION_COOKIE))
    _sessions[session.id] = session
    while len(_sessions) > MAX_SESSIONS:
        _sessions.popitem(last=False)
    return session


def end_session(request: Request) -> None:
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id:
        _sessions.pop(session_id, None)


def attach_cookie(response: Response, session: WellnessSession) -> Response:
    response.set_cookie(SESSION_COOKIE, session.id, httponly=True, samesite="lax")
    return response


_ai: Optional[WellnessAI] = None


def get_ai() -> WellnessAI:
    """Shared AI wrapper; clients are created lazily on first use."""
    global _ai
    if _ai is None:
        _ai = WellnessAI()
    return _ai


def set_ai(ai: Optional[WellnessAI]) -> None:
    """Swap the shared AI wrapper (used by tests)."""
    global _ai
    _ai = ai
    _sessions.clear()

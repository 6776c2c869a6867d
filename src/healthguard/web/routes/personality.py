"""Routes for the personality hub quiz."""

from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from ...services.personality import QuizError
from ..pages import redirect, render, signed_in
from ..sessions import get_session

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def quiz_page(request: Request, error: Optional[str] = None):
    """Current question, or the result once the quiz is done."""
    if not signed_in():
        return redirect("/")
    session = get_session(request)
    return render(request, session, "personality.html", quiz=session.quiz, error=error)


@router.post("/answer")
async def answer(request: Request, option: str = Form(...)):
    """Record an answer; the last one triggers the AI reading."""
    session = get_session(request)
    try:
        session.quiz.select(option)
    except QuizError:
        # Stale form, e.g. after the back button
        return redirect("/personality?error=That+answer+no+longer+applies", session)
    return redirect("/personality", session)


@router.post("/reset")
async def reset(request: Request):
    session = get_session(request)
    session.quiz.reset()
    return redirect("/personality", session)

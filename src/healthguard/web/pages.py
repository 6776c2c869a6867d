"""Shared page rendering for the web routes."""

from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..services import ProfileService, WellnessStorage
from .sessions import WellnessSession, attach_cookie

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)

NAV_ITEMS = (
    ("/dashboard", "Dashboard", "📊"),
    ("/personality", "Personality Hub", "🧬"),
    ("/mental", "Mental Wellness", "🧠"),
    ("/physical", "Physical & Focus", "💪"),
    ("/medical", "Medical Assist", "🩺"),
)


def render(
    request: Request,
    session: WellnessSession,
    template: str,
    **context,
) -> HTMLResponse:
    """Render a page inside the app layout."""
    with WellnessStorage() as storage:
        profile = ProfileService(storage)
        user = profile.user
        stats = profile.stats()
        dark_mode = profile.dark_mode

    response = templates.TemplateResponse(
        request,
        template,
        {
            "user": user,
            "stats": stats,
            "dark_mode": dark_mode,
            "session": session,
            "nav_items": NAV_ITEMS,
            "show_hydration_alert": session.hydration.check(stats),
            **context,
        },
    )
    return attach_cookie(response, session)


def redirect(url: str, session: Optional[WellnessSession] = None) -> RedirectResponse:
    """Post/redirect/get helper that keeps the session cookie, if any."""
    response = RedirectResponse(url=url, status_code=303)
    if session is not None:
        attach_cookie(response, session)
    return response


def signed_in() -> bool:
    with WellnessStorage() as storage:
        return ProfileService(storage).is_signed_in

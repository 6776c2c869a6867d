"""Routes for the home dashboard."""

from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from ...services import DashboardService, ProfileService, WellnessStorage
from ..pages import redirect, render, signed_in
from ..sessions import get_ai, get_session

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request, error: Optional[str] = None):
    """Stats, daily content and the weekly activity chart."""
    if not signed_in():
        return redirect("/")
    session = get_session(request)

    with WellnessStorage() as storage:
        service = DashboardService(storage, get_ai())
        content = service.daily_content()
        weekly = service.weekly_activity()
        summary = service.weekly_summary()

    max_steps = max([d["steps"] for d in weekly] + [1])

    return render(
        request,
        session,
        "dashboard.html",
        content=content,
        weekly=weekly,
        weekly_max=max_steps,
        summary=summary,
        error=error,
    )


@router.post("/water")
async def log_water(request: Request):
    """One glass of water (+1 coin)."""
    session = get_session(request)
    with WellnessStorage() as storage:
        ProfileService(storage).log_water()
    session.hydration.record_drink()
    return redirect("/dashboard", session)


@router.post("/goal")
async def save_goal(request: Request, step_goal: str = Form(default="")):
    """Update the step goal; invalid input is ignored."""
    session = get_session(request)
    with WellnessStorage() as storage:
        ProfileService(storage).set_step_goal(step_goal)
    return redirect("/dashboard", session)


@router.post("/reward")
async def claim_reward(request: Request):
    session = get_session(request)
    with WellnessStorage() as storage:
        ProfileService(storage).claim_daily_reward()
    return redirect("/dashboard", session)


@router.post("/stats")
async def log_stats(
    request: Request,
    steps: Optional[int] = Form(default=None),
    sleep_hours: Optional[float] = Form(default=None),
    screen_time_hours: Optional[float] = Form(default=None),
):
    """Log steps (added to today's total), sleep and screen time."""
    session = get_session(request)
    try:
        with WellnessStorage() as storage:
            profile = ProfileService(storage)
            if steps:
                profile.log_steps(steps)
            if sleep_hours is not None:
                profile.log_sleep(sleep_hours)
            if screen_time_hours is not None:
                profile.log_screen_time(screen_time_hours)
    except (ValueError, ValidationError):
        return redirect("/dashboard?error=Please+enter+realistic+values", session)
    return redirect("/dashboard", session)

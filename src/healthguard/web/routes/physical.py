"""Routes for physical wellness and focus mode."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from ...services import ProfileService, WellnessStorage
from ...services.workouts import DIFFICULTIES, TARGET_AREAS
from ..pages import redirect, render, signed_in
from ..sessions import get_session

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def physical_page(request: Request, completed: bool = False):
    if not signed_in():
        return redirect("/")
    session = get_session(request)
    return render(
        request,
        session,
        "physical.html",
        physical=session.physical,
        target_areas=TARGET_AREAS,
        difficulties=DIFFICULTIES,
        completed=completed,
    )


@router.post("/generate")
async def generate(
    request: Request,
    target: str = Form(default=TARGET_AREAS[0]),
    difficulty: str = Form(default=DIFFICULTIES[0]),
):
    """Ask the AI for a routine."""
    session = get_session(request)
    if target in TARGET_AREAS and difficulty in DIFFICULTIES:
        session.physical.generate(target, difficulty)
    return redirect("/physical", session)


@router.post("/focus")
async def toggle_focus(request: Request):
    session = get_session(request)
    session.physical.toggle_focus()
    return redirect("/physical", session)


@router.post("/complete")
async def complete(request: Request):
    """Finish the routine (+50 coins)."""
    session = get_session(request)
    with WellnessStorage() as storage:
        done = session.physical.complete(ProfileService(storage))
    return redirect(f"/physical?completed={'true' if done else 'false'}", session)

"""Routes for the welcome screen and account actions."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...services import ProfileService, WellnessStorage
from ..pages import redirect, signed_in, templates
from ..sessions import end_session, find_session, get_session

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def welcome(request: Request):
    """Welcome screen, or straight to the dashboard when signed in."""
    if signed_in():
        return redirect("/dashboard", find_session(request))
    return templates.TemplateResponse(request, "welcome.html", {})


@router.post("/start")
async def start(request: Request):
    """Begin as the guest explorer."""
    session = get_session(request)
    with WellnessStorage() as storage:
        ProfileService(storage).start_guest()
    return redirect("/dashboard", session)


@router.post("/logout")
async def logout(request: Request):
    """Sign out and drop the browser's session state."""
    with WellnessStorage() as storage:
        ProfileService(storage).logout()
    end_session(request)
    return redirect("/")


@router.post("/theme")
async def toggle_theme(request: Request):
    """Flip dark mode and return to the page we came from."""
    with WellnessStorage() as storage:
        ProfileService(storage).toggle_dark_mode()
    return redirect(request.headers.get("referer") or "/dashboard", find_session(request))

"""JSON routes polled by the hydration reminder banner."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...services import ProfileService, WellnessStorage
from ..sessions import attach_cookie, get_session

router = APIRouter()


@router.get("/status")
async def reminder_status(request: Request):
    """Whether the "time for a sip" alert should be showing."""
    session = get_session(request)
    with WellnessStorage() as storage:
        stats = ProfileService(storage).stats()

    response = JSONResponse({
        "show": session.hydration.check(stats),
        "minutes_since_drink": session.hydration.minutes_since_drink(),
        "water_intake": stats.water_intake,
        "water_goal": stats.water_goal,
    })
    return attach_cookie(response, session)


@router.post("/dismiss")
async def dismiss(request: Request):
    session = get_session(request)
    session.hydration.dismiss()
    return attach_cookie(JSONResponse({"success": True}), session)

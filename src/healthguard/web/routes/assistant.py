"""JSON routes for the floating AI assistant widget."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse

from ...services import ProfileService, WellnessStorage
from ..sessions import attach_cookie, get_session

router = APIRouter()


def _serialize(session) -> list[dict]:
    return [m.model_dump(mode="json") for m in session.chat.messages]


@router.get("/messages")
async def messages(request: Request):
    """Conversation so far, with a greeting for an empty chat."""
    session = get_session(request)
    with WellnessStorage() as storage:
        user = ProfileService(storage).user

    greeting = session.chat.greeting(user.first_name) if user else None
    response = JSONResponse({"messages": _serialize(session), "greeting": greeting})
    return attach_cookie(response, session)


@router.post("/message")
async def send_message(request: Request, message: str = Form(default="")):
    """Send a message to the assistant."""
    session = get_session(request)

    if not message.strip():
        response = JSONResponse(
            {"success": False, "error": "Message is empty"},
            status_code=400,
        )
        return attach_cookie(response, session)

    try:
        reply = session.chat.send(message)
        response = JSONResponse({
            "success": True,
            "message": reply.content,
            "messages": _serialize(session),
        })
    except Exception as e:
        response = JSONResponse({
            "success": False,
            "error": str(e)
        }, status_code=500)
    return attach_cookie(response, session)


@router.post("/clear")
async def clear(request: Request):
    session = get_session(request)
    session.chat.clear()
    return attach_cookie(JSONResponse({"success": True}), session)

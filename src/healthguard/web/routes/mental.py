"""Routes for the mental wellness sanctuary."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ...services import MentalWellness, WellnessStorage
from ...services.mood import ASPECT_RATIOS, EXERCISES
from ..pages import redirect, render, signed_in
from ..sessions import WellnessSession, attach_cookie, get_ai, get_session

router = APIRouter()


def _render_page(request: Request, session: WellnessSession, **context) -> HTMLResponse:
    with WellnessStorage() as storage:
        mood_log = MentalWellness(storage, get_ai()).mood_log(limit=10)
    return render(
        request,
        session,
        "mental.html",
        mood_log=mood_log,
        aspect_ratios=ASPECT_RATIOS,
        exercises=EXERCISES,
        game=session.game,
        game_mode=session.game_mode,
        **context,
    )


@router.get("/", response_class=HTMLResponse)
async def mental_page(request: Request):
    if not signed_in():
        return redirect("/")
    session = get_session(request)
    return _render_page(request, session)


@router.post("/analyze", response_class=HTMLResponse)
async def analyze(request: Request, mood: str = Form(default="")):
    """AI reflection on a note; flagged notes show the safety alert."""
    session = get_session(request)
    with WellnessStorage() as storage:
        result = MentalWellness(storage, get_ai()).analyze_text(mood)

    if result is None:
        return redirect("/mental", session)

    return _render_page(
        request,
        session,
        mood=mood,
        alert=result.alert,
        insight=result.insight,
        insight_failed=result.alert is None and result.insight is None,
    )


@router.post("/voice")
async def soothing_voice(request: Request, mood: str = Form(default="")):
    """Spoken calming message as MP3, or the safety alert as JSON."""
    session = get_session(request)
    with WellnessStorage() as storage:
        result = MentalWellness(storage, get_ai()).soothing_voice(mood)

    if result is None:
        response = JSONResponse({"success": False, "error": "Tell us how you feel first"}, status_code=400)
    elif result.alert:
        response = JSONResponse({
            "success": False,
            "alert": {
                "title": result.alert.title,
                "message": result.alert.message,
                "helpline": result.alert.helpline,
            },
        })
    elif result.audio is None:
        response = JSONResponse({"success": False, "error": "Voice is unavailable right now"}, status_code=503)
    else:
        response = Response(content=result.audio, media_type="audio/mpeg")
    return attach_cookie(response, session)


@router.post("/image", response_class=HTMLResponse)
async def generate_image(
    request: Request,
    prompt: str = Form(default=""),
    aspect_ratio: str = Form(default="1:1"),
):
    """Visualize a safe haven."""
    session = get_session(request)
    if aspect_ratio not in ASPECT_RATIOS:
        aspect_ratio = "1:1"

    with WellnessStorage() as storage:
        image = MentalWellness(storage, get_ai()).generate_image(prompt, aspect_ratio)

    return _render_page(
        request,
        session,
        visual_prompt=prompt,
        aspect_ratio=aspect_ratio,
        generated_image=image,
        image_failed=bool(prompt.strip()) and image is None,
    )


@router.post("/game/toggle")
async def toggle_game(request: Request):
    session = get_session(request)
    session.game_mode = not session.game_mode
    return redirect("/mental", session)


@router.post("/game/flip")
async def flip_card(request: Request, card_id: int = Form(...)):
    session = get_session(request)
    if 0 <= card_id < len(session.game.cards):
        session.game.flip(card_id)
    return redirect("/mental#zen-game", session)


@router.post("/game/new")
async def new_game(request: Request):
    session = get_session(request)
    session.game.new_game()
    return redirect("/mental#zen-game", session)

"""Routes for the medical assistant: symptoms, scans, nearby care, appointments."""

from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse

from ...services import AppointmentBook, ImageScanner, NearbyFinder, ScanMode, WellnessStorage
from ...services.appointments import REMINDER_CHOICES
from ..pages import redirect, render, signed_in
from ..sessions import get_ai, get_session

router = APIRouter()

TABS = ("symptom", "rx", "appointments", "nearby")


@router.get("/", response_class=HTMLResponse)
async def medical_page(request: Request, tab: str = "symptom", error: Optional[str] = None):
    if not signed_in():
        return redirect("/")
    session = get_session(request)
    if tab not in TABS:
        tab = "symptom"

    with WellnessStorage() as storage:
        book = AppointmentBook(storage)
        appointments = book.all()
        due = book.due_reminders()

    return render(
        request,
        session,
        "medical.html",
        tab=tab,
        messages=session.symptoms.messages,
        scan=session.last_scan,
        scan_modes=list(ScanMode),
        nearby_results=session.nearby_results,
        appointments=appointments,
        due_reminders=due,
        reminder_choices=REMINDER_CHOICES,
        error=error,
    )


@router.post("/symptoms")
async def check_symptoms(request: Request, message: str = Form(default="")):
    session = get_session(request)
    session.symptoms.submit(message)
    return redirect("/medical?tab=symptom", session)


@router.post("/scan")
async def scan_image(
    request: Request,
    mode: ScanMode = Form(default=ScanMode.PRESCRIPTION),
    image: UploadFile = File(...),
):
    """Read an uploaded prescription or X-ray."""
    session = get_session(request)
    data = await image.read()
    try:
        session.last_scan = ImageScanner(get_ai()).scan(data, image.content_type or "", mode)
    except ValueError as e:
        return redirect(f"/medical?tab=rx&error={quote(str(e))}", session)
    return redirect("/medical?tab=rx", session)


@router.post("/nearby")
async def find_nearby(request: Request, query: str = Form(default="")):
    session = get_session(request)
    results = NearbyFinder(get_ai()).find(query)
    if results is not None:
        session.nearby_results = results
    return redirect("/medical?tab=nearby", session)


@router.post("/appointments")
async def add_appointment(
    request: Request,
    doctor_name: str = Form(default=""),
    specialty: str = Form(default=""),
    date: str = Form(default=""),
    notes: str = Form(default=""),
    reminder_minutes: int = Form(default=0),
):
    """Book a visit; a doctor's name and a date are required."""
    session = get_session(request)
    try:
        with WellnessStorage() as storage:
            AppointmentBook(storage).add(
                doctor_name=doctor_name,
                date=date,
                specialty=specialty,
                notes=notes,
                reminder_minutes=reminder_minutes,
            )
    except ValueError:
        return redirect("/medical?tab=appointments&error=Invalid+date", session)
    return redirect("/medical?tab=appointments", session)


@router.post("/appointments/{appointment_id}/delete")
async def delete_appointment(request: Request, appointment_id: str):
    session = get_session(request)
    with WellnessStorage() as storage:
        AppointmentBook(storage).remove(appointment_id)
    return redirect("/medical?tab=appointments", session)

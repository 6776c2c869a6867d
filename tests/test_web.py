"""Tests for the web routes."""

import pytest
from fastapi.testclient import TestClient

from healthguard.services import AppointmentBook, ProfileService, WellnessStorage
from healthguard.services.personality import QUESTIONS
from healthguard.web import sessions
from healthguard.web.app import app
from healthguard.web.sessions import set_ai


@pytest.fixture
def client(env_data_dir, stub_ai):
    set_ai(stub_ai)
    with TestClient(app) as c:
        yield c
    set_ai(None)


@pytest.fixture
def signed_in(client):
    client.post("/start")
    return client


def current_user():
    with WellnessStorage() as storage:
        return ProfileService(storage).user


def current_stats():
    with WellnessStorage() as storage:
        return ProfileService(storage).stats()


class TestHome:
    """Tests for the welcome flow."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_welcome_when_signed_out(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Start your journey" in response.text

    def test_pages_redirect_when_signed_out(self, client):
        response = client.get("/dashboard", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"

    def test_browsing_signed_out_keeps_no_state(self, client):
        """Test that visitors who never start hold no server-side session."""
        client.get("/")
        client.get("/dashboard")
        assert len(sessions._sessions) == 0
        assert "healthguard_session" not in client.cookies

    def test_sessions_capped(self, client, monkeypatch):
        """Test that the oldest browser state is dropped past the limit."""
        monkeypatch.setattr(sessions, "MAX_SESSIONS", 2)
        for _ in range(3):
            client.cookies.clear()
            client.post("/hydration/dismiss")
        assert len(sessions._sessions) == 2

    def test_logout_drops_session(self, signed_in):
        signed_in.post("/logout")
        assert len(sessions._sessions) == 0

    def test_start_opens_dashboard(self, client, stub_ai):
        response = client.post("/start")
        assert response.status_code == 200
        assert "Hello, Wellness Explorer!" in response.text
        assert "Move a little every day." in response.text

    def test_logout(self, signed_in):
        signed_in.post("/logout")
        assert current_user() is None

    def test_theme_toggle(self, signed_in):
        signed_in.post("/theme")
        with WellnessStorage() as storage:
            assert ProfileService(storage).dark_mode is True


class TestDashboardRoutes:
    """Tests for logging from the dashboard."""

    def test_log_water(self, signed_in):
        signed_in.post("/dashboard/water")
        assert current_stats().water_intake == 1
        assert current_user().coins == 1

    def test_step_goal(self, signed_in):
        signed_in.post("/dashboard/goal", data={"step_goal": "7500"})
        assert current_stats().step_goal == 7500
        signed_in.post("/dashboard/goal", data={"step_goal": "lots"})
        assert current_stats().step_goal == 7500

    def test_log_stats(self, signed_in):
        signed_in.post("/dashboard/stats", data={"steps": "1200", "sleep_hours": "6.5"})
        stats = current_stats()
        assert stats.steps == 1200
        assert stats.sleep_hours == 6.5
        assert stats.screen_time_hours is None

    def test_unrealistic_stats(self, signed_in):
        response = signed_in.post("/dashboard/stats", data={"sleep_hours": "30"}, follow_redirects=False)
        assert "error=" in response.headers["location"]
        assert current_stats().sleep_hours is None

    def test_daily_reward(self, signed_in):
        signed_in.post("/dashboard/reward")
        assert current_user().coins == 10


class TestHydrationRoutes:
    def test_status(self, signed_in):
        data = signed_in.get("/hydration/status").json()
        assert data["show"] is False
        assert data["water_goal"] == 8

    def test_dismiss(self, signed_in):
        assert signed_in.post("/hydration/dismiss").json() == {"success": True}


class TestAssistantRoutes:
    """Tests for the chat widget API."""

    def test_send_message(self, signed_in):
        data = signed_in.post("/assistant/message", data={"message": "Is coffee dehydrating?"}).json()
        assert data["success"] is True
        assert data["message"] == "echo: Is coffee dehydrating?"
        assert len(data["messages"]) == 2

    def test_history_kept_per_session(self, signed_in):
        signed_in.post("/assistant/message", data={"message": "one"})
        data = signed_in.get("/assistant/messages").json()
        assert [m["content"] for m in data["messages"]] == ["one", "echo: one"]
        assert data["greeting"] == "Hi Wellness!"

    def test_empty_message(self, signed_in):
        response = signed_in.post("/assistant/message", data={"message": "  "})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_clear(self, signed_in):
        signed_in.post("/assistant/message", data={"message": "one"})
        signed_in.post("/assistant/clear")
        assert signed_in.get("/assistant/messages").json()["messages"] == []


class TestPersonalityRoutes:
    def test_full_quiz(self, signed_in, stub_ai):
        for question in QUESTIONS:
            response = signed_in.post("/personality/answer", data={"option": question.options[2]})
        assert "The Calm Explorer" in response.text
        assert len(stub_ai.called("personality")) == 1

    def test_stale_answer(self, signed_in):
        response = signed_in.post("/personality/answer", data={"option": "nope"}, follow_redirects=False)
        assert "error=" in response.headers["location"]


class TestMentalRoutes:
    """Tests for the mental wellness page."""

    def test_analyze(self, signed_in):
        response = signed_in.post("/mental/analyze", data={"mood": "Calm after a walk"})
        assert "AI Reflection" in response.text
        assert "hopeful" in response.text

    def test_analyze_flagged(self, signed_in, stub_ai):
        response = signed_in.post("/mental/analyze", data={"mood": "I want to end it all"})
        assert "You are not alone." in response.text
        assert stub_ai.called("mood") == []

    def test_voice(self, signed_in):
        response = signed_in.post("/mental/voice", data={"mood": "a little tense"})
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.content == b"ID3-fake-mp3"

    def test_voice_flagged(self, signed_in):
        data = signed_in.post("/mental/voice", data={"mood": "I will hurt myself"}).json()
        assert data["alert"]["title"] == "You are not alone."

    def test_voice_unavailable(self, signed_in, stub_ai):
        stub_ai.audio = None
        assert signed_in.post("/mental/voice", data={"mood": "tired"}).status_code == 503

    def test_image(self, signed_in):
        response = signed_in.post("/mental/image", data={"prompt": "a meadow", "aspect_ratio": "9:16"})
        assert "data:image/png;base64,AAAA" in response.text

    def test_game(self, signed_in):
        signed_in.post("/mental/game/toggle")
        response = signed_in.post("/mental/game/flip", data={"card_id": "0"})
        assert "Moves: 0" in response.text
        assert "Zen Match" in response.text


class TestPhysicalRoutes:
    def test_generate_and_complete(self, signed_in):
        response = signed_in.post("/physical/generate", data={"target": "Legs", "difficulty": "Beginner"})
        assert "Core Starter" in response.text

        response = signed_in.post("/physical/complete")
        assert "Workout Complete! +50 Coins" in response.text
        assert current_user().coins == 50


class TestMedicalRoutes:
    """Tests for the medical assistant tabs."""

    def test_add_appointment(self, signed_in):
        signed_in.post("/medical/appointments", data={
            "doctor_name": "Dr. Rivera",
            "specialty": "Cardiology",
            "date": "2030-06-01T09:30",
            "reminder_minutes": "60",
        })
        with WellnessStorage() as storage:
            appointments = AppointmentBook(storage).all()
        assert len(appointments) == 1
        assert appointments[0].reminder_minutes == 60

    def test_add_incomplete_appointment(self, signed_in):
        signed_in.post("/medical/appointments", data={"doctor_name": "Dr. Rivera"})
        with WellnessStorage() as storage:
            assert AppointmentBook(storage).all() == []

    def test_invalid_date(self, signed_in):
        response = signed_in.post(
            "/medical/appointments",
            data={"doctor_name": "Dr. Rivera", "date": "someday"},
            follow_redirects=False,
        )
        assert "Invalid+date" in response.headers["location"]

    def test_delete_appointment(self, signed_in):
        with WellnessStorage() as storage:
            appt = AppointmentBook(storage).add("Dr. Rivera", "2030-06-01T09:30")
        signed_in.post(f"/medical/appointments/{appt.id}/delete")
        with WellnessStorage() as storage:
            assert AppointmentBook(storage).all() == []

    def test_symptoms(self, signed_in):
        response = signed_in.post("/medical/symptoms", data={"message": "headache"})
        assert "Rest and drink fluids." in response.text

    def test_scan(self, signed_in):
        response = signed_in.post(
            "/medical/scan",
            data={"mode": "prescription"},
            files={"image": ("rx.png", b"\x89PNG", "image/png")},
        )
        assert "Amoxicillin" in response.text

    def test_scan_wrong_type(self, signed_in):
        response = signed_in.post(
            "/medical/scan",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            follow_redirects=False,
        )
        assert "error=" in response.headers["location"]

    def test_offset_appointment_page_renders(self, signed_in):
        signed_in.post("/medical/appointments", data={"doctor_name": "Dr. Lee", "date": "2030-01-01T10:00+02:00",
                                                     "reminder_minutes": "120"})
        response = signed_in.get("/medical?tab=appointments")
        assert response.status_code == 200
        assert "Dr. Lee" in response.text
        assert "2 hours before" in response.text

    def test_nearby(self, signed_in):
        response = signed_in.post("/medical/nearby", data={"query": "urgent care"})
        assert "Three places for urgent care." in response.text

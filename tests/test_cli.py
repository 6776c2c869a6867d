"""Tests for the command-line interface."""

from datetime import date, timedelta

import pytest
from typer.testing import CliRunner

from healthguard.cli import app, parse_date
from healthguard.services import AppointmentBook, ProfileService, WellnessStorage

runner = CliRunner()


class TestParseDate:
    """Tests for date argument parsing."""

    def test_relative(self):
        assert parse_date(None) == date.today()
        assert parse_date("yesterday") == date.today() - timedelta(days=1)
        assert parse_date("-7") == date.today() - timedelta(days=7)

    def test_empty_is_today(self):
        assert parse_date("") == date.today()
        assert parse_date("today") == date.today()

    def test_absolute(self):
        assert parse_date("2025-03-14") == date(2025, 3, 14)


@pytest.mark.usefixtures("env_data_dir")
class TestCommands:
    """Tests for the logging commands."""

    def test_water(self):
        result = runner.invoke(app, ["water"])
        assert result.exit_code == 0
        assert "1/8 glasses" in result.output
        with WellnessStorage() as storage:
            assert ProfileService(storage).user.coins == 1

    def test_steps_and_sleep(self):
        runner.invoke(app, ["steps", "2500"])
        runner.invoke(app, ["steps", "500"])
        result = runner.invoke(app, ["sleep", "7.5"])
        assert result.exit_code == 0
        with WellnessStorage() as storage:
            stats = ProfileService(storage).stats()
        assert stats.steps == 3000
        assert stats.sleep_hours == 7.5

    def test_bad_sleep(self):
        result = runner.invoke(app, ["sleep", "30"])
        assert result.exit_code == 1

    def test_goal(self):
        assert runner.invoke(app, ["goal", "9000"]).exit_code == 0
        assert runner.invoke(app, ["goal", "zero"]).exit_code == 1
        with WellnessStorage() as storage:
            assert ProfileService(storage).stats().step_goal == 9000

    def test_appointments(self):
        result = runner.invoke(app, ["add-appointment", "Dr. Osei", "2030-01-15T14:00", "-s", "ENT"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["appointments"])
        assert "Dr. Osei" in result.output

        with WellnessStorage() as storage:
            appt_id = AppointmentBook(storage).all()[0].id
        assert runner.invoke(app, ["remove-appointment", appt_id[:8]]).exit_code == 0
        with WellnessStorage() as storage:
            assert AppointmentBook(storage).all() == []

    def test_add_appointment_bad_date(self):
        assert runner.invoke(app, ["add-appointment", "Dr. Osei", "soon"]).exit_code == 1

    def test_mood_flagged(self):
        """Test that the safety panel is shown without needing an AI key."""
        result = runner.invoke(app, ["mood", "I want to give up"])
        assert result.exit_code == 0
        assert "You are not alone." in result.output

    def test_week(self):
        runner.invoke(app, ["steps", "4000"])
        result = runner.invoke(app, ["week"])
        assert result.exit_code == 0
        assert "4,000" in result.output

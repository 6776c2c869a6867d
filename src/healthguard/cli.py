"""Command-line interface for HealthGuard."""

from datetime import date, datetime, timedelta
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .services import AppointmentBook, DashboardService, MentalWellness, ProfileService, WellnessStorage

app = typer.Typer(
    name="healthguard",
    help="HealthGuard - Track hydration, sleep and steps with an AI wellness assistant",
    no_args_is_help=True,
)
console = Console()


def parse_date(date_str: Optional[str]) -> date:
    """Parse a date string or return today.

    Supports:
    - None or empty: today
    - "today": today
    - "yesterday": yesterday
    - "-N": N days ago (e.g., "-1" = yesterday, "-7" = a week ago)
    - "YYYY-MM-DD": specific date
    """
    if not date_str or date_str.lower() == "today":
        return date.today()

    if date_str.lower() == "yesterday":
        return date.today() - timedelta(days=1)

    # Relative days: -1, -2, -7, etc.
    if date_str.startswith("-") and date_str[1:].isdigit():
        days_ago = int(date_str[1:])
        return date.today() - timedelta(days=days_ago)

    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Invalid date format: {date_str}[/red]")
        console.print("[dim]Use: YYYY-MM-DD, 'yesterday', or -N (days ago)[/dim]")
        raise typer.Exit(1)


def _profile(storage: WellnessStorage) -> ProfileService:
    profile = ProfileService(storage)
    profile.start_guest()
    return profile


def _update(action, *args, stat_date: date):
    """Run a stats update, turning validation errors into a clean exit."""
    with WellnessStorage() as storage:
        profile = _profile(storage)
        try:
            stats = action(profile, *args, stat_date=stat_date)
        except (ValueError, ValidationError) as e:
            console.print(f"[red]Invalid value: {e}[/red]")
            raise typer.Exit(1)
    console.print(f"[green]✓[/green] {stats.summary()}")


@app.command()
def show(
    date_str: Optional[str] = typer.Argument(
        None,
        help="Date to show (YYYY-MM-DD). Defaults to today.",
    ),
):
    """Show a day's stats."""
    stat_date = parse_date(date_str)

    with WellnessStorage() as storage:
        profile = _profile(storage)
        stats = profile.stats(stat_date)
        user = profile.user

    console.print(Panel(
        stats.summary(),
        title=f"❤️ {stat_date.strftime('%A, %B %d, %Y')}",
    ))

    if stats.step_goal_met:
        console.print("[green]Step goal reached![/green]")
    if stats.hydration_goal_met:
        console.print("[green]Hydration goal reached![/green]")
    console.print(f"🪙 {user.coins} coins")


@app.command()
def water(
    date_str: Optional[str] = typer.Option(
        None, "--date", "-d",
        help="Date (YYYY-MM-DD). Defaults to today.",
    ),
):
    """Log one glass of water (+1 coin)."""
    stat_date = parse_date(date_str)

    with WellnessStorage() as storage:
        profile = _profile(storage)
        stats = profile.log_water(stat_date)
        coins = profile.user.coins

    console.print(f"💧 {stats.water_intake}/{stats.water_goal} glasses  [dim]({coins} coins)[/dim]")


@app.command()
def steps(
    count: int = typer.Argument(..., help="Steps to add to the day's total"),
    date_str: Optional[str] = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD)"),
):
    """Add steps."""
    _update(ProfileService.log_steps, count, stat_date=parse_date(date_str))


@app.command()
def sleep(
    hours: float = typer.Argument(..., help="Hours slept"),
    date_str: Optional[str] = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD)"),
):
    """Log hours of sleep."""
    _update(ProfileService.log_sleep, hours, stat_date=parse_date(date_str))


@app.command()
def screen(
    hours: float = typer.Argument(..., help="Hours of screen time"),
    date_str: Optional[str] = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD)"),
):
    """Log hours of screen time."""
    _update(ProfileService.log_screen_time, hours, stat_date=parse_date(date_str))


@app.command()
def goal(
    step_goal: str = typer.Argument(..., help="New daily step goal"),
):
    """Change the daily step goal."""
    if not step_goal.strip().isdigit() or int(step_goal) <= 0:
        console.print("[red]Goal must be a positive whole number[/red]")
        raise typer.Exit(1)

    with WellnessStorage() as storage:
        stats = _profile(storage).set_step_goal(step_goal)

    console.print(f"[green]✓[/green] Step goal: {stats.step_goal:,}")


@app.command()
def week():
    """Show the last seven days."""
    with WellnessStorage() as storage:
        df = DashboardService(storage).build_dataframe()

    table = Table(title="Weekly Activity")
    table.add_column("Day", style="cyan")
    table.add_column("Steps", justify="right")
    table.add_column("Water", justify="center")
    table.add_column("Sleep", justify="center")

    for day, row in df.iterrows():
        table.add_row(
            day.strftime("%a %Y-%m-%d"),
            f"{int(row['steps']):,}",
            str(int(row["water_intake"])),
            f"{row['sleep_hours']:.1f}h" if row["sleep_hours"] else "-",
        )

    console.print(table)


@app.command()
def appointments():
    """List appointments."""
    with WellnessStorage() as storage:
        book = AppointmentBook(storage)
        items = book.all()
        due = {a.id for a in book.due_reminders()}

    if not items:
        console.print("[yellow]No appointments[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Appointments")
    table.add_column("When", style="cyan")
    table.add_column("Doctor")
    table.add_column("Specialty")
    table.add_column("Reminder")
    table.add_column("ID", style="dim")

    for appt in items:
        reminder = appt.reminder_label or "-"
        if appt.id in due:
            reminder = f"[bold yellow]🔔 {reminder}[/bold yellow]"
        table.add_row(
            appt.date.strftime("%Y-%m-%d %H:%M"),
            appt.doctor_name,
            appt.specialty or "-",
            reminder,
            appt.id[:8],
        )

    console.print(table)


@app.command(name="add-appointment")
def add_appointment(
    doctor_name: str = typer.Argument(..., help="Doctor's name"),
    when: str = typer.Argument(..., help="Date and time, e.g. 2025-03-14T10:00"),
    specialty: str = typer.Option("", "--specialty", "-s"),
    notes: Optional[str] = typer.Option(None, "--notes", "-n"),
    reminder: int = typer.Option(0, "--reminder", "-r", help="Minutes before to remind"),
):
    """Book an appointment."""
    with WellnessStorage() as storage:
        try:
            appt = AppointmentBook(storage).add(doctor_name, when, specialty, notes, reminder)
        except ValueError:
            console.print(f"[red]Invalid date: {when}[/red]")
            raise typer.Exit(1)

    if appt is None:
        console.print("[red]A doctor name and a date are required[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {appt.doctor_name} on {appt.date:%A, %B %d at %H:%M}")


@app.command(name="remove-appointment")
def remove_appointment(
    appointment_id: str = typer.Argument(..., help="Appointment ID (prefix is fine)"),
):
    """Delete an appointment."""
    with WellnessStorage() as storage:
        book = AppointmentBook(storage)
        matches = [a for a in book.all() if a.id.startswith(appointment_id)]
        if len(matches) != 1:
            console.print(f"[red]No unique appointment matches '{appointment_id}'[/red]")
            raise typer.Exit(1)
        book.remove(matches[0].id)

    console.print(f"[green]✓ Removed appointment with {matches[0].doctor_name}[/green]")


@app.command()
def mood(
    note: str = typer.Argument(..., help="How are you feeling right now?"),
):
    """Reflect on a mood note with the AI and add it to the journal."""
    with WellnessStorage() as storage:
        result = MentalWellness(storage).analyze_text(note)

    if result is None:
        console.print("[yellow]Nothing to analyze[/yellow]")
        raise typer.Exit(1)

    if result.alert:
        console.print(Panel(
            f"{result.alert.message}\n\n[bold]Call or text {result.alert.helpline}[/bold]",
            title=result.alert.title,
            border_style="red",
        ))
        raise typer.Exit(0)

    if result.insight is None:
        console.print("[red]The AI couldn't reflect on that right now[/red]")
        raise typer.Exit(1)

    insight = result.insight
    console.print(Panel(
        f"{insight.insight}\n\n"
        f"[dim]Sentiment: {insight.sentiment} · Tone: {insight.tone} · "
        f"Themes: {', '.join(insight.themes) or '-'}[/dim]",
        title="AI Reflection",
    ))


@app.command()
def status():
    """Show configuration status."""
    from .utils.config import get_settings

    settings = get_settings()

    table = Table(title="Configuration Status")
    table.add_column("Provider", style="cyan")
    table.add_column("Status", justify="center")

    providers = [
        ("Chat & image reading (Claude)", settings.has_claude),
        ("Chat fallback, images & voice (OpenAI)", settings.has_openai),
        ("Nearby search location", settings.has_location),
    ]

    for name, configured in providers:
        state = "[green]✓ Configured[/green]" if configured else "[yellow]Not configured[/yellow]"
        table.add_row(name, state)

    console.print(table)
    console.print(f"\nData directory: {settings.data_dir.absolute()}")
    console.print(f"Hydration reminder: every {settings.hydration_reminder_minutes} min")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
):
    """Start the web interface."""
    from .web import run

    console.print(f"[green]Starting web interface at http://{host}:{port}[/green]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    run(host=host, port=port)


if __name__ == "__main__":
    app()

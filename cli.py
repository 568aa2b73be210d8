"""CLI commands for event RSVP management."""

import asyncio
from datetime import UTC, datetime

import typer

from src.config.settings import settings
from src.email_service import get_mail_transport
from src.rsvp.dtos import RSVPSubmission
from src.rsvp.notifier import RSVPNotifier
from src.sheets import get_spreadsheet_appender

app = typer.Typer(help="CLI commands for event RSVP management")


@app.command()
def show_config():
    """Print the event details and which integrations are configured."""
    event = settings.event_details
    typer.secho("Event", fg=typer.colors.GREEN)
    typer.echo(f"  Date:     {event.date}")
    typer.echo(f"  Time:     {event.time}")
    typer.echo(f"  Venue:    {event.venue}")
    typer.echo(f"  Location: {event.location}")
    typer.echo(f"  Map:      {event.map_link}")
    typer.echo(f"  Attire:   male={event.attire_male!r} female={event.attire_female!r}")

    transport = "Resend" if settings.resend_api_key else f"SMTP {settings.smtp_host}:{settings.smtp_port}"
    typer.secho("Email", fg=typer.colors.GREEN)
    typer.echo(f"  Transport: {transport}")
    typer.echo(f"  From:      {settings.email_from}")
    typer.echo(f"  Admin:     {settings.email_admin}")

    typer.secho("Google Sheets", fg=typer.colors.GREEN)
    typer.echo(f"  Sheet ID:  {settings.google_sheets_id or '(not set)'}")
    typer.echo(f"  Enabled:   {settings.log_to_spreadsheet}")


async def _send_test_emails(to: str, name: str, gender: str):
    notifier = RSVPNotifier(
        mail_transport=get_mail_transport(settings),
        event=settings.event_details,
        from_address=settings.email_from,
        admin_address=settings.email_admin,
    )
    submission = RSVPSubmission(attending="yes", full_name=name, email=to, gender=gender)
    return await notifier.notify(submission, datetime.now(UTC))


@app.command()
def send_test_email(
    to: str = typer.Option(..., help="Guest address for the confirmation email"),
    name: str = typer.Option("Test Guest", help="Guest name"),
    gender: str = typer.Option("female", help="Gender used to pick the attire"),
):
    """Send a guest confirmation and an admin notice through the configured transport."""
    results = asyncio.run(_send_test_emails(to, name, gender))

    failed = False
    for result in results:
        color = typer.colors.GREEN if result.sent else typer.colors.RED
        typer.secho(f"{result.kind.value}: {'sent' if result.sent else 'failed'}", fg=color)
        failed = failed or not result.sent

    if failed:
        raise typer.Exit(code=1)


@app.command()
def test_sheets(
    range_: str = typer.Option("Sheet1!A:C", "--range", help="A1 range to append to"),
):
    """Append a test row to the configured Google Sheet."""
    if not settings.google_sheets_id:
        typer.secho("GOOGLE_SHEETS_ID is not set", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho("Testing Google Sheets integration...", fg=typer.colors.BLUE)
    typer.echo(f"Sheet ID: {settings.google_sheets_id}")
    typer.echo(f"Service Account: {settings.google_service_account_email}")

    appender = get_spreadsheet_appender(settings)
    row = ["Test User", "test@example.com", datetime.now(UTC).isoformat()]
    try:
        response = asyncio.run(appender.append_row(settings.google_sheets_id, range_, row))
    except Exception as e:
        typer.secho(f"Error testing Google Sheets integration: {e}", fg=typer.colors.RED)
        if "DECODER" in str(e) or "PEM" in str(e):
            typer.echo("This is likely an issue with the private key format. Please check:")
            typer.echo("1. Make sure the key is properly formatted with \\n for newlines")
            typer.echo("2. Check that the service account has edit access to the sheet")
        raise typer.Exit(code=1)

    typer.secho(f"Success! Data added to sheet: {response}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()

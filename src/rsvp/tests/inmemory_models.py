"""In-memory collaborators for testing - no SMTP server or Google account required."""

from src.config.settings import EventDetails
from src.email_service.base import MailTransport
from src.rsvp.dispatcher import SubmissionDispatcher
from src.rsvp.notifier import RSVPNotifier
from src.rsvp.spreadsheet import SpreadsheetLogger
from src.sheets.base import SpreadsheetAppender

ADMIN_ADDRESS = "organizer@test.example"
FROM_ADDRESS = "rsvp@test.example"


class InMemoryMailTransport(MailTransport):
    """Records emails instead of sending them.

    ``fail_for`` lists recipient addresses whose sends raise.
    """

    def __init__(self, fail_for: set[str] | None = None):
        self.sent_emails: list[dict] = []
        self.attempts: list[str] = []
        self.fail_for = fail_for or set()

    async def send(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> None:
        self.attempts.append(to_address)
        if to_address in self.fail_for:
            raise ConnectionError(f"SMTP connection refused for {to_address}")
        self.sent_emails.append({
            "from_address": from_address,
            "to_address": to_address,
            "subject": subject,
            "html_body": html_body,
            "text_body": text_body,
        })

    def sent_to(self, address: str) -> list[dict]:
        return [email for email in self.sent_emails if email["to_address"] == address]


class InMemorySpreadsheetAppender(SpreadsheetAppender):
    """Keeps appended rows in a list."""

    def __init__(self, should_fail: bool = False):
        self.rows: list[dict] = []
        self.should_fail = should_fail

    async def append_row(self, target_id: str, range_: str, values: list[str]) -> dict:
        if self.should_fail:
            raise RuntimeError("Sheets API unavailable")
        self.rows.append({"target_id": target_id, "range": range_, "values": values})
        return {"updates": {"updatedRows": 1}}


# =============================================================================
# Factory Functions for Tests
# =============================================================================


def create_test_event() -> EventDetails:
    return EventDetails(
        date="Saturday, June 6, 2026",
        time="1:00 PM",
        venue="Test Garden Hall",
        attire_male="Agbada and Fila",
        attire_female="Gele and Iro",
        location="12 Test Street, Lagos",
        map_link="https://maps.google.com/?q=Test+Garden+Hall",
    )


def create_test_notifier(
    mail_transport: InMemoryMailTransport | None = None,
    event: EventDetails | None = None,
) -> RSVPNotifier:
    return RSVPNotifier(
        mail_transport=mail_transport or InMemoryMailTransport(),
        event=event or create_test_event(),
        from_address=FROM_ADDRESS,
        admin_address=ADMIN_ADDRESS,
    )


def create_test_dispatcher(
    mail_transport: InMemoryMailTransport | None = None,
    appender: InMemorySpreadsheetAppender | None = None,
    target_id: str = "test-sheet-id",
) -> SubmissionDispatcher:
    spreadsheet_logger = None
    if appender is not None:
        spreadsheet_logger = SpreadsheetLogger(appender=appender, target_id=target_id)
    return SubmissionDispatcher(
        notifier=create_test_notifier(mail_transport=mail_transport),
        spreadsheet_logger=spreadsheet_logger,
    )

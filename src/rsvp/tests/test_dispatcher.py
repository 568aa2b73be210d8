import logging
from datetime import UTC, datetime

import pytest

from src.rsvp.dispatcher import SubmissionDispatcher
from src.rsvp.dtos import NotificationKind, RSVPSubmission
from src.rsvp.tests.inmemory_models import (
    ADMIN_ADDRESS,
    InMemoryMailTransport,
    InMemorySpreadsheetAppender,
    create_test_dispatcher,
)

SUBMITTED_AT = datetime(2026, 5, 1, 14, 30, tzinfo=UTC)
SUBMISSION = RSVPSubmission(
    attending="yes", full_name="Jane Doe", email="jane@example.com", gender="female"
)


class BrokenNotifier:
    """Notifier whose sends blow up outside of the transport boundary."""

    async def send_guest_confirmation(self, submission):
        raise RuntimeError("template error")

    async def send_admin_notice(self, submission, submitted_at):
        raise RuntimeError("template error")


@pytest.mark.asyncio
async def test_dispatch_without_spreadsheet_sends_two_emails():
    mail_transport = InMemoryMailTransport()
    dispatcher = create_test_dispatcher(mail_transport=mail_transport)

    results = await dispatcher.dispatch(SUBMISSION, SUBMITTED_AT)

    assert [r.kind for r in results] == [
        NotificationKind.GUEST_CONFIRMATION,
        NotificationKind.ADMIN_NOTICE,
    ]
    assert all(r.sent for r in results)
    assert len(mail_transport.sent_emails) == 2


@pytest.mark.asyncio
async def test_dispatch_with_spreadsheet_appends_row():
    appender = InMemorySpreadsheetAppender()
    dispatcher = create_test_dispatcher(appender=appender)

    results = await dispatcher.dispatch(SUBMISSION, SUBMITTED_AT)

    assert len(results) == 3
    assert results[2].kind == NotificationKind.SPREADSHEET_ROW
    assert results[2].sent is True
    assert len(appender.rows) == 1


@pytest.mark.asyncio
async def test_dispatch_reports_partial_failure(caplog):
    mail_transport = InMemoryMailTransport(fail_for={ADMIN_ADDRESS})
    dispatcher = create_test_dispatcher(mail_transport=mail_transport)

    with caplog.at_level(logging.INFO):
        results = await dispatcher.dispatch(SUBMISSION, SUBMITTED_AT)

    assert [r.sent for r in results] == [True, False]
    assert "Emails sent: Guest: True, Admin: False" in caplog.text
    assert "RSVP SUBMISSION: Jane Doe, jane@example.com, female" in caplog.text


@pytest.mark.asyncio
async def test_dispatch_swallows_unexpected_errors(caplog):
    dispatcher = SubmissionDispatcher(notifier=BrokenNotifier())

    results = await dispatcher.dispatch(SUBMISSION, SUBMITTED_AT)

    assert results == []
    assert "Background processing failed" in caplog.text

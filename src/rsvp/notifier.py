import asyncio
import logging
from datetime import datetime
from html import escape

from src.config.settings import EventDetails
from src.email_service.base import MailTransport
from src.rsvp.dtos import NotificationKind, NotificationResult, RSVPSubmission
from src.rsvp.templates import EmailTemplates

logger = logging.getLogger(__name__)


class RSVPNotifier:
    """Sends the guest confirmation and the admin notice for an RSVP.

    Transport failures are logged and reported as ``sent=False``; nothing is
    raised to the caller.
    """

    def __init__(
        self,
        mail_transport: MailTransport,
        event: EventDetails,
        from_address: str,
        admin_address: str,
    ):
        self.mail_transport = mail_transport
        self.event = event
        self.from_address = from_address
        self.admin_address = admin_address

    async def notify(
        self, submission: RSVPSubmission, submitted_at: datetime
    ) -> tuple[NotificationResult, NotificationResult]:
        guest_result, admin_result = await asyncio.gather(
            self.send_guest_confirmation(submission),
            self.send_admin_notice(submission, submitted_at),
        )
        return guest_result, admin_result

    async def send_guest_confirmation(self, submission: RSVPSubmission) -> NotificationResult:
        fields = {
            "guest_name": escape(submission.full_name),
            "event_date": escape(self.event.date),
            "event_time": escape(self.event.time),
            "event_venue": escape(self.event.venue),
            "attire": escape(self.event.attire_for(submission.gender)),
            "event_location": escape(self.event.location),
            "map_link": escape(self.event.map_link),
        }
        return await self._send(
            kind=NotificationKind.GUEST_CONFIRMATION,
            to_address=submission.email,
            subject=EmailTemplates.GUEST_CONFIRMATION_SUBJECT,
            html_body=EmailTemplates.GUEST_CONFIRMATION_HTML.format(**fields),
            text_body=EmailTemplates.GUEST_CONFIRMATION_TEXT.format(**fields),
        )

    async def send_admin_notice(
        self, submission: RSVPSubmission, submitted_at: datetime
    ) -> NotificationResult:
        fields = {
            "guest_name": escape(submission.full_name),
            "guest_email": escape(submission.email),
            "gender": escape(submission.gender),
            "attire": escape(self.event.attire_for(submission.gender)),
            "submitted_at": submitted_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip(),
        }
        return await self._send(
            kind=NotificationKind.ADMIN_NOTICE,
            to_address=self.admin_address,
            subject=EmailTemplates.ADMIN_NOTICE_SUBJECT,
            html_body=EmailTemplates.ADMIN_NOTICE_HTML.format(**fields),
            text_body=EmailTemplates.ADMIN_NOTICE_TEXT.format(**fields),
        )

    async def _send(
        self,
        kind: NotificationKind,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> NotificationResult:
        try:
            await self.mail_transport.send(
                from_address=self.from_address,
                to_address=to_address,
                subject=subject,
                html_body=html_body,
                text_body=text_body,
            )
        except Exception:
            logger.exception(f"Error sending {kind.value} email to {to_address}")
            return NotificationResult(kind=kind, sent=False)

        return NotificationResult(kind=kind, sent=True)

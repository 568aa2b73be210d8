import asyncio
import logging
from datetime import datetime

from src.rsvp.dtos import NotificationResult, RSVPSubmission
from src.rsvp.notifier import RSVPNotifier
from src.rsvp.spreadsheet import SpreadsheetLogger

logger = logging.getLogger(__name__)


class SubmissionDispatcher:
    """Runs the side effects of an accepted RSVP after the response went out.

    The notifier sends and the optional spreadsheet row run concurrently.
    Failed sends are not retried.
    """

    def __init__(
        self,
        notifier: RSVPNotifier,
        spreadsheet_logger: SpreadsheetLogger | None = None,
    ):
        self.notifier = notifier
        self.spreadsheet_logger = spreadsheet_logger

    async def dispatch(
        self, submission: RSVPSubmission, submitted_at: datetime
    ) -> list[NotificationResult]:
        try:
            return await self._dispatch(submission, submitted_at)
        except Exception:
            logger.exception(f"Background processing failed for RSVP from {submission.email}")
            return []

    async def _dispatch(
        self, submission: RSVPSubmission, submitted_at: datetime
    ) -> list[NotificationResult]:
        tasks = [
            self.notifier.send_guest_confirmation(submission),
            self.notifier.send_admin_notice(submission, submitted_at),
        ]
        if self.spreadsheet_logger is not None:
            tasks.append(self.spreadsheet_logger.log_submission(submission, submitted_at))

        results = list(await asyncio.gather(*tasks))
        guest_result, admin_result = results[0], results[1]

        logger.info(f"Emails sent: Guest: {guest_result.sent}, Admin: {admin_result.sent}")
        if len(results) > 2:
            sheet_result = results[2]
            logger.info(
                f"Spreadsheet row: sent={sheet_result.sent}, skipped={sheet_result.skipped}"
            )
        logger.info(
            f"RSVP SUBMISSION: {submission.full_name}, {submission.email}, "
            f"{submission.gender}, {submitted_at.isoformat()}"
        )
        return results

import logging
from datetime import datetime

from src.rsvp.dtos import NotificationKind, NotificationResult, RSVPSubmission
from src.sheets.base import SpreadsheetAppender

logger = logging.getLogger(__name__)


class SpreadsheetLogger:
    """Appends one row per RSVP to a spreadsheet, if a sheet is configured."""

    def __init__(self, appender: SpreadsheetAppender, target_id: str, range_: str = "A1"):
        self.appender = appender
        self.target_id = target_id
        self.range_ = range_

    async def log_submission(
        self, submission: RSVPSubmission, submitted_at: datetime
    ) -> NotificationResult:
        if not self.target_id:
            logger.info("Google Sheets ID not configured. Skipping Google Sheets integration.")
            return NotificationResult(kind=NotificationKind.SPREADSHEET_ROW, sent=False, skipped=True)

        row = [
            submission.full_name,
            submission.email,
            submission.gender,
            submitted_at.isoformat(),
        ]
        try:
            await self.appender.append_row(self.target_id, self.range_, row)
        except Exception:
            logger.exception("Error storing RSVP in Google Sheets")
            return NotificationResult(kind=NotificationKind.SPREADSHEET_ROW, sent=False)

        return NotificationResult(kind=NotificationKind.SPREADSHEET_ROW, sent=True)

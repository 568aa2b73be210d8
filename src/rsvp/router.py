import logging
from datetime import UTC, datetime

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from src.config.settings import settings
from src.email_service import get_mail_transport
from src.rsvp.dispatcher import SubmissionDispatcher
from src.rsvp.dtos import ErrorResponse, SubmitRSVPResponse
from src.rsvp.errors import SubmissionError
from src.rsvp.notifier import RSVPNotifier
from src.rsvp.spreadsheet import SpreadsheetLogger
from src.rsvp.urls import SUBMIT_RSVP_URL
from src.rsvp.validator import SubmissionValidator
from src.sheets import get_spreadsheet_appender

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_ATTENDING_MESSAGE = "RSVP received. Thank you for your response!"
ATTENDING_MESSAGE = "RSVP received successfully!"
SERVER_ERROR_MESSAGE = "Failed to process your RSVP"


# =============================================================================
# Dependency providers (can be overridden in tests)
# =============================================================================


def get_submission_validator() -> SubmissionValidator:
    return SubmissionValidator()


def get_submission_dispatcher() -> SubmissionDispatcher:
    """Build the dispatcher from the process-wide settings."""
    notifier = RSVPNotifier(
        mail_transport=get_mail_transport(settings),
        event=settings.event_details,
        from_address=settings.email_from,
        admin_address=settings.email_admin,
    )
    spreadsheet_logger = None
    if settings.log_to_spreadsheet:
        spreadsheet_logger = SpreadsheetLogger(
            appender=get_spreadsheet_appender(settings),
            target_id=settings.google_sheets_id,
            range_=settings.google_sheets_range,
        )
    return SubmissionDispatcher(notifier=notifier, spreadsheet_logger=spreadsheet_logger)


# =============================================================================
# Endpoint
# =============================================================================


@router.post(
    SUBMIT_RSVP_URL,
    response_model=SubmitRSVPResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_rsvp(
    request: Request,
    background_tasks: BackgroundTasks,
    validator: SubmissionValidator = Depends(get_submission_validator),
    dispatcher: SubmissionDispatcher = Depends(get_submission_dispatcher),
):
    """
    Accept an RSVP and answer right away.

    Guests who are not attending get an acknowledgement and nothing else. For
    attending guests the confirmation and admin emails are sent after the
    response, so their outcome never changes what the client sees.
    """
    try:
        body = await request.body()
        submission = validator.validate(body)

        if not submission.is_attending:
            logger.info(f"RSVP received with attending={submission.attending!r}")
            return SubmitRSVPResponse(message=NOT_ATTENDING_MESSAGE)

        submitted_at = datetime.now(UTC)
        logger.info(
            f"RSVP submission received from {submission.full_name} <{submission.email}>"
        )
        background_tasks.add_task(dispatcher.dispatch, submission, submitted_at)

        return SubmitRSVPResponse(message=ATTENDING_MESSAGE)
    except SubmissionError as e:
        logger.info(f"Rejected RSVP: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception:
        logger.exception("Error processing RSVP")
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})

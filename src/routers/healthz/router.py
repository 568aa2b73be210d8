from fastapi import APIRouter
from pydantic import BaseModel

from src.config.settings import settings

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    mail_transport: str
    spreadsheet_logging: bool


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running and report which
    integrations the background work will use.
    """
    return HealthCheckResponse(
        status="healthy",
        mail_transport="resend" if settings.resend_api_key else "smtp",
        spreadsheet_logging=settings.log_to_spreadsheet and bool(settings.google_sheets_id),
    )

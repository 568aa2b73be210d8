from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class Attendance(str, Enum):
    YES = "yes"
    NO = "no"


class NotificationKind(str, Enum):
    GUEST_CONFIRMATION = "guest-confirmation"
    ADMIN_NOTICE = "admin-notice"
    SPREADSHEET_ROW = "spreadsheet-row"


@dataclass(frozen=True)
class RSVPSubmission:
    """A validated RSVP. Secondary fields are empty when the guest is not attending."""

    attending: str
    full_name: str = ""
    email: str = ""
    gender: str = ""

    @property
    def is_attending(self) -> bool:
        return self.attending == Attendance.YES.value


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one background side effect."""

    kind: NotificationKind
    sent: bool
    skipped: bool = False


class SubmitRSVPResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str

import json
import re
from typing import Any

from src.rsvp.dtos import RSVPSubmission
from src.rsvp.errors import InvalidFormatError, MalformedPayloadError, MissingFieldError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

# Checked in this order when the guest is attending
REQUIRED_WHEN_ATTENDING = ("fullName", "email", "gender")


class SubmissionValidator:
    """Turns a raw request body into an RSVPSubmission or raises a SubmissionError."""

    def validate(self, body: bytes | str) -> RSVPSubmission:
        payload = self._parse(body)

        attending = payload.get("attending")
        if not isinstance(attending, str):
            raise MissingFieldError("attending")

        submission = RSVPSubmission(attending=attending)
        if not submission.is_attending:
            return submission

        values = {name: self._required_text(payload, name) for name in REQUIRED_WHEN_ATTENDING}

        if not EMAIL_PATTERN.match(values["email"]):
            raise InvalidFormatError("email")

        return RSVPSubmission(
            attending=attending,
            full_name=values["fullName"],
            email=values["email"],
            gender=values["gender"],
        )

    @staticmethod
    def _parse(body: bytes | str) -> dict[str, Any]:
        try:
            payload = json.loads(body)
        except (ValueError, TypeError, RecursionError):
            raise MalformedPayloadError()

        if not isinstance(payload, dict):
            raise MalformedPayloadError()
        return payload

    @staticmethod
    def _required_text(payload: dict[str, Any], name: str) -> str:
        value = payload.get(name)
        if value is None:
            raise MissingFieldError(name)
        if not isinstance(value, str):
            raise InvalidFormatError(name)

        value = value.strip()
        if not value:
            raise MissingFieldError(name)
        return value

class SubmissionError(Exception):
    """Base class for client-visible submission failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedPayloadError(SubmissionError):
    """Raised when the request body is not a JSON object."""

    def __init__(self) -> None:
        super().__init__("Invalid request format")


class MissingFieldError(SubmissionError):
    """Raised when a field required for the attendance branch is absent or blank."""

    def __init__(self, field: str) -> None:
        self.field = field
        if field == "attending":
            message = "Empty request body or missing attending field"
        else:
            message = f"Missing required field: {field}"
        super().__init__(message)


class InvalidFormatError(SubmissionError):
    """Raised when a field is present but has the wrong shape."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field} format")

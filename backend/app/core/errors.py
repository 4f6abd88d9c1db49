"""API error classes for the onboarding service.

The registration form never rejects field content, so these errors cover only
transport-level problems (a bad KTP upload, a malformed request body) and
unexpected server faults. Each is rendered by app.main into the
{"error": {"code", "message", "details"}} envelope.
"""


class APIError(Exception):
    """Base class for API errors.

    Subclasses declare their default ``code`` and ``status_code`` as class
    attributes.

    Attributes:
        code: Machine-readable error code (e.g., "VALIDATION_ERROR").
        message: Human-readable error message, safe to show the seller.
        status_code: HTTP status code to return.
        details: Optional list of field-level details.
    """

    code = "API_ERROR"
    status_code = 500

    def __init__(
        self,
        code: str | None = None,
        message: str = "",
        status_code: int | None = None,
        details: list[dict] | None = None,
    ) -> None:
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Rejected upload or malformed request (400)."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message=message, details=details)


class InternalError(APIError):
    """Unexpected server error (500). The message never carries internals."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(message=message)

"""Error classes.

Two families live here:

- APIError and subclasses: mapped to HTTP status codes and the standard
  error envelope by the exception handlers in appdocs.main.
- DataIntegrityError: upstream data violates an invariant the document
  generator relies on. Never recovered locally; propagates to the caller.
"""


class APIError(Exception):
    """Base class for API errors.

    All API errors have a code, message, and HTTP status.
    Subclasses set default status_code.

    Attributes:
        code: Machine-readable error code (e.g., "NOT_FOUND").
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional list of additional error details.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found (404)."""

    def __init__(self, resource: str, resource_id: str | None = None) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(
            code="NOT_FOUND",
            message=message,
            status_code=404,
        )


class InvalidStateError(APIError):
    """Business rule violation (422).

    Use when the request is valid but the resource is in a state that
    does not allow the operation, e.g. asking for a document of an
    application whose state produces none.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            code="INVALID_STATE_TRANSITION",
            message=message,
            status_code=422,
        )


class DataIntegrityError(Exception):
    """Application data violates an invariant of document generation.

    Raised for duplicate application ids and for applications in review
    without a review record.

    Attributes:
        application_id: Identifier of the offending application, if known.
    """

    def __init__(self, message: str, application_id: object | None = None) -> None:
        super().__init__(message)
        self.application_id = application_id

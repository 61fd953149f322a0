"""FastAPI application for application documents.

Mounts the v1 document routes and /health. Every error leaves the app in
the {"error": {...}} envelope: APIError with its own status, request
validation failures as 400 and anything unhandled as 500.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from appdocs.api.v1.router import router as v1_router
from appdocs.core.errors import APIError
from appdocs.core.responses import ErrorDetail, ErrorResponse

logger = structlog.get_logger()


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
    """NotFoundError, InvalidStateError and other APIErrors."""
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed application ids and other bad request parameters (400)."""
    details = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return _error_response(
        400, "VALIDATION_ERROR", "Request validation failed", details
    )


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Data integrity and rendering failures end up here; details stay in the log.
    logger.exception(
        "document_request_failed",
        exc_info=exc,
        path=str(request.url.path),
        error_type=type(exc).__name__,
    )
    return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")


def create_app() -> FastAPI:
    """Build the documents API with its error handlers and routes."""
    app = FastAPI(
        title="Application Documents API",
        version="1.0.0",
        description="PDF documents for applications",
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health_check() -> dict:
        return {"status": "healthy"}

    return app


# uvicorn appdocs.main:app
app = create_app()

"""Petanikopiku seller onboarding API.

Builds the FastAPI application that serves the four-step registration form:

- one in-memory RegistrationSession per application instance
- security headers and CORS for the form front end
- error envelopes for rejected uploads, malformed requests and faults
- the /api/v1/onboarding router and a /health probe

Run with: uvicorn app.main:app
"""

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.api.v1.router import router as v1_router
from app.core.config import settings
from app.core.errors import APIError, InternalError
from app.core.logging import configure_logging
from app.core.rate_limiting import limiter, rate_limit_exceeded_handler
from app.core.responses import ErrorDetail, ErrorResponse
from app.services.registration_session import RegistrationSession

logger = structlog.get_logger()

# Form data, including the KTP preview, must never be cached or framed
_STATIC_SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp security headers on every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(_STATIC_SECURITY_HEADERS)

        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store, max-age=0"
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )
        return response


# =============================================================================
# Exception handlers
# =============================================================================


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
    """Render an APIError (e.g., a rejected KTP upload) as an error envelope."""
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a malformed request body as 400 VALIDATION_ERROR.

    Only request shape is checked here; form field content is never
    validated.
    """
    details = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    return _error_response(
        400, "VALIDATION_ERROR", "Request validation failed", details
    )


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and return a bare 500.

    The exception message and traceback stay in the server log.
    """
    logger.exception("unhandled_exception", exc_info=exc, path=request.url.path)
    error = InternalError()
    return _error_response(error.status_code, error.code, error.message)


# =============================================================================
# Application factory
# =============================================================================


def create_app() -> FastAPI:
    """Build the onboarding application with a fresh, empty session."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Petanikopiku Seller Onboarding API",
        description="Registrasi Mitra Strategis Penjual Kopi",
        version="1.0.0",
    )

    # Middleware runs in reverse order of registration; CORS answers
    # preflight requests before anything else sees them.
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, internal_error_handler)

    app.state.limiter = limiter
    app.state.registration_session = RegistrationSession()

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health_check() -> dict:
        """Liveness probe."""
        return {"status": "healthy"}

    logger.info("onboarding_app_created", environment=settings.environment)
    return app


app = create_app()

"""Error Handlers — global exception handlers for the Customer API.

Invariants:
    - CustomerApiError → envelope with the error's own status code
    - RequestValidationError → 400 envelope with a field-level description
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Status always comes from the error, never from its description

Design Decisions:
    - Three-layer handler: domain (CustomerApiError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from customer_api.core.errors import CustomerApiError, build_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_customer_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_customer_api_error_handler(app: FastAPI) -> None:
    """Register domain/storage/auth error handler."""

    @app.exception_handler(CustomerApiError)
    async def customer_api_error_handler(
        request: Request, exc: CustomerApiError,
    ):
        """Handle every CustomerApiError subclass."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{exc.code}: {exc.description}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_envelope(
                status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An unexpected error occurred",
            ),
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Join field errors into one description: 'body.name: Field required; ...'."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )

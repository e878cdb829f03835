"""
Error handlers for the Solana gateway API.

Every failure reaching the HTTP boundary is rendered as the standard
envelope with ``success=false`` and a human-readable message. Internal
details are logged, never returned.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solana_gateway.models.api_models import ApiResponse
from solana_gateway.utils.errors import GatewayError

# Setup logger
logger = structlog.get_logger("solana_gateway.errors")


def create_error_response(message: str, status_code: int) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        message: Human-readable error message
        status_code: HTTP status code to return

    Returns:
        JSONResponse with the error envelope
    """
    response = ApiResponse.error_response(message)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump()
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize a request validation failure in one line."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid {location}: {message}" if location else f"Invalid request: {message}"


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers for the application"""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle validation and collaborator errors raised by handlers"""
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "Request failed",
            path=request.url.path,
            method=request.method,
            **exc.to_dict()
        )
        return create_error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Handle malformed bodies and wrongly typed fields"""
        message = describe_validation_error(exc)
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            method=request.method,
            detail=message
        )
        return create_error_response(message, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions"""
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=str(exc.detail),
            path=request.url.path
        )
        return create_error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all uncaught exceptions"""
        logger.exception(
            "Uncaught exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method
        )
        message = str(exc) if app.debug else "An unexpected error occurred"
        return create_error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

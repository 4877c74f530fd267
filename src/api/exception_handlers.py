"""Exception handlers for the FastAPI application."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas.common import ErrorResponse, FieldError, ValidationErrorResponse
from core.exceptions import AppException, ErrorCode
from core.validation import violations_from_errors

logger = structlog.get_logger()


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
        )
        body = ErrorResponse(
            error_code=exc.error_code.value,
            msg=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette."""
        body = ErrorResponse(error_code="HTTP_ERROR", msg=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Turn failed payload rules into a 400 with ordered field errors."""
        violations = violations_from_errors(exc.errors())
        logger.info(
            "validation_error",
            fields=[violation.field for violation in violations],
        )
        body = ValidationErrorResponse(
            error_code=ErrorCode.VALIDATION_ERROR.value,
            msg="Request validation failed",
            errors=[FieldError(**violation.as_dict()) for violation in violations],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Handle unexpected exceptions without leaking details to the client."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )
        return PlainTextResponse(
            "Server Error",
            status_code=500,
            headers={"X-Request-ID": str(request_id)},
        )

"""Exception handlers mapping domain errors to HTTP responses.

Every handled error is rendered as ``{"code": ..., "message": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logfire

from knot.domain.error import DomainError, ErrorCode

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.WRONG_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.OAUTH_ACCOUNT_MISMATCH: status.HTTP_403_FORBIDDEN,
    ErrorCode.OAUTH_DUPLICATE_ACCOUNT: status.HTTP_409_CONFLICT,
    ErrorCode.VALIDATION_FAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.REQUIRED_PARAMETER: status.HTTP_400_BAD_REQUEST,
}


def error_response(code: ErrorCode, message: str, status_code: int) -> JSONResponse:
    """Build the error response body."""
    return JSONResponse(
        status_code=status_code,
        content={"code": code.value, "message": message},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the status mapped from its code."""
    status_code = ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)
    logfire.warn(
        "Domain error",
        code=exc.code.value,
        error_type=type(exc).__name__,
        path=request.url.path,
        status_code=status_code,
    )
    return error_response(exc.code, exc.message, status_code)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed or missing request parameters as a 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        error_count=len(errors),
    )
    return error_response(
        ErrorCode.REQUIRED_PARAMETER, message, status.HTTP_400_BAD_REQUEST
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

"""
Exception handlers.

Every typed failure maps to exactly one status code and body shape:

    400  {"errors": [...]}   validation (all violations at once)
    401  {"error": "..."}    missing / invalid / expired token, bad credentials
    404  {"error": "..."}
    409  {"error": "..."}
    502  {"error": "..."}    external service (e.g. S3) unavailable
    500  {"error": "..."}    any other PlatewiseError
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modules.auth.exceptions import InvalidCredentialsError
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    PlatewiseError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Missing, malformed and expired tokens all get this body
INVALID_ACCESS_TOKEN = "Invalid access token."


def error_response(status_code: int, message: str, **kwargs) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, **kwargs)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Submitted values are not echoed back (they may include passwords)
    errors = [
        {key: value for key, value in error.items() if key not in ("input", "ctx", "url")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(errors)},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors)},
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    if isinstance(exc, InvalidCredentialsError):
        return error_response(status.HTTP_401_UNAUTHORIZED, exc.message)

    logger.debug("Rejected request to %s: %s", request.url.path, exc.code)
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        INVALID_ACCESS_TOKEN,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, exc.message)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, exc.message)


async def external_service_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    logger.error("External service %s failed: %s", exc.service, exc.to_dict())
    return error_response(status.HTTP_502_BAD_GATEWAY, exc.message)


async def platewise_error_handler(request: Request, exc: PlatewiseError) -> JSONResponse:
    logger.error("Unhandled application error: %s", exc.to_dict())
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Attach all handlers to ``app``.

    Starlette picks the handler registered for the closest class in the
    exception's MRO, so the PlatewiseError fallback only sees leftovers.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(ExternalServiceError, external_service_handler)
    app.add_exception_handler(PlatewiseError, platewise_error_handler)

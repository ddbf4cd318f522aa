"""Error taxonomy for the quote service and the handlers that render it.

Every error carries a fixed, user-facing message. Internal detail is kept
on the exception for logging and never sent to the client.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class QuoteServiceError(Exception):
    status_code: int = 500
    message: str = "Service indisponible."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(detail or self.message)


class Unauthenticated(QuoteServiceError):
    status_code = 401
    message = "Unauthorized"


class InvalidRequest(QuoteServiceError):
    status_code = 400
    message = "Informations incorrectes."


class UnexpectedFailure(QuoteServiceError):
    status_code = 500
    message = "Service indisponible."


class PersistenceFailure(QuoteServiceError):
    """Raised by the quote store; logged by the caller, never rendered."""


def error_response(exc: QuoteServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def quote_service_error_handler(request: Request, exc: QuoteServiceError) -> JSONResponse:
    if exc.detail:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    return error_response(exc)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected malformed payload on {request.url.path}: {exc.errors()}")
    return error_response(InvalidRequest())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuoteServiceError, quote_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

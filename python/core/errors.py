"""HTTP error types raised by route handlers and their FastAPI exception handlers."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger("MySite.Errors")


class HTTPError(Exception):
    """Terminal error for the current request, rendered as a plain text body."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(HTTPError):
    status_code = 400


class InternalServerError(HTTPError):
    status_code = 500


def error_response(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(f"{message}\n", status_code=status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Register process-wide exception handlers on the app."""

    @app.exception_handler(HTTPError)
    async def _http_error_handler(request: Request, exc: HTTPError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return error_response(500, "Internal Server Error")

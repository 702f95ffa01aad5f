"""Conversion of failures into the uniform ``{"error": ...}`` envelope."""

from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from agenthub.errors import BadRequestError, NotFoundError
from agenthub.utils.validation import describe_errors
from server.config import CORS_HEADERS
from server.logger import api_logger


@contextmanager
def failure_context(action: str):
    """Map every failure inside a route to an HTTPException.

    Not-found becomes 404 and bad input 400. Anything else is logged
    with its traceback and surfaces as a generic 500 message.
    """
    try:
        yield
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"{exc.resource} not found") from exc
    except BadRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        api_logger.exception(f"Error during {action}")
        raise HTTPException(status_code=500, detail=f"Failed to {action}") from exc


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={**CORS_HEADERS, **(headers or {})},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers so no error leaves the app outside the envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(400, f"Invalid request: {describe_errors(exc.errors())}")

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        api_logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, "Internal server error")

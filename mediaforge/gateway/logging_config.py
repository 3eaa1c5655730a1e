"""Loguru setup for the gateway: console and JSONL sinks, stdlib bridging, per-request ids."""

import logging
import sys
import uuid
from collections.abc import Callable
from pathlib import Path

from fastapi import Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from mediaforge.gateway.exceptions import APIError

REQUEST_ID_HEADER = "X-Request-ID"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | {extra[request_id]} - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, routers using `logging`) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(log_dir: Path, level: str = "INFO") -> None:
    logger.remove()
    logger.configure(extra={"request_id": "-"})
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level, colorize=True)

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "mediaforge.jsonl",
        level=level,
        serialize=True,
        rotation="50 MB",
        retention="14 days",
        compression="gz",
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every log line of a request with its id and echo the id back to the caller.

    An incoming `X-Request-ID` is reused so ids can be correlated with the frontend.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        with logger.contextualize(request_id=request_id):
            response = await call_next(request)
            logger.debug(f"{_request_context(request)} -> {response.status_code}")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _request_context(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    context = f"{request.method} {request.url.path}"
    if request_id:
        context += f" request_id={request_id}"
    return context


async def api_error_handler(request: Request, exc: APIError) -> PlainTextResponse:
    """Log provider/store failures with context and reply with the short message only."""
    logger.opt(exception=exc.__cause__ or exc).error(
        f"{type(exc).__name__} on {_request_context(request)}: {exc.detail or exc.message}"
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled {type(exc).__name__} on {_request_context(request)}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

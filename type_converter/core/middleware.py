import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from .config import Config
from .errors import ConversionError, MissingParameterError


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


def cors_allowed_origins() -> list[str]:
    return Config.allowed_origins()


def _with_cors_headers(request: Request, response: JSONResponse) -> JSONResponse:
    origin = request.headers.get("origin")
    if origin and origin in cors_allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


async def log_requests(request: Request, call_next: Callable):
    started = time.perf_counter()
    label = f"[{_request_id(request)}] {request.method} {request.url.path}"

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{label} - ERROR: {e} - {time.perf_counter() - started:.2f}s")
        raise

    elapsed = time.perf_counter() - started
    if elapsed > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(f"{label} - {response.status_code} - {elapsed:.2f}s")
    return response


async def conversion_exception_handler(request: Request, exc: ConversionError):
    logger.warning(f"[{_request_id(request)}] Type conversion failed in {request.method} {request.url.path}: {exc}")
    return _with_cors_headers(request, JSONResponse(status_code=400, content={"detail": str(exc)}))


async def missing_parameter_handler(request: Request, exc: MissingParameterError):
    logger.warning(f"[{_request_id(request)}] {request.method} {request.url.path}: {exc}")
    return _with_cors_headers(request, JSONResponse(status_code=400, content={"detail": str(exc)}))


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return _with_cors_headers(request, JSONResponse(status_code=500, content={"detail": "Internal server error"}))


"""
Error taxonomy
==============
Everything a request handler can raise on purpose. LLM failures share the
``GenerationError`` base so routes can treat "the call failed" uniformly;
the subclass decides whether the user is told to simply try again.

The FastAPI handlers registered by ``register_exception_handlers`` turn each
one into the ``{"error", "message", "retryable"}`` envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SkillPathError(Exception):
    status_code = 500
    kind = "internal_error"
    retryable = False

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__


class ConfigurationError(SkillPathError):
    """A required setting (usually an API key) is missing."""

    status_code = 500
    kind = "configuration_error"


class NotFoundError(SkillPathError):
    status_code = 404
    kind = "not_found"


class InvalidRequestError(SkillPathError):
    status_code = 400
    kind = "invalid_request"


class GenerationError(SkillPathError):
    """Base for every failure of an outbound LLM call."""

    status_code = 502
    kind = "generation_failed"
    retryable = True


class RateLimitError(GenerationError):
    status_code = 429
    kind = "rate_limited"


class MalformedResponseError(GenerationError):
    status_code = 502
    kind = "malformed_response"


class TransportError(GenerationError):
    status_code = 503
    kind = "upstream_unavailable"


def error_envelope(exc: SkillPathError) -> dict:
    return {"error": exc.kind, "message": exc.message, "retryable": exc.retryable}


async def _handle_skillpath_error(request: Request, exc: SkillPathError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_envelope(exc))


async def _handle_http_exception(request: Request, exc: StarletteHTTPException):
    kinds = {401: "unauthorized", 403: "forbidden", 404: "not_found", 405: "method_not_allowed"}
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": kinds.get(exc.status_code, "http_error"),
            "message": str(exc.detail),
            "retryable": False,
        },
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    return JSONResponse(
        status_code=422,
        content={"error": InvalidRequestError.kind, "message": message, "retryable": False},
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("%s %s crashed", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": SkillPathError.kind, "message": "Internal server error", "retryable": False},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SkillPathError, _handle_skillpath_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

"""FastAPI exception handlers that answer with error envelopes.

``ResponseError`` raised from a route is written with its own code and
message. Pydantic's ``RequestValidationError`` and unhandled exceptions are
mapped to the configured validation status and to a generic 500, so every
failure reaches the client as ``{"error": {"code", "message"}}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import Response

from jsonresp.config.settings import JsonRespSettings
from jsonresp.errors import ResponseError
from jsonresp.logging_config import configure_logging
from jsonresp.responses import error_response

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    fields = [
        f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    if not fields:
        return "Validation error"
    return "Validation error: " + "; ".join(fields)


def register_error_handlers(
    app: FastAPI,
    settings: JsonRespSettings | None = None,
    configure_logs: bool = False,
) -> None:
    """Wire up the envelope exception handlers on the FastAPI application.

    With ``configure_logs`` the root logger is also switched to JSON output
    at ``settings.log_level``.
    """
    settings = settings or JsonRespSettings()
    if configure_logs:
        configure_logging(settings.log_level)

    async def _response_error_handler(_request: Request, exc: ResponseError) -> Response:
        logger.info(
            "Request failed: %s",
            exc,
            extra={"status_code": exc.code, "error_code": exc.code},
        )
        return error_response(exc.message, exc.code)

    async def _validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        return error_response(
            _describe_validation_errors(exc), settings.validation_status_code
        )

    async def _unhandled_error_handler(_request: Request, exc: Exception) -> Response:
        logger.error(
            "Unhandled exception: %s",
            exc,
            exc_info=exc,
            extra={"status_code": 500},
        )
        return error_response(settings.internal_error_message, 500)

    app.add_exception_handler(ResponseError, _response_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)

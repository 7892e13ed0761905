"""Uniform JSON envelope for HTTP API responses and errors."""

from jsonresp.codec import (
    CONTENT_TYPE,
    ResponseSink,
    read_error,
    read_response,
    read_response_page,
    safe_write_response,
    write_error,
    write_response,
    write_response_page,
)
from jsonresp.config.settings import JsonRespSettings
from jsonresp.errors import (
    DecodeError,
    EncodeError,
    JsonRespError,
    ResponseError,
    new_error,
    status_text,
    unauthorized_error,
)
from jsonresp.logging_config import configure_logging
from jsonresp.middleware.error_handler import register_error_handlers
from jsonresp.models import Envelope, ErrorDetails, PageDetails
from jsonresp.recorder import ResponseRecorder
from jsonresp.responses import envelope_response, error_response

__all__ = [
    "CONTENT_TYPE",
    "DecodeError",
    "EncodeError",
    "Envelope",
    "ErrorDetails",
    "JsonRespError",
    "JsonRespSettings",
    "PageDetails",
    "ResponseError",
    "ResponseRecorder",
    "ResponseSink",
    "configure_logging",
    "envelope_response",
    "error_response",
    "new_error",
    "read_error",
    "read_response",
    "read_response_page",
    "register_error_handlers",
    "safe_write_response",
    "status_text",
    "unauthorized_error",
    "write_error",
    "write_response",
    "write_response_page",
]

"""Envelope codec: write responses to a sink and read them back.

Writers set ``Content-Type`` and the status code on the sink before the body
is serialized, mirroring the way an HTTP handler commits headers first.
Readers accept raw bytes/str or anything with a ``read()`` method, which
covers binary file objects and ``httpx.Response``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import MutableMapping
from typing import Any, Protocol, TypeVar, overload

import pydantic_core
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from jsonresp.errors import DecodeError, EncodeError, ResponseError, new_error
from jsonresp.models import Envelope, ErrorDetails, ErrorEnvelope, PageDetails

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"

T = TypeVar("T")


class ResponseSink(Protocol):
    """Writable side of an HTTP response."""

    headers: MutableMapping[str, str]
    status_code: int

    def write(self, data: bytes) -> Any: ...


def _encode(envelope: Envelope) -> bytes:
    # Non-finite floats have no JSON spelling; json.dumps rejects them.
    body = json.dumps(
        to_jsonable_python(envelope.to_wire()),
        allow_nan=False,
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return body.encode("utf-8") + b"\n"


def _write(sink: ResponseSink, envelope: Envelope, code: int, what: str) -> None:
    sink.headers["Content-Type"] = CONTENT_TYPE
    sink.status_code = code

    try:
        sink.write(_encode(envelope))
    except (pydantic_core.PydanticSerializationError, TypeError, ValueError, OSError) as exc:
        raise EncodeError(f"jsonresp: failed to write {what}: {exc}") from exc


def write_error(sink: ResponseSink, message: str, code: int) -> None:
    """Encode an error envelope carrying ``code`` and ``message`` into ``sink``.

    Raises
    ------
    EncodeError
        If the envelope cannot be serialized or written.
    """
    envelope = Envelope(error=ErrorDetails(code=int(code), message=message))
    _write(sink, envelope, code, "error")


def write_response_page(
    sink: ResponseSink,
    data: Any,
    page: PageDetails | None,
    code: int,
) -> None:
    """Encode ``data`` and optional paging details into ``sink``.

    ``page=None`` leaves the ``page`` key off the wire; an empty
    ``PageDetails()`` is written as ``{}``.

    Raises
    ------
    EncodeError
        If the envelope cannot be serialized or written.
    """
    # model_construct keeps arbitrary payload objects as-is for encoding.
    envelope = Envelope.model_construct(data=data, page=page, error=None)
    _write(sink, envelope, code, "response")


def write_response(sink: ResponseSink, data: Any, code: int) -> None:
    """Encode ``data`` into ``sink`` without paging details."""
    write_response_page(sink, data, None, code)


def safe_write_response(sink: ResponseSink, data: Any) -> ResponseError | None:
    """Write ``data`` with status 200, reporting failures as a value.

    Returns ``None`` on success. If encoding fails, a 500 ``ResponseError``
    describing the failure is returned for the caller to log or relay.
    """
    try:
        write_response(sink, data, 200)
    except EncodeError as exc:
        logger.warning("Failed to write response: %s", exc)
        return new_error(500, str(exc))
    return None


def _read_body(source: Any) -> bytes | str:
    if isinstance(source, (bytes, str)):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "read"):
        try:
            return source.read()
        except Exception as exc:
            # OSError from files, httpx.StreamError from closed responses.
            raise DecodeError(f"jsonresp: failed to read response: {exc}") from exc
    raise TypeError(f"unsupported response source: {type(source).__name__}")


def _first_value(body: bytes | str) -> str:
    """Return the text of the first JSON value in ``body``, dropping anything after it."""
    text = (body.decode("utf-8") if isinstance(body, bytes) else body).lstrip()
    _, end = json.JSONDecoder().raw_decode(text)
    return text[:end]


@overload
def read_response_page(source: Any, target: type[T]) -> tuple[T, PageDetails | None]: ...


@overload
def read_response_page(source: Any, target: None = None) -> tuple[Any, PageDetails | None]: ...


def read_response_page(source, target=None):
    """Read a paged envelope from ``source``.

    Returns ``(data, page)`` where ``data`` is validated into ``target`` when
    one is given (otherwise the decoded JSON value) and ``page`` is ``None``
    when the envelope carries no paging details. A ``null`` ``data`` is
    returned as ``None`` without validation.

    Raises
    ------
    ResponseError
        If the envelope carries an ``error``.
    DecodeError
        If the body is not an envelope, or ``data`` does not fit ``target``.
    """
    body = _read_body(source)
    try:
        # Wire keys only: ``totalSize`` is accepted, ``total_size`` is not.
        envelope = Envelope.model_validate_json(body, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise DecodeError(f"jsonresp: failed to read response: {exc}") from exc

    if envelope.error is not None:
        raise ResponseError.from_details(envelope.error)

    if target is None:
        return envelope.data, envelope.page

    if not envelope.has_data:
        raise DecodeError("jsonresp: failed to unmarshal response: no data in response")
    if envelope.data is None:
        return None, envelope.page
    try:
        value = TypeAdapter(target).validate_python(envelope.data)
    except ValidationError as exc:
        raise DecodeError(f"jsonresp: failed to unmarshal response: {exc}") from exc
    return value, envelope.page


@overload
def read_response(source: Any, target: type[T]) -> T: ...


@overload
def read_response(source: Any, target: None = None) -> Any: ...


def read_response(source, target=None):
    """Read an envelope from ``source``, discarding paging details."""
    value, _ = read_response_page(source, target)
    return value


def read_error(source: Any) -> ResponseError | None:
    """Best-effort extraction of the error carried by an envelope.

    Only the first JSON value in the body is considered. Returns ``None`` if
    the body cannot be read or parsed, or if it carries no error.
    """
    try:
        envelope = ErrorEnvelope.model_validate_json(
            _first_value(_read_body(source)), by_alias=True, by_name=False
        )
    except (ValidationError, DecodeError, TypeError, ValueError, RecursionError) as exc:
        logger.debug("No error parsed from response: %s", exc)
        return None
    if envelope.error is None:
        return None
    return ResponseError.from_details(envelope.error)

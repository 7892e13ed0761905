"""FastAPI-facing helpers that build enveloped responses.

Route handlers can return these directly::

    @app.get("/items")
    async def list_items():
        return envelope_response(items, PageDetails(next=cursor))
"""

from __future__ import annotations

from typing import Any

from starlette.responses import Response

from jsonresp.codec import write_error, write_response_page
from jsonresp.models import PageDetails
from jsonresp.recorder import ResponseRecorder


def envelope_response(
    data: Any,
    page: PageDetails | None = None,
    status_code: int = 200,
) -> Response:
    """Build a success envelope response.

    Raises ``EncodeError`` if ``data`` cannot be serialized.
    """
    recorder = ResponseRecorder()
    write_response_page(recorder, data, page, status_code)
    return recorder.to_response()


def error_response(message: str, status_code: int) -> Response:
    """Build an error envelope response."""
    recorder = ResponseRecorder()
    write_error(recorder, message, status_code)
    return recorder.to_response()

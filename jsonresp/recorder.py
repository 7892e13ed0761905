"""In-memory response sink.

``ResponseRecorder`` collects the headers, status code and body the codec
writes, and can hand them over as a Starlette ``Response`` or as a readable
stream for the read side.
"""

from __future__ import annotations

import io

from starlette.responses import Response


class ResponseRecorder:
    """Response sink that records everything written to it."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: int = 200
        self._body = bytearray()

    def write(self, data: bytes) -> int:
        self._body.extend(data)
        return len(data)

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def stream(self) -> io.BytesIO:
        """Return the recorded body as a fresh binary stream."""
        return io.BytesIO(self.body)

    def to_response(self) -> Response:
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
        )

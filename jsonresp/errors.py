"""Error hierarchy for the JSON envelope codec.

``ResponseError`` is the error carried inside an envelope: it is both the
value a server writes under ``error`` and the exception a client sees when it
reads such an envelope back. ``EncodeError`` and ``DecodeError`` report
failures of the codec itself and always chain the underlying cause.
"""

from __future__ import annotations

from http import HTTPStatus

from jsonresp.models import ErrorDetails


class JsonRespError(Exception):
    """Base error for everything raised by jsonresp."""


class EncodeError(JsonRespError):
    """Serializing or writing an envelope to a sink failed."""


class DecodeError(JsonRespError):
    """Reading or decoding an envelope from a source failed."""


def status_text(code: int) -> str:
    """Return the standard reason phrase for ``code``, or ``""`` if unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


class ResponseError(JsonRespError):
    """Structured error with an HTTP status code and a human message."""

    def __init__(self, code: int = 0, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(code, message)

    def __str__(self) -> str:
        """Render as ``"<message> (<code> <status text>)"`` or ``"<code> <status text>"``.

        Codes without a standard reason phrase render with the trailing blank
        trimmed: ``"599"`` and ``"msg (599)"`` rather than ``"599 "``.
        """
        status = f"{self.code} {status_text(self.code)}".rstrip()
        if self.message:
            return f"{self.message} ({status})"
        return status

    def __repr__(self) -> str:
        return f"ResponseError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    @classmethod
    def from_details(cls, details: ErrorDetails) -> ResponseError:
        return cls(code=details.code, message=details.message)

    def to_details(self) -> ErrorDetails:
        return ErrorDetails(code=int(self.code), message=self.message)


def new_error(code: int, message: str = "") -> ResponseError:
    """Return an error that contains the given code and message."""
    return ResponseError(code=code, message=message)


def unauthorized_error() -> ResponseError:
    """Generic 401 error, built fresh on every call."""
    return ResponseError(code=int(HTTPStatus.UNAUTHORIZED), message="Unauthorized")

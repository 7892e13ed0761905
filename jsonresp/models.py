"""Pydantic wire models for the response envelope.

Every response body has the shape::

    { "data": <any>, "page": {prev, next, totalSize}, "error": {code, message} }

with each key present only when it carries something.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class PageDetails(BaseModel):
    """Cursor-style paging information. Zero-valued fields stay off the wire."""

    # Python callers construct by field name; readers pass by_name=False.
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    prev: StrictStr = ""
    next: StrictStr = ""
    total_size: StrictInt = Field(default=0, alias="totalSize")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_defaults=True)


class ErrorDetails(BaseModel):
    """Error description carried under the ``error`` key."""

    code: StrictInt = 0
    message: StrictStr = ""

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_defaults=True)


class Envelope(BaseModel):
    """Top level container of every REST API response."""

    data: Any = None
    page: PageDetails | None = None
    error: ErrorDetails | None = None

    @property
    def has_data(self) -> bool:
        """True when the ``data`` key was present on the wire."""
        return "data" in self.model_fields_set

    def to_wire(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.data is not None:
            body["data"] = self.data
        if self.page is not None:
            body["page"] = self.page.to_wire()
        if self.error is not None:
            body["error"] = self.error.to_wire()
        return body


class ErrorEnvelope(BaseModel):
    """Partial view of an envelope used when only the error matters."""

    error: ErrorDetails | None = None

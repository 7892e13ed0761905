"""Pydantic Settings for jsonresp.

All environment variables use the JSONRESP_ prefix.
Example: JSONRESP_LOG_LEVEL=DEBUG, JSONRESP_VALIDATION_STATUS_CODE=400
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class JsonRespSettings(BaseSettings):
    """Envelope handling configuration validated from environment variables."""

    log_level: str = "INFO"

    # Message returned for unhandled exceptions; internals never leak
    internal_error_message: str = "Internal server error"

    # Status used for request validation failures
    validation_status_code: int = Field(default=422, ge=400, le=599)

    model_config = {"env_prefix": "JSONRESP_"}

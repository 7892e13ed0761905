"""Shared test fixtures for the jsonresp test suite."""

from __future__ import annotations

import os

import pytest

from jsonresp.config.settings import JsonRespSettings
from jsonresp.recorder import ResponseRecorder


# ---------------------------------------------------------------------------
# Keep host JSONRESP_* variables from leaking into settings under test
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_jsonresp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("JSONRESP_"):
            monkeypatch.delenv(key)


@pytest.fixture
def recorder() -> ResponseRecorder:
    """Fresh in-memory sink for each test."""
    return ResponseRecorder()


@pytest.fixture
def settings() -> JsonRespSettings:
    """Test settings with safe defaults."""
    return JsonRespSettings(
        internal_error_message="Something went wrong",
        validation_status_code=400,
    )

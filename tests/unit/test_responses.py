"""Unit tests for the in-memory recorder and the response helpers."""

from __future__ import annotations

import json

import pytest

from jsonresp.errors import EncodeError
from jsonresp.models import PageDetails
from jsonresp.recorder import ResponseRecorder
from jsonresp.responses import envelope_response, error_response


class TestResponseRecorder:
    def test_defaults(self):
        recorder = ResponseRecorder()
        assert recorder.status_code == 200
        assert recorder.headers == {}
        assert recorder.body == b""

    def test_write_appends(self):
        recorder = ResponseRecorder()
        assert recorder.write(b"ab") == 2
        recorder.write(b"cd")
        assert recorder.body == b"abcd"

    def test_stream_is_independent(self):
        recorder = ResponseRecorder()
        recorder.write(b"xyz")
        assert recorder.stream().read() == b"xyz"
        assert recorder.stream().read() == b"xyz"

    def test_to_response(self):
        recorder = ResponseRecorder()
        recorder.headers["Content-Type"] = "application/json"
        recorder.status_code = 201
        recorder.write(b"{}")

        response = recorder.to_response()
        assert response.status_code == 201
        assert response.body == b"{}"
        assert response.headers["content-type"] == "application/json"


class TestEnvelopeResponse:
    def test_success(self):
        response = envelope_response({"id": 1}, PageDetails(next="abc"), status_code=201)

        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body) == {"data": {"id": 1}, "page": {"next": "abc"}}

    def test_default_status(self):
        response = envelope_response([1, 2])
        assert response.status_code == 200
        assert json.loads(response.body) == {"data": [1, 2]}

    def test_unserializable_raises(self):
        with pytest.raises(EncodeError):
            envelope_response(object())


class TestErrorResponse:
    def test_error(self):
        response = error_response("not here", 404)

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body) == {"error": {"code": 404, "message": "not here"}}

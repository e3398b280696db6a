"""
Unit tests for the fallback payload.
"""

import json

import httpx
import pytest
from pydantic import ValidationError

from service_gateway.app.domain.fallback import ErrorPayload, encode_fallback
from service_gateway.app.domain.results import BackendFailure


EXPECTED = {
    "error": "Backend service unavailable",
    "message": "Cannot connect to backend service",
}


@pytest.mark.parametrize(
    "cause",
    [
        httpx.ConnectError("Connection refused"),
        httpx.ReadTimeout("timed out"),
        httpx.RemoteProtocolError("peer closed connection"),
        RuntimeError("anything else"),
    ],
)
def test_payload_is_constant_for_any_cause(cause):
    """The failure cause never changes the payload."""
    payload = encode_fallback(BackendFailure(cause=cause))

    assert payload.model_dump() == EXPECTED


def test_payload_serializes_as_two_field_json():
    payload = encode_fallback(BackendFailure(cause=httpx.ConnectError("refused")))

    assert json.loads(payload.model_dump_json()) == EXPECTED


def test_payload_rejects_extra_fields():
    with pytest.raises(ValidationError):
        ErrorPayload(error="x", message="y", detail="z")


def test_payload_is_immutable():
    payload = ErrorPayload()

    with pytest.raises(ValidationError):
        payload.message = "changed"

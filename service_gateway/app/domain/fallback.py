"""
Substitute payload returned when the backend cannot be reached.
"""

from pydantic import BaseModel, ConfigDict

from .results import BackendFailure

FALLBACK_ERROR = "Backend service unavailable"
FALLBACK_MESSAGE = "Cannot connect to backend service"


class ErrorPayload(BaseModel):
    """Two-field error body serialized as ``{"error": ..., "message": ...}``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    error: str = FALLBACK_ERROR
    message: str = FALLBACK_MESSAGE


def encode_fallback(failure: BackendFailure) -> ErrorPayload:
    """Build the fallback payload. The failure cause never reaches the caller."""
    return ErrorPayload()

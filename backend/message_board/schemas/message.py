"""Message Schemas: JSON bodies returned by POST /."""

from pydantic import BaseModel


class TimestampResponse(BaseModel):
    """Write acknowledgment: the server-assigned timestamp."""
    timestamp: int


class ErrorResponse(BaseModel):
    """Error envelope for JSON error bodies."""
    error: str

"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract and the stored note value.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation at /docs.

Design Decision:
    `Note` is frozen. The only permitted change after creation is to the
    `important` flag, and that is done by building a new value with
    `model_copy`, never by mutating the stored one.
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Model
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """A short text note held in the in-memory collection."""

    id: int = Field(description="Server-assigned identifier, unique within the collection")
    content: str = Field(description="Note text")
    important: bool = Field(default=False, description="Importance flag")
    date: datetime = Field(description="Creation timestamp (UTC ISO 8601)")

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    `content` is optional at the schema level so that a missing value is
    reported by the service as "Content is required" (400) rather than by
    FastAPI's generic 422.
    """

    content: Optional[str] = Field(default=None, description="Note text (required, non-empty)")
    important: Optional[bool] = Field(default=None, description="Defaults to false")


class NoteUpdate(BaseModel):
    """Body of PUT /api/notes/{id}. Omitting `important` leaves it unchanged."""

    important: Optional[bool] = Field(default=None, description="New importance flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "Note not found", "request_id": "1f0c2a9b"}
    """

    error: str = Field(description="Error description")
    message: Optional[str] = Field(default=None, description="Extra detail (500 only)")
    details: Optional[dict] = Field(default=None, description="Validation context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and platform health probes."""

    status: str = Field(description="Always 'OK' while the process is serving")
    service: str = Field(description="Service name")
    timestamp: datetime = Field(description="Current server time (UTC)")
    environment: str = Field(description="Configured environment designator")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")


class ServiceInfoResponse(BaseModel):
    """Returned by GET / — a static directory of the API."""

    message: str
    description: str
    version: str
    documentation: str
    endpoints: Dict[str, str]


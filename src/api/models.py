"""Pydantic request/response schemas for the Action Item Extractor API.

These describe the wire format for the OpenAPI document. Extraction results
are returned as produced by the normalizer, so model-supplied values that do
not match the documented types still reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ExtractRequest(BaseModel):
    """Request body for the /api/extract-action-items endpoint.

    ``notes`` is left untyped so the extraction validator can report a
    non-string value with its own message.
    """

    notes: Any = None


class HealthResponse(BaseModel):
    """Response body for the /health endpoint."""

    status: Literal["ok"] = "ok"
    timestamp: str


class ActionItemResponse(BaseModel):
    """A single extracted action item."""

    model_config = ConfigDict(extra="allow")

    id: str
    task: str | None = None
    assignee: str | None = None
    priority: str | None = None  # "high", "medium" or "low"
    deadline: str | None = None
    context: str | None = None


class ExtractionResponse(BaseModel):
    """Response body for the /api/extract-action-items endpoint."""

    model_config = ConfigDict(extra="allow")

    actionItems: list[ActionItemResponse] = []
    summary: str = ""


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str

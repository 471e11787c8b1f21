"""Extraction endpoint: turn meeting notes into structured action items."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_clock, get_completion_client
from src.api.models import ErrorResponse, ExtractionResponse, ExtractRequest
from src.extraction.completion import CompletionClient
from src.extraction.errors import classify_error
from src.extraction.extractor import extract_action_items
from src.extraction.normalizer import Clock

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/extract-action-items",
    responses={
        200: {"model": ExtractionResponse},
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def extract(
    payload: ExtractRequest,
    client: Annotated[CompletionClient, Depends(get_completion_client)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> JSONResponse:
    """Extract action items and a one-sentence summary from meeting notes.

    Expects a JSON body ``{"notes": "..."}``. Every failure is converted to
    an ``{"error": ...}`` body with the matching status code.
    """
    try:
        result = await extract_action_items(payload.notes, client, clock=clock)
        return JSONResponse(content=result)
    except Exception as exc:
        status, error = classify_error(exc)
        if status >= 500:
            logger.exception("Error processing request")
        else:
            logger.info("Rejected request (%d): %s", status, error["error"])
        return JSONResponse(status_code=status, content=error)

"""LLM-powered extraction of action items from free-text meeting notes."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from src.extraction.models import CompletionRequest, ExtractionResult
from src.extraction.normalizer import Clock, epoch_millis, normalize_response
from src.extraction.prompts import build_prompt
from src.extraction.validation import validate_notes

logger = logging.getLogger(__name__)


class Completer(Protocol):
    async def complete(self, request: CompletionRequest) -> str: ...


async def extract_action_items(
    raw_notes: Any,
    client: Completer,
    clock: Clock = epoch_millis,
) -> ExtractionResult:
    """Extract action items and a summary from meeting notes.

    This is the main entry point: validates the notes, builds the prompt,
    issues a single completion call and normalizes the reply.

    Args:
        raw_notes: The ``notes`` value from the request body, unchecked.
        client: Anything with an async ``complete(request) -> str``.
        clock: Millisecond clock used for item ids.

    Returns:
        The normalized extraction result.

    Raises:
        ExtractionError: Any stage failure, tagged with its ``ErrorKind``.
    """
    notes = validate_notes(raw_notes)
    request = build_prompt(notes)
    raw_text = await client.complete(request)
    result = normalize_response(raw_text, clock=clock)
    logger.info(
        "Extracted %d action items from %d characters of notes",
        len(result["actionItems"]),
        len(notes),
    )
    return result

"""Input rules applied to meeting notes before any provider call."""

from __future__ import annotations

from typing import Any

from src.extraction.errors import VALIDATION_MESSAGES, ErrorKind, NotesValidationError

MIN_NOTES_LENGTH = 10
MAX_NOTES_LENGTH = 50_000


def _reject(kind: ErrorKind) -> NotesValidationError:
    return NotesValidationError(VALIDATION_MESSAGES[kind], kind=kind)


def validate_notes(raw: Any) -> str:
    """Check the submitted notes and return them unchanged.

    Rules are applied in order and the first failure wins:

    1. the value must be a string,
    2. it must hold at least ``MIN_NOTES_LENGTH`` characters once trimmed,
    3. it must not exceed ``MAX_NOTES_LENGTH`` characters untrimmed.

    The returned text is the original, untrimmed value.

    Raises:
        NotesValidationError: With ``kind`` set to the rule that failed.
    """
    if not isinstance(raw, str):
        raise _reject(ErrorKind.INVALID_TYPE)
    if len(raw.strip()) < MIN_NOTES_LENGTH:
        raise _reject(ErrorKind.TOO_SHORT)
    if len(raw) > MAX_NOTES_LENGTH:
        raise _reject(ErrorKind.TOO_LONG)
    return raw

"""Parse completion text into a guaranteed-shape extraction result."""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from typing import Any

from src.extraction.errors import ErrorKind, MalformedResponseError
from src.extraction.models import ActionItem, ExtractionResult

Clock = Callable[[], int]


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def make_item_id(timestamp: int, index: int) -> str:
    return f"item-{timestamp}-{index}"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back out.
    raise ValueError(f"non-standard JSON constant {name!r}")


def normalize_response(raw_text: str, clock: Clock = epoch_millis) -> ExtractionResult:
    """Turn the model's raw text into an ``ExtractionResult``.

    The text must be a JSON object. ``actionItems`` is coerced to a list
    (missing or ``null`` becomes ``[]``) and every element receives an
    ``id`` built from a single clock reading plus its position. Item fields
    other than ``id`` are passed through untouched, as are unknown top-level
    keys.

    Args:
        raw_text: The assistant text returned by the completion call.
        clock: Source of the millisecond timestamp shared by all ids.

    Returns:
        The normalized result.

    Raises:
        MalformedResponseError: ``MALFORMED_JSON`` if the text does not parse,
            ``INVALID_SHAPE`` if the parsed value is not the expected shape.
    """
    try:
        parsed: Any = json.loads(raw_text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedResponseError(
            "completion text is not valid JSON", kind=ErrorKind.MALFORMED_JSON
        ) from exc

    if not isinstance(parsed, dict):
        raise MalformedResponseError(
            f"expected a JSON object, got {type(parsed).__name__}",
            kind=ErrorKind.INVALID_SHAPE,
        )

    items = parsed.get("actionItems")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise MalformedResponseError(
            f"actionItems must be an array, got {type(items).__name__}",
            kind=ErrorKind.INVALID_SHAPE,
        )

    timestamp = clock()
    action_items: list[ActionItem] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedResponseError(
                f"actionItems[{index}] must be an object", kind=ErrorKind.INVALID_SHAPE
            )
        # The model never chooses the id.
        fields = {key: value for key, value in item.items() if key != "id"}
        action_items.append({"id": make_item_id(timestamp, index), **fields})  # type: ignore[typeddict-item]

    result: dict[str, Any] = {**parsed, "actionItems": action_items}
    result.setdefault("summary", "")
    return result  # type: ignore[return-value]

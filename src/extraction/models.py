"""Data models for action item extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, NotRequired, TypedDict


class ChatMessage(TypedDict):
    role: Literal["system", "user"]
    content: str


@dataclass(frozen=True)
class CompletionRequest:
    """Everything a provider needs for one completion call, minus credentials."""

    system: str
    user: str
    temperature: float
    max_tokens: int
    json_response: bool = True

    @property
    def messages(self) -> list[ChatMessage]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


class ActionItem(TypedDict):
    """A single extracted action item.

    Only ``id`` is produced locally. The remaining keys come from the model
    and are passed through without checking their values.
    """

    id: str
    task: NotRequired[Any]
    assignee: NotRequired[Any]  # str or None
    priority: NotRequired[Any]  # "high", "medium" or "low"
    deadline: NotRequired[Any]  # str or None
    context: NotRequired[Any]


class ExtractionResult(TypedDict):
    actionItems: list[ActionItem]
    summary: Any


class ErrorBody(TypedDict):
    error: str

"""FastAPI dependencies shared by the routes."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.config import Settings, get_settings
from src.extraction.completion import CompletionClient, CompletionConfig
from src.extraction.normalizer import Clock, epoch_millis


@lru_cache(maxsize=4)
def _client_for(config: CompletionConfig) -> CompletionClient:
    return CompletionClient(config)


def get_completion_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CompletionClient:
    """Return the process-wide completion client for the current settings.

    Raises:
        ConfigurationError: If no provider credential is configured.
    """
    return _client_for(settings.completion_config())


def get_clock() -> Clock:
    """Clock used for action item ids. Overridden in tests."""
    return epoch_millis

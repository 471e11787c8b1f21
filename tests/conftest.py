from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_clock, get_completion_client
from src.api.main import create_app
from src.config import Settings

FIXED_TIMESTAMP = 1_700_000_000_000


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"llm_api_key": "test-key", "llm_provider": "openai"}
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture
def completion() -> AsyncMock:
    """Stand-in for the provider; set ``complete.return_value`` or ``side_effect``."""
    fake = AsyncMock()
    fake.complete.return_value = '{"actionItems":[],"summary":"Nothing to do."}'
    return fake


@pytest.fixture
def client(completion: AsyncMock) -> TestClient:
    app = create_app(make_settings())
    app.dependency_overrides[get_completion_client] = lambda: completion
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_TIMESTAMP)
    return TestClient(app)

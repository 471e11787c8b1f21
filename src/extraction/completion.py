"""Provider adapter: one chat completion in, the assistant's text out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import anthropic
import openai
from anthropic import AsyncAnthropic
from anthropic.types import TextBlock
from openai import AsyncOpenAI

from src.extraction.errors import (
    EmptyResponseError,
    ProviderAuthError,
    ProviderError,
    RateLimitedError,
)
from src.extraction.models import CompletionRequest

logger = logging.getLogger(__name__)

# Anthropic has no JSON mode; starting the assistant turn with a brace keeps
# the reply a bare object.
JSON_PREFILL = "{"


@dataclass(frozen=True)
class CompletionConfig:
    """Explicit provider configuration, validated once at startup."""

    provider: Literal["openai", "anthropic"]
    api_key: str = field(repr=False)
    model: str
    base_url: str | None = None
    timeout: float = 60.0


class CompletionClient:
    """Issue exactly one completion call per request and return its text.

    SDK failures are re-raised as tagged pipeline errors so callers never
    need to inspect provider exception types or messages.
    """

    def __init__(self, config: CompletionConfig) -> None:
        self.config = config
        self._client: Any
        if config.provider == "anthropic":
            self._client = AsyncAnthropic(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=0,
            )
        else:
            self._client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=0,
            )

    async def complete(self, request: CompletionRequest) -> str:
        """Run the completion and return the assistant's raw text.

        Raises:
            ProviderAuthError: The credential was rejected.
            RateLimitedError: The provider throttled the call.
            ProviderError: Any other provider or transport failure.
            EmptyResponseError: The call succeeded but produced no text.
        """
        if self.config.provider == "anthropic":
            return await self._complete_anthropic(request)
        return await self._complete_openai(request)

    async def _complete_openai(self, request: CompletionRequest) -> str:
        kwargs: dict[str, Any] = {
            "model": self.config.model,
            "messages": request.messages,
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_response:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            logger.warning("Provider rejected credentials (status %s)", exc.status_code)
            raise ProviderAuthError("provider authentication failed") from exc
        except openai.RateLimitError as exc:
            logger.warning("Provider rate limit hit")
            raise RateLimitedError("provider rate limit exceeded") from exc
        except openai.APIError as exc:
            logger.warning("Provider call failed: %s", type(exc).__name__)
            raise ProviderError("provider call failed") from exc

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise EmptyResponseError("no response from provider")
        return str(text)

    async def _complete_anthropic(self, request: CompletionRequest) -> str:
        messages: list[dict[str, str]] = [{"role": "user", "content": request.user}]
        if request.json_response:
            messages.append({"role": "assistant", "content": JSON_PREFILL})

        try:
            response = await self._client.messages.create(
                model=self.config.model,
                system=request.system,
                messages=messages,
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as exc:
            logger.warning("Provider rejected credentials (status %s)", exc.status_code)
            raise ProviderAuthError("provider authentication failed") from exc
        except anthropic.RateLimitError as exc:
            logger.warning("Provider rate limit hit")
            raise RateLimitedError("provider rate limit exceeded") from exc
        except anthropic.APIError as exc:
            logger.warning("Provider call failed: %s", type(exc).__name__)
            raise ProviderError("provider call failed") from exc

        # Only the first text block carries the answer.
        text = next(
            (block.text for block in response.content if isinstance(block, TextBlock)),
            "",
        )
        if not text:
            raise EmptyResponseError("no response from provider")
        return f"{JSON_PREFILL}{text}" if request.json_response else text

"""OpenAI-compatible text completion provider."""

import abc
from typing import Any

import httpx
from loguru import logger

from mediaforge.gateway.processors.base import BaseProvider


class CompletionProvider(BaseProvider):
    @abc.abstractmethod
    async def complete(self, prompt: str, max_tokens: int) -> dict[str, Any]:
        """Return the provider's JSON completion for `prompt`."""


class OpenAICompletionProvider(CompletionProvider):
    def __init__(
        self,
        api_key: str | None,
        api_url: str,
        model: str,
        timeout_seconds: float | None = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._model = model
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        if not self._api_key:
            logger.warning("OPENAI_API_KEY is not set, documentation requests will fail")
        self._client = httpx.AsyncClient(timeout=self._timeout)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def complete(self, prompt: str, max_tokens: int) -> dict[str, Any]:
        if not self._client:
            raise RuntimeError("Provider not initialized")
        if not self._api_key:
            raise RuntimeError("OPENAI_API_KEY is not configured")

        response = await self._client.post(
            self._api_url,
            json={"model": self._model, "prompt": prompt, "max_tokens": max_tokens},
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Completion API error: {e.response.status_code} {e.response.text[:200]}")
            raise
        return response.json()

"""Synthesia video provider - calls the Synthesia v2 REST API."""

import abc
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Protocol

import httpx
from loguru import logger

from mediaforge.gateway.processors.base import BaseProvider


class PendingVideo(Protocol):
    """A video request that has been issued and whose response body is still to be read."""

    async def result(self) -> dict[str, Any]: ...


class VideoProvider(BaseProvider):
    @abc.abstractmethod
    def submit(self, script: str, avatar_url: str) -> AbstractAsyncContextManager[PendingVideo]:
        """Issue a video synthesis request.

        The context is entered once the request has been sent and the provider
        has answered with a status; `PendingVideo.result()` reads and parses the body.
        """


class _HttpPendingVideo:
    def __init__(self, response: httpx.Response):
        self._response = response

    async def result(self) -> dict[str, Any]:
        await self._response.aread()
        return self._response.json()


class SynthesiaVideoProvider(VideoProvider):
    def __init__(
        self,
        api_key: str | None,
        api_url: str,
        background: str,
        voice: str,
        timeout_seconds: float | None = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._background = background
        self._voice = voice
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        if not self._api_key:
            logger.warning("SYNTHESIA_API_KEY is not set, video creation requests will fail")
        self._client = httpx.AsyncClient(timeout=self._timeout)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_payload(self, script: str, avatar_url: str) -> dict[str, Any]:
        return {
            "script": script,
            "avatar": {"type": "url", "url": avatar_url},
            "background": self._background,
            "voice": self._voice,
        }

    @asynccontextmanager
    async def submit(self, script: str, avatar_url: str) -> AsyncIterator[PendingVideo]:
        if not self._client:
            raise RuntimeError("Provider not initialized")
        if not self._api_key:
            raise RuntimeError("SYNTHESIA_API_KEY is not configured")

        async with self._client.stream(
            "POST",
            self._api_url,
            json=self.build_payload(script, avatar_url),
            headers={"Authorization": f"Bearer {self._api_key}"},
        ) as response:
            if response.is_error:
                await response.aread()
                logger.error(f"Synthesia API error: {response.status_code} {response.text[:200]}")
                response.raise_for_status()
            yield _HttpPendingVideo(response)

from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient

from mediaforge.gateway import create_app
from mediaforge.gateway.config import Settings
from mediaforge.gateway.deps import (
    get_documentation_service,
    get_object_storage,
    get_speech_service,
    get_video_orchestrator,
)
from mediaforge.gateway.documentation import DocumentationService
from mediaforge.gateway.storage import LocalObjectStorage
from mediaforge.gateway.synthesis import SpeechSynthesisService
from mediaforge.gateway.video import VideoCreationOrchestrator
from tests.mediaforge.gateway.stubs import StubCompletionProvider, StubVideoProvider


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        redis_url="redis://localhost:6379/15",
        cors_origins=["http://localhost:3000"],
        log_dir=str(tmp_path / "logs"),
        local_storage_path=str(tmp_path / "uploads"),
    )


@pytest.fixture
def video_provider() -> StubVideoProvider:
    return StubVideoProvider(result={"id": "vid-123", "status": "in_progress"})


@pytest.fixture
def completion_provider() -> StubCompletionProvider:
    return StubCompletionProvider()


@pytest.fixture
def app(settings, cache, tts_provider, video_provider, completion_provider) -> FastAPI:
    """App with services built around stub providers; the lifespan is not run."""
    app = create_app(settings)

    speech_service = SpeechSynthesisService(cache, tts_provider)
    orchestrator = VideoCreationOrchestrator(video_provider, app.state.channel_registry)
    storage = LocalObjectStorage(Path(settings.local_storage_path))
    documentation_service = DocumentationService(completion_provider, max_tokens=settings.completion_max_tokens)

    app.dependency_overrides[get_speech_service] = lambda: speech_service
    app.dependency_overrides[get_video_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_object_storage] = lambda: storage
    app.dependency_overrides[get_documentation_service] = lambda: documentation_service
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client

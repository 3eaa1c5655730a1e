from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from loguru import logger

from mediaforge.gateway.api.v1 import routers as v1_routers
from mediaforge.gateway.channels import ChannelRegistry
from mediaforge.gateway.config import Settings, get_settings
from mediaforge.gateway.deps import build_cache, build_object_storage
from mediaforge.gateway.documentation import DocumentationService
from mediaforge.gateway.exceptions import APIError
from mediaforge.gateway.logging_config import (
    RequestContextMiddleware,
    api_error_handler,
    configure_logging,
    unhandled_exception_handler,
)
from mediaforge.gateway.processors.completion import OpenAICompletionProvider
from mediaforge.gateway.processors.tts import GoogleTTSProvider
from mediaforge.gateway.processors.video import SynthesiaVideoProvider
from mediaforge.gateway.redis_client import create_redis_client
from mediaforge.gateway.synthesis import SpeechSynthesisService
from mediaforge.gateway.video import VideoCreationOrchestrator


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.dependency_overrides[get_settings]()
    assert isinstance(settings, Settings)

    configure_logging(Path(settings.log_dir), settings.log_level)

    app.state.redis_client = await create_redis_client(settings)

    tts_provider = GoogleTTSProvider()
    video_provider = SynthesiaVideoProvider(
        api_key=settings.synthesia_api_key,
        api_url=settings.synthesia_api_url,
        background=settings.video_background,
        voice=settings.video_voice,
        timeout_seconds=settings.video_request_timeout_seconds,
    )
    completion_provider = OpenAICompletionProvider(
        api_key=settings.openai_api_key,
        api_url=settings.completion_api_url,
        model=settings.completion_model,
        timeout_seconds=settings.completion_request_timeout_seconds,
    )
    providers = [tts_provider, video_provider, completion_provider]
    for provider in providers:
        await provider.initialize()

    app.state.speech_service = SpeechSynthesisService(
        cache=build_cache(settings.speech_cache_type, settings.speech_cache_config, app.state.redis_client),
        provider=tts_provider,
        ttl_seconds=settings.speech_cache_ttl_seconds,
    )
    app.state.video_orchestrator = VideoCreationOrchestrator(
        provider=video_provider,
        channels=app.state.channel_registry,
        emit_failed=settings.emit_failed_progress,
    )
    app.state.object_storage = build_object_storage(settings)
    app.state.documentation_service = DocumentationService(
        provider=completion_provider,
        max_tokens=settings.completion_max_tokens,
    )

    logger.info(f"Server running on port {settings.port}")

    yield

    for provider in providers:
        await provider.close()
    await app.state.redis_client.aclose()


def create_app(
    settings: Settings | None = None,
) -> FastAPI:
    if settings is None:
        settings = Settings()  # type: ignore

    app = FastAPI(
        title="Mediaforge Gateway",
        version="0.1.0",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.dependency_overrides[get_settings] = lambda: settings
    app.state.channel_registry = ChannelRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    for r in v1_routers:
        app.include_router(r)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app

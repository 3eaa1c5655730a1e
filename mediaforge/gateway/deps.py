from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request
from redis.asyncio import Redis

from mediaforge.gateway.cache import Cache, CacheConfig, Caches, RedisCache, SqliteCache
from mediaforge.gateway.config import Settings
from mediaforge.gateway.documentation import DocumentationService
from mediaforge.gateway.storage import LocalObjectStorage, ObjectStorage, S3ObjectStorage, Storages
from mediaforge.gateway.synthesis import SpeechSynthesisService
from mediaforge.gateway.video import VideoCreationOrchestrator


def build_cache(cache_type: Caches, config: CacheConfig, redis: Redis) -> Cache:
    match cache_type:
        case Caches.REDIS:
            return RedisCache(redis)
        case Caches.SQLITE:
            return SqliteCache(config)
        case _:
            raise ValueError(f"Invalid cache type {cache_type}")


def build_object_storage(settings: Settings) -> ObjectStorage:
    match settings.storage_type:
        case Storages.S3:
            return S3ObjectStorage(
                bucket_name=settings.s3_bucket_name,
                region_name=settings.s3_region,
                endpoint_url=settings.s3_endpoint_url,
            )
        case Storages.LOCAL:
            return LocalObjectStorage(Path(settings.local_storage_path))
        case _:
            raise ValueError(f"Invalid storage type {settings.storage_type}")


def get_speech_service(request: Request) -> SpeechSynthesisService:
    return request.app.state.speech_service


def get_video_orchestrator(request: Request) -> VideoCreationOrchestrator:
    return request.app.state.video_orchestrator


def get_object_storage(request: Request) -> ObjectStorage:
    return request.app.state.object_storage


def get_documentation_service(request: Request) -> DocumentationService:
    return request.app.state.documentation_service


SpeechService = Annotated[SpeechSynthesisService, Depends(get_speech_service)]
VideoOrchestrator = Annotated[VideoCreationOrchestrator, Depends(get_video_orchestrator)]
Storage = Annotated[ObjectStorage, Depends(get_object_storage)]
DocService = Annotated[DocumentationService, Depends(get_documentation_service)]

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from mediaforge.gateway.cache import CacheConfig, Caches
from mediaforge.gateway.storage import Storages


class Settings(BaseSettings):
    redis_url: str = "redis://localhost:6379/0"
    cors_origins: list[str] = ["http://localhost:3000"]
    port: int = 4000
    log_dir: str = "logs"
    log_level: str = "INFO"

    speech_cache_type: Caches = Caches.REDIS
    speech_cache_config: CacheConfig = CacheConfig()
    speech_cache_ttl_seconds: int | None = None  # None: entries never expire

    synthesia_api_key: str | None = None
    synthesia_api_url: str = "https://api.synthesia.io/v2/videos"
    video_background: str = "office_01"
    video_voice: str = "en-US-Neural2-F"
    video_request_timeout_seconds: float | None = None  # None: wait for the provider indefinitely
    emit_failed_progress: bool = False

    storage_type: Storages = Storages.S3
    s3_bucket_name: str | None = None
    s3_region: str | None = None
    s3_endpoint_url: str | None = None
    local_storage_path: str = "uploads"

    openai_api_key: str | None = None
    completion_api_url: str = "https://api.openai.com/v1/completions"
    completion_model: str = "gpt-3.5-turbo-instruct"
    completion_max_tokens: int = 500
    completion_request_timeout_seconds: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
        env_nested_delimiter="__",
    )


def get_settings() -> Settings:  # ty: ignore[invalid-return-type]
    """This is only used for dependency references, see __init__.py:

    app.dependency_overrides[get_settings] = lambda: settings
    """
    ...

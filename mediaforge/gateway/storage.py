"""Object storage abstraction for S3 and local filesystem."""

from abc import ABC, abstractmethod
from enum import StrEnum, auto
from pathlib import Path
from typing import Any

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from mediaforge.gateway.exceptions import UploadFailed


class Storages(StrEnum):
    S3 = auto()
    LOCAL = auto()


class ObjectStorage(ABC):
    """Abstract interface for object storage backends."""

    @abstractmethod
    async def upload(self, key: str, body: bytes) -> dict[str, Any]:
        """Store `body` under `key` and return the upload descriptor (Location, Bucket, Key, ETag)."""


class LocalObjectStorage(ObjectStorage):
    """Store objects on the local filesystem, for development without a bucket."""

    def __init__(self, base_path: Path):
        self.base_path = base_path

    async def upload(self, key: str, body: bytes) -> dict[str, Any]:
        file_path = self.base_path / key
        if not file_path.resolve().is_relative_to(self.base_path.resolve()):
            raise UploadFailed(f"key {key!r} escapes storage root")

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(body)
        except OSError as e:
            raise UploadFailed(e) from e

        return {
            "Location": file_path.resolve().as_uri(),
            "Bucket": str(self.base_path),
            "Key": key,
            "ETag": None,
        }


class S3ObjectStorage(ObjectStorage):
    """Store objects in an S3 bucket. Credentials come from the standard AWS environment/config chain."""

    def __init__(
        self,
        bucket_name: str | None,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ):
        self.bucket_name = bucket_name
        self._session = aioboto3.Session()
        self._client_config = {
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        }

    def _location(self, key: str) -> str:
        endpoint = self._client_config["endpoint_url"]
        if endpoint:
            return f"{endpoint.rstrip('/')}/{self.bucket_name}/{key}"
        return f"https://{self.bucket_name}.s3.amazonaws.com/{key}"

    async def upload(self, key: str, body: bytes) -> dict[str, Any]:
        if not self.bucket_name:
            raise UploadFailed("S3_BUCKET_NAME is not configured")

        try:
            async with self._session.client("s3", **self._client_config) as s3:
                response = await s3.put_object(Bucket=self.bucket_name, Key=key, Body=body)
        except (BotoCoreError, ClientError) as e:
            raise UploadFailed(e) from e

        logger.debug(f"Uploaded {len(body)} bytes to s3://{self.bucket_name}/{key}")
        return {
            "Location": self._location(key),
            "Bucket": self.bucket_name,
            "Key": key,
            "ETag": response.get("ETag"),
        }

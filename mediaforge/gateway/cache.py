import abc
import base64
import binascii
import sqlite3
import time
from enum import StrEnum, auto
from pathlib import Path

from loguru import logger
from pydantic import BaseModel
from redis.asyncio import Redis
from redis.exceptions import RedisError

from mediaforge.gateway.exceptions import CacheUnavailable


class Caches(StrEnum):
    REDIS = auto()
    SQLITE = auto()


class CacheConfig(BaseModel):
    path: Path | str | None = None  # only used if cache_type is sqlite


class Cache(abc.ABC):
    """Key/value store for binary blobs.

    Absent keys read as None. An unreachable store raises CacheUnavailable on
    both reads and writes; it is never reported as a miss.
    """

    @abc.abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Return raw bytes for `key`, or None if missing."""

    @abc.abstractmethod
    async def put(self, key: str, data: bytes, ttl_seconds: int | None = None) -> None:
        """Store `data` under `key`, overwriting any prior value. No expiry unless `ttl_seconds` is given."""


class RedisCache(Cache):
    """Stores values base64-encoded under plain keys, readable by other clients of the same keyspace."""

    def __init__(self, redis: Redis):
        self._redis = redis

    async def get(self, key: str) -> bytes | None:
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            raise CacheUnavailable(f"redis GET {key!r} failed: {e}") from e
        # an empty value is a miss
        if not raw:
            return None
        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as e:
            raise CacheUnavailable(f"corrupt cache entry under {key!r}") from e

    async def put(self, key: str, data: bytes, ttl_seconds: int | None = None) -> None:
        try:
            await self._redis.set(key, base64.b64encode(data), ex=ttl_seconds)
        except RedisError as e:
            raise CacheUnavailable(f"redis SET {key!r} failed: {e}") from e


class SqliteCache(Cache):
    def __init__(self, config: CacheConfig):
        if config.path is None:
            raise ValueError("sqlite cache requires a path")
        self.db_path = Path(config.path) / "cache.db"
        self._init_db()

    def _init_db(self) -> None:
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(self.db_path) as db:
            db.execute(
                """
                CREATE TABLE IF NOT EXISTS cache (
                    key TEXT PRIMARY KEY,
                    data BLOB NOT NULL,
                    created_at REAL NOT NULL,
                    expires_at REAL  -- NULL means no expiration
                )
                """
            )
            db.execute("PRAGMA journal_mode=WAL")
        logger.debug(f"sqlite cache ready at {self.db_path}")

    async def get(self, key: str) -> bytes | None:
        try:
            with sqlite3.connect(self.db_path) as db:
                row = db.execute(
                    "SELECT data FROM cache WHERE key=? AND (expires_at IS NULL OR expires_at > ?)",
                    (key, time.time()),
                ).fetchone()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"sqlite read of {key!r} failed: {e}") from e
        return bytes(row[0]) if row else None

    async def put(self, key: str, data: bytes, ttl_seconds: int | None = None) -> None:
        ts = time.time()
        expires_at = ts + ttl_seconds if ttl_seconds else None
        try:
            with sqlite3.connect(self.db_path) as db:
                db.execute(
                    "REPLACE INTO cache(key, data, created_at, expires_at) VALUES(?, ?, ?, ?)",
                    (key, data, ts, expires_at),
                )
        except sqlite3.Error as e:
            raise CacheUnavailable(f"sqlite write of {key!r} failed: {e}") from e

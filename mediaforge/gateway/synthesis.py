"""Speech synthesis behind a lookaside cache, decoupled from transport."""

from loguru import logger

from mediaforge.gateway.cache import Cache
from mediaforge.gateway.exceptions import CacheUnavailable, SynthesisFailed
from mediaforge.gateway.hashing import speech_cache_key
from mediaforge.gateway.processors.tts import TTSProvider


class SpeechSynthesisService:
    """Returns audio for (text, language), calling the TTS provider only on a cache miss.

    The cache is an optimization: an unreachable cache degrades to uncached
    synthesis, it never fails the request.
    """

    def __init__(self, cache: Cache, provider: TTSProvider, ttl_seconds: int | None = None):
        self._cache = cache
        self._provider = provider
        self._ttl_seconds = ttl_seconds

    async def synthesize(self, text: str, language: str) -> bytes:
        key = speech_cache_key(language, text)

        try:
            cached = await self._cache.get(key)
        except CacheUnavailable as e:
            logger.warning(f"Speech cache read failed, synthesizing uncached: {e}")
            cached = None

        if cached:
            logger.info(f"Speech cache hit for {len(text)}-char text (language={language})")
            return cached

        logger.info(f"Speech cache miss for {len(text)}-char text (language={language})")
        try:
            audio = await self._provider.synthesize(text, language)
        except Exception as e:
            raise SynthesisFailed(e) from e

        if not audio:
            logger.warning(f"Provider returned no audio for language={language}, not caching")
            return audio

        try:
            await self._cache.put(key, audio, ttl_seconds=self._ttl_seconds)
        except CacheUnavailable as e:
            logger.warning(f"Speech cache write failed, returning uncached audio: {e}")

        return audio

"""Google Cloud Text-to-Speech provider."""

import abc

from google.api_core import exceptions as google_exceptions
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import texttospeech
from loguru import logger

from mediaforge.gateway.constants import TTS_AUDIO_ENCODING, TTS_SSML_GENDER
from mediaforge.gateway.processors.base import BaseProvider


class TTSProvider(BaseProvider):
    @abc.abstractmethod
    async def synthesize(self, text: str, language: str) -> bytes:
        """Return encoded audio for `text` spoken in `language`."""


class GoogleTTSProvider(TTSProvider):
    """Neutral-gender MP3 synthesis via the Google Cloud TTS async client.

    Credentials are resolved by the client library (GOOGLE_APPLICATION_CREDENTIALS).
    """

    def __init__(self) -> None:
        self._client: texttospeech.TextToSpeechAsyncClient | None = None

    async def initialize(self) -> None:
        try:
            self._client = texttospeech.TextToSpeechAsyncClient()
        except DefaultCredentialsError as e:
            logger.warning(f"Google credentials not found, speech synthesis requests will fail: {e}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.transport.close()
            self._client = None

    async def synthesize(self, text: str, language: str) -> bytes:
        if not self._client:
            raise RuntimeError("Provider not initialized")

        try:
            response = await self._client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=texttospeech.VoiceSelectionParams(
                    language_code=language,
                    ssml_gender=texttospeech.SsmlVoiceGender[TTS_SSML_GENDER],
                ),
                audio_config=texttospeech.AudioConfig(
                    audio_encoding=texttospeech.AudioEncoding[TTS_AUDIO_ENCODING],
                ),
            )
        except google_exceptions.GoogleAPICallError as e:
            logger.error(f"Google TTS error for language={language}: {e}")
            raise

        logger.debug(f"Google TTS synthesized {len(text)} chars -> {len(response.audio_content)} bytes")
        return response.audio_content

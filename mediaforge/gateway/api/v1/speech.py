from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel, Field

from mediaforge.gateway.constants import TTS_MEDIA_TYPE
from mediaforge.gateway.deps import SpeechService

router = APIRouter(prefix="/api", tags=["Speech"])


class SynthesizeSpeechRequest(BaseModel):
    text: str = Field(min_length=1)
    language: str = Field(min_length=1)


@router.post("/synthesize-speech")
async def synthesize_speech(request: SynthesizeSpeechRequest, service: SpeechService) -> Response:
    """Synthesize `text` in `language`, served from cache when the same pair was synthesized before."""
    audio = await service.synthesize(request.text, request.language)
    return Response(content=audio, media_type=TTS_MEDIA_TYPE)

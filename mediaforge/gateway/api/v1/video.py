from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from mediaforge.gateway.deps import VideoOrchestrator

router = APIRouter(prefix="/api", tags=["Video"])


class CreateVideoRequest(BaseModel):
    text: str = Field(min_length=1)
    avatar_url: str = Field(alias="avatarUrl")
    socket_id: str | None = Field(default=None, alias="socketId")

    model_config = ConfigDict(populate_by_name=True)


@router.post("/create-video")
async def create_video(request: CreateVideoRequest, orchestrator: VideoOrchestrator) -> dict[str, Any]:
    """Create a video, streaming progress to the WebSocket connection identified by `socketId`."""
    return await orchestrator.create_video(request.text, request.avatar_url, request.socket_id)

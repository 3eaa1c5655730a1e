"""Contracts for cache keys, progress events and WebSocket messages."""

from enum import StrEnum
from typing import Annotated, Final, Literal

import annotated_types
from pydantic import BaseModel, ConfigDict

SPEECH_CACHE: Final[str] = "speech:{language}:{text}"


class ProgressStage(StrEnum):
    STARTED = "Started"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    FAILED = "Failed"


Percentage = Annotated[int, annotated_types.Ge(0), annotated_types.Le(100)]


class ProgressEvent(BaseModel):
    """A single stage transition of a video job."""

    stage: ProgressStage
    progress: Percentage

    model_config = ConfigDict(frozen=True)


# WebSocket messages: Server → Client


class WSConnected(BaseModel):
    type: Literal["connected"] = "connected"
    id: str


class WSProgress(BaseModel):
    type: Literal["progress"] = "progress"
    stage: ProgressStage
    progress: Percentage

    @classmethod
    def from_event(cls, event: ProgressEvent) -> "WSProgress":
        return cls(stage=event.stage, progress=event.progress)

"""Video creation with staged progress reporting over the caller's channel."""

from typing import Any

from loguru import logger

from mediaforge.contracts import ProgressEvent, ProgressStage
from mediaforge.gateway.channels import ChannelRegistry, ProgressChannel
from mediaforge.gateway.constants import PROGRESS_COMPLETED, PROGRESS_PROCESSING, PROGRESS_STARTED
from mediaforge.gateway.exceptions import VideoCreationFailed
from mediaforge.gateway.processors.video import VideoProvider


class _JobProgress:
    """Emits the stage transitions of one invocation in order, to an optional channel."""

    def __init__(self, channel: ProgressChannel | None):
        self.channel = channel
        self.progress = 0

    async def advance(self, stage: ProgressStage, progress: int) -> None:
        self.progress = progress
        if self.channel is None:
            return
        await self.channel.emit(ProgressEvent(stage=stage, progress=progress))


class VideoCreationOrchestrator:
    """Drives one video provider call per request, reporting Started → Processing → Completed.

    Progress is fire-and-forget: a missing or disconnected listener never
    affects the outcome. With `emit_failed` set, a failure after Started also
    sends a Failed event carrying the last reached progress.
    """

    def __init__(self, provider: VideoProvider, channels: ChannelRegistry, emit_failed: bool = False):
        self._provider = provider
        self._channels = channels
        self._emit_failed = emit_failed

    async def create_video(self, text: str, avatar_url: str, channel_id: str | None) -> dict[str, Any]:
        try:
            channel = self._channels.get(channel_id)
        except Exception as e:
            raise VideoCreationFailed(e) from e

        if channel is None:
            logger.info(f"No listener for channel {channel_id!r}, progress events will be dropped")

        job = _JobProgress(channel)
        try:
            await job.advance(ProgressStage.STARTED, PROGRESS_STARTED)
            async with self._provider.submit(text, avatar_url) as pending:
                await job.advance(ProgressStage.PROCESSING, PROGRESS_PROCESSING)
                result = await pending.result()
        except Exception as e:
            if self._emit_failed:
                await job.advance(ProgressStage.FAILED, job.progress)
            raise VideoCreationFailed(e) from e

        await job.advance(ProgressStage.COMPLETED, PROGRESS_COMPLETED)
        return result

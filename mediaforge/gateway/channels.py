"""Registry of connected progress listeners, keyed by an opaque connection id."""

import uuid

from fastapi import WebSocket
from loguru import logger
from starlette.websockets import WebSocketDisconnect

from mediaforge.contracts import ProgressEvent, WSProgress


class ProgressChannel:
    """One-way, fire-and-forget event sink over a connected WebSocket."""

    def __init__(self, ws: WebSocket, channel_id: str | None = None):
        self.id = channel_id or uuid.uuid4().hex
        self._ws = ws

    async def send(self, message: dict) -> None:
        await self._ws.send_json(message)

    async def emit(self, event: ProgressEvent) -> None:
        """Deliver `event`; a listener that has gone away drops the event."""
        try:
            await self.send(WSProgress.from_event(event).model_dump(mode="json"))
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            logger.debug(f"Dropped {event.stage} event for channel {self.id}: {e!r}")


class ChannelRegistry:
    """Maps connection id to live channel for the lifetime of the connection.

    Mutated only by connect/disconnect and read by the video orchestrator; all
    operations are single dict operations on the event loop.
    """

    def __init__(self) -> None:
        self._channels: dict[str, ProgressChannel] = {}

    def register(self, channel: ProgressChannel) -> None:
        self._channels[channel.id] = channel

    def unregister(self, channel_id: str) -> None:
        self._channels.pop(channel_id, None)

    def get(self, channel_id: str | None) -> ProgressChannel | None:
        """Return the live channel for `channel_id`, or None if unknown or disconnected."""
        if channel_id is None:
            return None
        return self._channels.get(channel_id)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._channels

    def __len__(self) -> int:
        return len(self._channels)

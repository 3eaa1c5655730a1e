import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from mediaforge.contracts import WSConnected
from mediaforge.gateway.channels import ChannelRegistry, ProgressChannel

log = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


@router.websocket("/ws/progress")
async def progress_websocket(ws: WebSocket):
    """Progress channel for video jobs.

    The first frame carries the connection id; clients pass it as `socketId`
    to /api/create-video. Frames sent by the client are ignored.
    """
    registry: ChannelRegistry = ws.app.state.channel_registry

    await ws.accept()
    channel = ProgressChannel(ws)
    registry.register(channel)
    log.info(f"New client connected: {channel.id}")

    try:
        await channel.send(WSConnected(id=channel.id).model_dump(mode="json"))
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
    except WebSocketDisconnect:
        log.info(f"Client disconnected: {channel.id}")
    finally:
        registry.unregister(channel.id)

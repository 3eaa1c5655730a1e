from unittest.mock import AsyncMock

import pytest
from starlette.websockets import WebSocketDisconnect

from mediaforge.contracts import ProgressEvent, ProgressStage
from mediaforge.gateway.channels import ChannelRegistry, ProgressChannel
from tests.mediaforge.gateway.stubs import RecordingChannel


def test_register_and_lookup():
    registry = ChannelRegistry()
    channel = RecordingChannel("abc")

    registry.register(channel)

    assert registry.get("abc") is channel
    assert "abc" in registry
    assert len(registry) == 1


def test_unknown_or_stale_id_is_absent():
    registry = ChannelRegistry()
    registry.register(RecordingChannel("abc"))
    registry.unregister("abc")

    assert registry.get("abc") is None
    assert registry.get("never-connected") is None
    assert registry.get(None) is None


def test_unregister_unknown_id_is_noop():
    registry = ChannelRegistry()
    registry.unregister("missing")
    assert len(registry) == 0


def test_generated_ids_are_unique():
    assert ProgressChannel(ws=None).id != ProgressChannel(ws=None).id


@pytest.mark.asyncio
async def test_emit_sends_progress_frame():
    ws = AsyncMock()
    channel = ProgressChannel(ws, channel_id="abc")

    await channel.emit(ProgressEvent(stage=ProgressStage.PROCESSING, progress=50))

    ws.send_json.assert_awaited_once_with({"type": "progress", "stage": "Processing", "progress": 50})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [WebSocketDisconnect(code=1006), RuntimeError('Cannot call "send" once a close message has been sent.')],
)
async def test_emit_to_closed_socket_is_dropped(error):
    ws = AsyncMock()
    ws.send_json.side_effect = error
    channel = ProgressChannel(ws, channel_id="abc")

    await channel.emit(ProgressEvent(stage=ProgressStage.STARTED, progress=0))


def test_progress_must_be_a_percentage():
    with pytest.raises(ValueError):
        ProgressEvent(stage=ProgressStage.COMPLETED, progress=101)

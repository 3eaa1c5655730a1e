"""Tests for video creation progress reporting."""

import httpx
import pytest

from mediaforge.gateway.exceptions import VideoCreationFailed
from mediaforge.gateway.video import VideoCreationOrchestrator
from tests.mediaforge.gateway.stubs import RecordingChannel, StubVideoProvider

EXPECTED_STAGES = [("Started", 0), ("Processing", 50), ("Completed", 100)]


@pytest.mark.asyncio
async def test_emits_three_ordered_events_and_returns_result(registry, channel):
    provider = StubVideoProvider(result={"id": "vid-1"}, observed=channel)
    orchestrator = VideoCreationOrchestrator(provider, registry)

    result = await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

    assert result == {"id": "vid-1"}
    assert channel.stages == EXPECTED_STAGES
    assert provider.calls == [("Welcome", "http://avatar.example/a.png")]


@pytest.mark.asyncio
async def test_events_track_provider_lifecycle(registry, channel):
    provider = StubVideoProvider(observed=channel)
    orchestrator = VideoCreationOrchestrator(provider, registry)

    await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

    # Started precedes the provider call, Processing precedes reading its response
    assert provider.stages_at_submit == [("Started", 0)]
    assert provider.stages_at_result == [("Started", 0), ("Processing", 50)]


@pytest.mark.asyncio
async def test_missing_channel_still_completes(registry):
    provider = StubVideoProvider(result={"id": "vid-2"})
    orchestrator = VideoCreationOrchestrator(provider, registry)

    assert await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "nobody") == {"id": "vid-2"}
    assert await orchestrator.create_video("Welcome", "http://avatar.example/a.png", None) == {"id": "vid-2"}


@pytest.mark.asyncio
async def test_disconnected_listener_drops_events(registry):
    gone = RecordingChannel("chan-gone", disconnected=True)
    registry.register(gone)
    orchestrator = VideoCreationOrchestrator(StubVideoProvider(result={"id": "vid-3"}), registry)

    assert await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-gone") == {"id": "vid-3"}
    assert gone.messages == []


@pytest.mark.asyncio
async def test_events_only_reach_own_channel(registry, channel):
    other = RecordingChannel("chan-2")
    registry.register(other)
    orchestrator = VideoCreationOrchestrator(StubVideoProvider(), registry)

    await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-2")

    assert other.stages == EXPECTED_STAGES
    assert channel.messages == []


@pytest.mark.asyncio
async def test_provider_failure_raises_without_failed_event(registry, channel):
    provider = StubVideoProvider(submit_error=httpx.ConnectError("connection refused"))
    orchestrator = VideoCreationOrchestrator(provider, registry)

    with pytest.raises(VideoCreationFailed) as exc_info:
        await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

    assert "connection refused" in exc_info.value.detail
    assert channel.stages == [("Started", 0)]


@pytest.mark.asyncio
async def test_unparseable_result_raises_after_processing(registry, channel):
    provider = StubVideoProvider(result_error=ValueError("Expecting value"))
    orchestrator = VideoCreationOrchestrator(provider, registry)

    with pytest.raises(VideoCreationFailed):
        await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

    assert channel.stages == [("Started", 0), ("Processing", 50)]


@pytest.mark.asyncio
async def test_failed_event_when_enabled(registry, channel):
    provider = StubVideoProvider(result_error=ValueError("Expecting value"))
    orchestrator = VideoCreationOrchestrator(provider, registry, emit_failed=True)

    with pytest.raises(VideoCreationFailed):
        await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

    assert channel.stages == [("Started", 0), ("Processing", 50), ("Failed", 50)]


@pytest.mark.asyncio
async def test_channel_resolution_error_raises():
    class BrokenRegistry:
        def get(self, channel_id):
            raise KeyError(channel_id)

    orchestrator = VideoCreationOrchestrator(StubVideoProvider(), BrokenRegistry())

    with pytest.raises(VideoCreationFailed):
        await orchestrator.create_video("Welcome", "http://avatar.example/a.png", "chan-1")

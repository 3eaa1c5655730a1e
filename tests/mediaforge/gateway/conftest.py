import pytest

from mediaforge.gateway.channels import ChannelRegistry
from tests.mediaforge.gateway.stubs import InMemoryCache, RecordingChannel, StubTTSProvider


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def tts_provider() -> StubTTSProvider:
    return StubTTSProvider()


@pytest.fixture
def registry() -> ChannelRegistry:
    return ChannelRegistry()


@pytest.fixture
def channel(registry) -> RecordingChannel:
    channel = RecordingChannel("chan-1")
    registry.register(channel)
    return channel

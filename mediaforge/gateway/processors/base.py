import abc


class BaseProvider(abc.ABC):
    """A remote provider client with an explicit lifecycle, started and stopped by the app lifespan."""

    @abc.abstractmethod
    async def initialize(self) -> None:
        """Create the underlying client (connections, credentials)."""

    async def close(self) -> None:
        """Release the underlying client."""

from typing import Any


class CacheUnavailable(Exception):
    """Raised when the cache store cannot be reached or refuses a read/write."""


class APIError(Exception):
    """Base exception for all API errors.

    `message` is the short text returned to the client, `detail` carries the
    underlying provider/store error for logs only.
    """

    status_code: int = 500
    message: str = "An internal error occurred"

    def __init__(self, detail: Any = None, *, message: str | None = None):
        if message is not None:
            self.message = message
        self.detail = str(detail) if detail is not None else None
        super().__init__(self.detail or self.message)


class SynthesisFailed(APIError):
    """TTS provider call failed - maps to HTTP 500."""

    message = "An error occurred during speech synthesis"


class VideoCreationFailed(APIError):
    """Video provider call or channel resolution failed - maps to HTTP 500."""

    message = "An error occurred during video creation"


class UploadFailed(APIError):
    """Object storage upload failed - maps to HTTP 500."""

    message = "An error occurred during file upload"


class DocGenFailed(APIError):
    """Completion provider call failed - maps to HTTP 500."""

    message = "An error occurred during documentation generation"

from typing import Any

from mediaforge.gateway.constants import DOCUMENTATION_PROMPT
from mediaforge.gateway.exceptions import DocGenFailed
from mediaforge.gateway.processors.completion import CompletionProvider


class DocumentationService:
    def __init__(self, provider: CompletionProvider, max_tokens: int):
        self._provider = provider
        self._max_tokens = max_tokens

    async def generate(self, description: str) -> dict[str, Any]:
        """Ask the completion provider for a technical summary of a project description."""
        prompt = DOCUMENTATION_PROMPT.format(description=description)
        try:
            return await self._provider.complete(prompt, self._max_tokens)
        except Exception as e:
            raise DocGenFailed(e) from e

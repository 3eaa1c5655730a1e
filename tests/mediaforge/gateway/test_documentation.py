import pytest

from mediaforge.gateway.documentation import DocumentationService
from mediaforge.gateway.exceptions import DocGenFailed
from tests.mediaforge.gateway.stubs import StubCompletionProvider


@pytest.mark.asyncio
async def test_generate_builds_summary_prompt():
    provider = StubCompletionProvider()
    service = DocumentationService(provider, max_tokens=500)

    result = await service.generate("A todo app with sync")

    assert result["choices"][0]["text"] == "A summary."
    assert provider.calls == [
        ("Generate a technical summary for the following project:\nA todo app with sync", 500),
    ]


@pytest.mark.asyncio
async def test_provider_failure_raises_docgen_failed():
    service = DocumentationService(StubCompletionProvider(error=RuntimeError("boom")), max_tokens=500)

    with pytest.raises(DocGenFailed):
        await service.generate("A todo app")

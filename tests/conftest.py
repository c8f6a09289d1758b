import asyncio

import httpx
import pytest

from summary_image.image.service import generate_image
from summary_image.utils import i18n


@pytest.fixture(autouse=True)
def english_messages():
    i18n.set_language("en")
    yield
    i18n.set_language("en")


class RecordingProvider:
    """Fake chat-completions provider backed by `httpx.MockTransport`."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def call(self, content, config):
        async def _run():
            transport = httpx.MockTransport(self._handle)
            async with httpx.AsyncClient(transport=transport) as client:
                return await generate_image(content, config, client=client)

        return asyncio.run(_run())


def chat_response(content, status_code=200):
    return httpx.Response(
        status_code,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


@pytest.fixture
def provider_factory():
    return RecordingProvider


@pytest.fixture(name="chat_response")
def chat_response_fixture():
    return chat_response

"""Pytest configuration and fixtures."""
import json
import os
import tempfile
from typing import Any, Dict, List, Optional, Union

import httpx
import pytest

# Keep test runs from writing into the project's log directory
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "promptdesk-test-logs"))

from promptdesk.services.ai.models import ChatMessage, ChatRequest, Provider  # noqa: E402


def completion_body(
    content: str = "hello",
    finish_reason: Optional[str] = "stop",
    **extra: Any
) -> Dict[str, Any]:
    """Build an OpenAI-format chat completion body."""
    body = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "model": "gpt-x",
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": content},
            "finish_reason": finish_reason,
        }],
        "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
    }
    body.update(extra)
    return body


class FakeProvider:
    """Fake provider endpoint backed by httpx.MockTransport.

    Queued responses (or exceptions) are returned in order; once the queue is
    empty every request gets a successful completion. Every request is recorded.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._queue: List[Union[httpx.Response, Exception]] = []

    def queue(self, *items: Union[httpx.Response, Exception]) -> None:
        self._queue.extend(items)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else httpx.Response(200, json=completion_body())
        if isinstance(item, Exception):
            raise item
        return item

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def urls(self) -> List[str]:
        return [str(r.url) for r in self.requests]

    def payload(self, index: int = 0) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_provider():
    """Fake provider recording outbound requests."""
    return FakeProvider()


@pytest.fixture
def http_client(fake_provider):
    """Shared HTTP client wired to the fake provider."""
    return fake_provider.client()


@pytest.fixture
def chat_request():
    """Chat request matching the documented end-to-end example."""
    return ChatRequest(
        provider=Provider.OPENAI,
        model="gpt-x",
        temperature=0.7,
        max_tokens=100,
        messages=[ChatMessage(role="user", content="hi")],
        api_key="sk-abc",
        base_url="https://api.example.com/v1/",
    )

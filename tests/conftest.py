import json
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from geoapify import GeoapifyClient, RetryConfig

API_KEY = "test-key"
BASE_URL = "https://api.test"

Reply = Union[Callable[[httpx.Request], httpx.Response], Exception]


def reply(
    status: int = 200,
    json_body: Any = None,
    text: Optional[str] = None,
    headers: Optional[dict] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """A canned response, rebuilt for every request that receives it."""

    def respond(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status, text=text, headers=headers)
        if json_body is not None:
            return httpx.Response(status, json=json_body, headers=headers)
        return httpx.Response(status, headers=headers)

    return respond


class FakeServer:
    """Records every request and answers from a queue, then from `default`."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._queue: List[Reply] = []
        self.default: Reply = reply(200, {})

    def queue(self, *replies: Reply) -> None:
        self._queue.extend(replies)

    def always(self, answer: Reply) -> None:
        self.default = answer

    @property
    def attempts(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> list:
        return self.last.url.params.multi_items()

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self._queue.pop(0) if self._queue else self.default
        if isinstance(answer, Exception):
            raise answer
        return answer(request)


class SleepRecorder:
    """Stands in for asyncio.sleep; remembers each requested delay."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def sleeps():
    return SleepRecorder()


@pytest.fixture
async def make_client(server, sleeps):
    """Builds clients wired to the fake server; retry waits are recorded, not slept."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))

    def _make(retry: Optional[RetryConfig] = None, real_sleep: bool = False):
        client = GeoapifyClient(API_KEY, base_url=BASE_URL, http_client=http, retry=retry)
        if client._retry is not None and not real_sleep:
            client._retry._sleep = sleeps
        return client

    yield _make
    await http.aclose()


@pytest.fixture
async def client(make_client):
    return make_client()

from typing import Any, Callable, List, Optional

import httpx
import pytest

from algo_solver.config import Settings

LEETCODE_HOST = "leetcode.com"
GEMINI_HOST = "generativelanguage.googleapis.com"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstreams:
    """
    In-memory LeetCode and Gemini, routed by host, recording every request.
    """

    def __init__(self) -> None:
        self.calls: List[httpx.Request] = []
        self.leetcode: Handler = self.reply(
            200, self.question_body("<p>Add two numbers.</p>", "1\n2")
        )
        self.gemini: Handler = self.reply(200, self.gemini_body("print(1)"))

    # ------------------------------------------------------------------
    # Response builders
    # ------------------------------------------------------------------
    @staticmethod
    def question_body(content: Optional[str], sample: Optional[str]) -> dict:
        return {"data": {"question": {"content": content, "sampleTestCase": sample}}}

    @staticmethod
    def gemini_body(text: str) -> dict:
        return {"candidates": [{"content": {"parts": [{"text": text}]}}]}

    @staticmethod
    def reply(status: int, payload: Any = None, text: Optional[str] = None) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=payload)

        return handler

    @staticmethod
    def raise_error(exc_type: type, message: str = "") -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        return handler

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.host == LEETCODE_HOST:
            return self.leetcode(request)
        if request.url.host == GEMINI_HOST:
            return self.gemini(request)
        return httpx.Response(404, text=f"unexpected host {request.url.host}")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))

    def calls_to(self, host: str) -> List[httpx.Request]:
        return [call for call in self.calls if call.url.host == host]

    @property
    def leetcode_calls(self) -> List[httpx.Request]:
        return self.calls_to(LEETCODE_HOST)

    @property
    def gemini_calls(self) -> List[httpx.Request]:
        return self.calls_to(GEMINI_HOST)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="")


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()

"""Shared fixtures: an in-process fake node behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from txwatch.node.client import RpcClient

RPC_URL = "http://node.test:3030"


class FakeNode:
    """Records JSON-RPC requests and answers with queued responses.

    The last queued response keeps being served once the queue drains.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self._responses: list[httpx.Response] = []

    def reply(self, payload: Any = None, status: int = 200) -> "FakeNode":
        self._responses.append(httpx.Response(status, json=payload))
        return self

    def reply_result(self, result: Any, request_id: Any = "1") -> "FakeNode":
        return self.reply({"jsonrpc": "2.0", "id": request_id, "result": result})

    def reply_error(self, code: int, message: str) -> "FakeNode":
        return self.reply({"jsonrpc": "2.0", "id": "1", "error": {"code": code, "message": message}})

    def reply_raw(self, content: bytes, status: int = 200) -> "FakeNode":
        self._responses.append(httpx.Response(status, content=content))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.host == "node.test"
        self.requests.append(json.loads(request.content))
        if not self._responses:
            raise AssertionError("FakeNode has no response queued")
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> RpcClient:
        return RpcClient(httpx.AsyncClient(transport=self.transport), rpc_url=RPC_URL, owns_http=True)

    @property
    def last_request(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def rpc_url() -> str:
    return RPC_URL

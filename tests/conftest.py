"""Shared fixtures: an in-process fake daemon behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest

from arrrweb3 import ARRRweb3, HttpProvider

RPC_URL = "http://127.0.0.1:45453"


class FakeDaemon:
    """Records every request and answers with a canned JSON-RPC reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.result: Any = None
        self.status_code: int = 200
        self.body: Optional[str] = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        payload = json.loads(request.content)
        return httpx.Response(
            self.status_code,
            json={"result": self.result, "error": None, "id": payload["id"]},
        )

    def reply(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body

    def reply_json(self, data: Any, status_code: int = 200) -> None:
        self.reply(status_code, json.dumps(data))

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture()
def daemon() -> FakeDaemon:
    return FakeDaemon()


@pytest.fixture()
def provider(daemon: FakeDaemon) -> HttpProvider:
    return HttpProvider(RPC_URL, transport=daemon.transport())


@pytest.fixture()
def client(daemon: FakeDaemon) -> ARRRweb3:
    return ARRRweb3(RPC_URL, transport=daemon.transport())

import json

import httpx
import pytest


class RecordingTransport:
    """Collects the requests sent through an httpx.MockTransport."""

    def __init__(self, status_code: int = 200, text: str = "1"):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def webhook(monkeypatch):
    """Route webhook deliveries to an in-memory transport instead of the network."""
    recorder = RecordingTransport()

    def _client(**kwargs):
        return httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler))

    monkeypatch.setattr("neouptime.notifications.base.safe_http_client", _client)
    return recorder

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass

from pxshot.application.ports import Transport, TransportError, TransportResponse


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: bytes | None


class RecordingTransport(Transport):
    """Replays queued responses in order and records every request it sees."""

    def __init__(self, *responses: TransportResponse | TransportError) -> None:
        self._queue: deque[TransportResponse | TransportError] = deque(responses)
        self.requests: list[RecordedRequest] = []
        self.closed = False

    def enqueue(self, response: TransportResponse | TransportError) -> None:
        self._queue.append(response)

    def post(self, path: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        return self._reply(RecordedRequest("POST", path, dict(headers), body))

    def get(self, path: str, headers: Mapping[str, str]) -> TransportResponse:
        return self._reply(RecordedRequest("GET", path, dict(headers), None))

    def close(self) -> None:
        self.closed = True

    def _reply(self, request: RecordedRequest) -> TransportResponse:
        self.requests.append(request)
        if not self._queue:
            raise TransportError("no response queued")
        response = self._queue.popleft()
        if isinstance(response, TransportError):
            raise response
        return response

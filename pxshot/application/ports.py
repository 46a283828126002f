from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def header(self, name: str) -> str | None:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def content_type(self) -> str:
        return self.header("content-type") or ""


class TransportError(RuntimeError):
    """No response was received (connection, DNS, TLS, timeout)."""


class Transport(Protocol):
    def post(self, path: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        raise NotImplementedError

    def get(self, path: str, headers: Mapping[str, str]) -> TransportResponse:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

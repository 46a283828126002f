from __future__ import annotations

import builtins
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pxshot.adapters.schemas import StoredScreenshot
from pxshot.domain.errors import PxshotError


class ResultKind(str, Enum):
    bytes = "bytes"
    stored = "stored"


@dataclass(frozen=True, slots=True)
class ScreenshotResult:
    """Either the rendered image bytes or a descriptor of a stored artifact.

    Build instances with ``from_bytes`` / ``from_stored``; exactly one of
    ``is_bytes`` and ``is_stored`` is true. Reading the other variant raises
    ``PxshotError``.
    """

    kind: ResultKind
    _data: builtins.bytes | None = None
    _stored: StoredScreenshot | None = None

    def __post_init__(self) -> None:
        if self.kind is ResultKind.bytes:
            valid = self._data is not None and self._stored is None
        else:
            valid = self._stored is not None and self._data is None
        if not valid:
            raise PxshotError(
                f"ScreenshotResult of kind {self.kind.value} needs exactly its own payload"
            )

    @classmethod
    def from_bytes(cls, data: builtins.bytes) -> ScreenshotResult:
        return cls(kind=ResultKind.bytes, _data=builtins.bytes(data))

    @classmethod
    def from_stored(cls, stored: StoredScreenshot) -> ScreenshotResult:
        return cls(kind=ResultKind.stored, _stored=stored)

    @property
    def is_bytes(self) -> bool:
        return self.kind is ResultKind.bytes

    @property
    def is_stored(self) -> bool:
        return self.kind is ResultKind.stored

    @property
    def bytes(self) -> builtins.bytes:
        if self.kind is not ResultKind.bytes:
            raise PxshotError("Screenshot was stored - use stored instead")
        assert self._data is not None
        return self._data

    @property
    def stored(self) -> StoredScreenshot:
        if self.kind is not ResultKind.stored:
            raise PxshotError("Screenshot was returned as bytes - use bytes instead")
        assert self._stored is not None
        return self._stored

    @property
    def url(self) -> str:
        return self.stored.url

    @property
    def expires_at(self) -> str:
        return self.stored.expires_at

    @property
    def width(self) -> int:
        return self.stored.width

    @property
    def height(self) -> int:
        return self.stored.height

    @property
    def size_bytes(self) -> int:
        return self.stored.size_bytes

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_bytes(self.bytes)
        return target

    def __repr__(self) -> str:
        if self.kind is ResultKind.bytes:
            return f"ScreenshotResult(kind=bytes, size={len(self.bytes)})"
        return f"ScreenshotResult(kind=stored, url={self.url!r})"

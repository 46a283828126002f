import pytest

from pxshot.adapters.schemas import StoredScreenshot
from pxshot.domain.errors import PxshotError
from pxshot.domain.result import ResultKind, ScreenshotResult


def _stored() -> StoredScreenshot:
    return StoredScreenshot(
        url="https://cdn.example/s/abc.png",
        expires_at="2025-01-01T00:00:00Z",
        width=1280,
        height=720,
        size_bytes=12345,
    )


def test_bytes_variant() -> None:
    result = ScreenshotResult.from_bytes(bytearray(b"\x89PNG"))
    assert result.kind is ResultKind.bytes
    assert result.is_bytes and not result.is_stored
    assert result.bytes == b"\x89PNG"
    assert isinstance(result.bytes, bytes)
    with pytest.raises(PxshotError, match="bytes"):
        result.stored
    with pytest.raises(PxshotError):
        result.url


def test_empty_bytes_is_still_bytes_variant() -> None:
    result = ScreenshotResult.from_bytes(b"")
    assert result.is_bytes
    assert not result.is_stored
    assert result.bytes == b""


def test_stored_variant() -> None:
    result = ScreenshotResult.from_stored(_stored())
    assert result.kind is ResultKind.stored
    assert result.is_stored and not result.is_bytes
    assert result.url == "https://cdn.example/s/abc.png"
    assert result.expires_at == "2025-01-01T00:00:00Z"
    assert (result.width, result.height, result.size_bytes) == (1280, 720, 12345)
    with pytest.raises(PxshotError, match="stored"):
        result.bytes


def test_save_writes_bytes(tmp_path) -> None:
    target = ScreenshotResult.from_bytes(b"abc").save(tmp_path / "shot.png")
    assert target.read_bytes() == b"abc"


def test_save_refuses_stored(tmp_path) -> None:
    with pytest.raises(PxshotError):
        ScreenshotResult.from_stored(_stored()).save(tmp_path / "shot.png")
    assert not (tmp_path / "shot.png").exists()


@pytest.mark.parametrize(
    "fields",
    [
        {"kind": ResultKind.stored, "_data": b"x"},
        {"kind": ResultKind.stored},
        {"kind": ResultKind.bytes},
        {"kind": ResultKind.bytes, "_stored": _stored()},
        {"kind": ResultKind.bytes, "_data": b"x", "_stored": _stored()},
        {"kind": ResultKind.stored, "_data": b"x", "_stored": _stored()},
    ],
)
def test_mismatched_payload_is_rejected(fields: dict) -> None:
    with pytest.raises(PxshotError, match="needs exactly its own payload"):
        ScreenshotResult(**fields)


def test_repr_names_variant() -> None:
    assert repr(ScreenshotResult.from_bytes(b"abc")) == "ScreenshotResult(kind=bytes, size=3)"
    assert "kind=stored" in repr(ScreenshotResult.from_stored(_stored()))

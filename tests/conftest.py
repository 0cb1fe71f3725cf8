"""
Shared pytest fixtures for flexsum tests.

Provides:
- FakeHashBackend: deterministic backend recording its calls
- failing_backend: backend whose digest functions raise
- clean_env: removes FLEXSUM_* variables so settings tests are isolated
"""

import os
from pathlib import Path

import pytest

from flexsum.services.logging import set_default_logger


class FakeHashBackend:
    """HashBackend double returning fixed values."""

    def __init__(self, fail: set[str] | None = None) -> None:
        self.fail = fail or set()
        self.calls: list[tuple[str, bytes]] = []

    def _record(self, name: str, data: bytes) -> None:
        self.calls.append((name, data))
        if name in self.fail:
            raise RuntimeError(f"{name} backend exploded")

    def crc32(self, data: bytes) -> int:
        self._record("crc32", data)
        return 0xFF

    def crc32c(self, data: bytes) -> int:
        self._record("crc32c", data)
        return 0xFFFFFFFF

    def sha1(self, data: bytes) -> bytes:
        self._record("sha1", data)
        return bytes(range(20))

    def sha256(self, data: bytes) -> bytes:
        self._record("sha256", data)
        return bytes(32)

    def md5(self, data: bytes) -> bytes:
        self._record("md5", data)
        return b"\x00\x1a\xff" + bytes(13)


@pytest.fixture
def fake_backend() -> FakeHashBackend:
    """Backend that always succeeds with fixed values."""
    return FakeHashBackend()


@pytest.fixture
def failing_backend() -> FakeHashBackend:
    """Backend whose digest-family functions raise RuntimeError."""
    return FakeHashBackend(fail={"sha1", "sha256", "md5"})


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove flexsum environment variables for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("FLEXSUM_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project_dir(tmp_path: Path, clean_env: None) -> Path:
    """Empty project directory with a .flexsum config directory."""
    (tmp_path / ".flexsum").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Restore the no-op default logger after each test."""
    yield
    set_default_logger(None)

"""
Hash backend protocol.

The bit-level algorithm implementations live behind this protocol so
digest computation can run against the standard library or a fake.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HashBackend(Protocol):
    """Five pure functions computing raw checksums and digests.

    The CRC functions are infallible and return an unsigned 32-bit int.
    The digest functions return raw bytes and may raise on failure.
    """

    def crc32(self, data: bytes) -> int:
        """CRC-32 (IEEE 802.3) of data."""
        ...

    def crc32c(self, data: bytes) -> int:
        """CRC-32C (Castagnoli) of data."""
        ...

    def sha1(self, data: bytes) -> bytes:
        """SHA-1 digest of data."""
        ...

    def sha256(self, data: bytes) -> bytes:
        """SHA-256 digest of data."""
        ...

    def md5(self, data: bytes) -> bytes:
        """MD5 digest of data."""
        ...

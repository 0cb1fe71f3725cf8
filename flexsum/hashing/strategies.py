"""
Hash algorithm strategy implementations.

Each strategy binds one HashAlgorithm to one backend function and to the
digest variant that function produces.
"""

from abc import ABC, abstractmethod

from ..core.exceptions import HashingFailedError
from ..core.interfaces.backend import HashBackend
from ..core.models.algorithm import HashAlgorithm
from ..core.models.digest import BytesDigest, IntegerDigest


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: The HashAlgorithm this strategy computes
    - compute(): Run the backend function and wrap its output
    """

    @property
    @abstractmethod
    def algorithm(self) -> HashAlgorithm:
        """Return the algorithm this strategy computes."""
        pass

    @abstractmethod
    def compute(self, backend: HashBackend, data: bytes) -> IntegerDigest | BytesDigest:
        """Compute the digest of data with the given backend."""
        pass


class ChecksumStrategy(HashStrategy):
    """CRC-family strategy: infallible, produces an IntegerDigest."""

    @abstractmethod
    def checksum(self, backend: HashBackend, data: bytes) -> int:
        """Return the raw 32-bit checksum."""
        pass

    def compute(self, backend: HashBackend, data: bytes) -> IntegerDigest:
        return IntegerDigest(value=self.checksum(backend, data))


class DigestStrategy(HashStrategy):
    """Digest-family strategy: produces a BytesDigest, wraps backend failures."""

    @abstractmethod
    def digest(self, backend: HashBackend, data: bytes) -> bytes:
        """Return the raw digest bytes."""
        pass

    def compute(self, backend: HashBackend, data: bytes) -> BytesDigest:
        name = self.algorithm.display_name
        try:
            hashed = self.digest(backend, data)
        except Exception as e:
            raise HashingFailedError(
                f"Error computing {name}: {e}", algorithm=name, cause=e
            )
        return BytesDigest(data=hashed)


class CRC32Strategy(ChecksumStrategy):
    """CRC-32 checksum strategy."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.CRC32

    def checksum(self, backend: HashBackend, data: bytes) -> int:
        return backend.crc32(data)


class CRC32CStrategy(ChecksumStrategy):
    """CRC-32C (Castagnoli) checksum strategy."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.CRC32C

    def checksum(self, backend: HashBackend, data: bytes) -> int:
        return backend.crc32c(data)


class SHA1Strategy(DigestStrategy):
    """SHA-1 digest strategy."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.SHA1

    def digest(self, backend: HashBackend, data: bytes) -> bytes:
        return backend.sha1(data)


class SHA256Strategy(DigestStrategy):
    """SHA-256 digest strategy."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.SHA256

    def digest(self, backend: HashBackend, data: bytes) -> bytes:
        return backend.sha256(data)


class MD5Strategy(DigestStrategy):
    """MD5 digest strategy - for legacy compatibility only."""

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.MD5

    def digest(self, backend: HashBackend, data: bytes) -> bytes:
        return backend.md5(data)

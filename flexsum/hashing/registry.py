"""
Hash algorithm registry.

Maps each HashAlgorithm to the strategy that computes it and runs that
strategy against a hash backend.
"""

from functools import lru_cache

from ..core.exceptions import UnknownAlgorithmError
from ..core.interfaces.backend import HashBackend
from ..core.models.algorithm import HashAlgorithm
from ..core.models.digest import BytesDigest, IntegerDigest
from .backend import StandardHashBackend
from .strategies import (
    CRC32CStrategy,
    CRC32Strategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
)

# Every HashAlgorithm member must appear here.
DEFAULT_STRATEGIES: dict[HashAlgorithm, type[HashStrategy]] = {
    HashAlgorithm.CRC32: CRC32Strategy,
    HashAlgorithm.CRC32C: CRC32CStrategy,
    HashAlgorithm.SHA1: SHA1Strategy,
    HashAlgorithm.SHA256: SHA256Strategy,
    HashAlgorithm.MD5: MD5Strategy,
}


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()
        result = registry.compute_digest(HashAlgorithm.SHA256, b"abc")
        result.hex()

        # Run against a different backend
        registry = HashAlgorithmRegistry(backend=FakeBackend())
    """

    def __init__(self, backend: HashBackend | None = None, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            backend: Hash backend (defaults to StandardHashBackend)
            register_defaults: If True, register built-in strategies
        """
        self._backend = backend or StandardHashBackend()
        self._strategies: dict[HashAlgorithm, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in strategies."""
        for strategy_cls in DEFAULT_STRATEGIES.values():
            self.register(strategy_cls())

    @property
    def backend(self) -> HashBackend:
        return self._backend

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy, replacing any existing one for its algorithm.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[strategy.algorithm] = strategy

    def get(self, algorithm: HashAlgorithm | str) -> HashStrategy | None:
        """
        Get strategy by algorithm.

        Args:
            algorithm: HashAlgorithm or algorithm name (any case)

        Returns:
            HashStrategy or None if the algorithm is unknown or unregistered
        """
        if isinstance(algorithm, str) and not isinstance(algorithm, HashAlgorithm):
            parsed = HashAlgorithm.parse(algorithm)
            if parsed is None:
                return None
            algorithm = parsed
        return self._strategies.get(algorithm)

    def compute_digest(
        self, algorithm: HashAlgorithm | str, data: bytes
    ) -> IntegerDigest | BytesDigest:
        """
        Compute the digest of data.

        Args:
            algorithm: HashAlgorithm or algorithm name
            data: Bytes to hash; not copied or modified

        Returns:
            IntegerDigest for CRC32/CRC32C, BytesDigest otherwise

        Raises:
            UnknownAlgorithmError: If no strategy is registered for the algorithm
            HashingFailedError: If the backend fails computing a digest
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnknownAlgorithmError(f"Unknown hash algorithm: {algorithm}", name=str(algorithm))
        return strategy.compute(self._backend, data)

    def compute_hex(self, algorithm: HashAlgorithm | str, data: bytes) -> str:
        """Compute the digest of data and render it as lowercase hex."""
        return self.compute_digest(algorithm, data).hex()

    @property
    def available_algorithms(self) -> list[HashAlgorithm]:
        """List registered algorithms."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: object) -> bool:
        """Check if algorithm is registered."""
        return algorithm in self._strategies


@lru_cache(maxsize=1)
def default_registry() -> HashAlgorithmRegistry:
    """Shared registry over the standard backend."""
    return HashAlgorithmRegistry()


def compute_digest(
    algorithm: HashAlgorithm | str, data: bytes, backend: HashBackend | None = None
) -> IntegerDigest | BytesDigest:
    """
    Compute the digest of data with the given algorithm.

    Args:
        algorithm: HashAlgorithm or algorithm name
        data: Bytes to hash
        backend: Hash backend to use instead of the standard one

    Returns:
        IntegerDigest for CRC32/CRC32C, BytesDigest otherwise
    """
    registry = default_registry() if backend is None else HashAlgorithmRegistry(backend=backend)
    return registry.compute_digest(algorithm, data)

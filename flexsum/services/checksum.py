"""
Checksum service.

Caller-facing entry point for content-integrity checksums: resolves an
algorithm name, applies the configured input limit, computes and renders.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import InvalidInputError, UnknownAlgorithmError, UnsupportedAlgorithmError
from ..core.interfaces.backend import HashBackend
from ..core.interfaces.logger import ILogger
from ..core.models.algorithm import HashAlgorithm
from ..core.models.config import ChecksumConfig
from ..hashing.registry import HashAlgorithmRegistry, default_registry
from .logging import get_default_logger


class ChecksumService:
    """
    Computes and verifies checksums with the algorithms allowed for checksum use.

    Unlike the registry, which reports a lookup miss as None and an
    excluded algorithm as False, the service raises for both.
    """

    def __init__(
        self,
        config: ChecksumConfig | None = None,
        backend: HashBackend | None = None,
        logger: ILogger | None = None,
    ):
        """
        Initialize checksum service.

        Args:
            config: Checksum config section (defaults to ChecksumConfig())
            backend: Hash backend (defaults to the shared standard registry)
            logger: Diagnostic logger (defaults to the installed default logger)
        """
        self._config = config or ChecksumConfig()
        self._registry = (
            default_registry() if backend is None else HashAlgorithmRegistry(backend=backend)
        )
        self._logger = logger or get_default_logger()

    @property
    def config(self) -> ChecksumConfig:
        return self._config

    def resolve(self, algorithm: HashAlgorithm | str | None = None) -> HashAlgorithm:
        """
        Resolve an algorithm for checksum use.

        Args:
            algorithm: HashAlgorithm, name (any case), or None for the default

        Returns:
            The resolved HashAlgorithm

        Raises:
            UnknownAlgorithmError: If the name is not recognized
            UnsupportedAlgorithmError: If the algorithm is excluded from checksum use
        """
        if algorithm is None:
            algorithm = self._config.default_algorithm

        if isinstance(algorithm, HashAlgorithm):
            resolved = algorithm
        else:
            parsed = HashAlgorithm.parse(algorithm)
            if parsed is None:
                raise UnknownAlgorithmError(
                    f"Unknown checksum algorithm: {algorithm!r}", name=algorithm
                )
            resolved = parsed

        if not resolved.is_supported_for_checksum:
            raise UnsupportedAlgorithmError(
                f"{resolved.display_name} is not a supported checksum algorithm",
                algorithm=resolved.value,
            )
        return resolved

    def negotiate(self, names: Iterable[str]) -> HashAlgorithm | None:
        """
        Pick the first usable checksum algorithm from a preference list.

        Args:
            names: Algorithm names in order of preference

        Returns:
            First name that parses and is supported, or None
        """
        for name in names:
            algorithm = HashAlgorithm.parse(name)
            if algorithm is not None and algorithm.is_supported_for_checksum:
                return algorithm
            self._logger.debug("Skipping checksum algorithm %r", name)
        return None

    def check_input(self, data: bytes) -> None:
        """
        Apply the configured size limit.

        Raises:
            InvalidInputError: If data exceeds max_input_size
        """
        limit = self._config.max_input_size
        if limit is not None and len(data) > limit:
            raise InvalidInputError(
                f"Input of {len(data)} bytes exceeds checksum limit of {limit} bytes",
                size=len(data),
                limit=limit,
            )

    def checksum(self, data: bytes, algorithm: HashAlgorithm | str | None = None) -> str:
        """
        Compute a checksum and render it as lowercase hex.

        Args:
            data: Bytes to checksum
            algorithm: HashAlgorithm, name, or None for the configured default

        Returns:
            Hex checksum string

        Raises:
            UnknownAlgorithmError, UnsupportedAlgorithmError: Bad algorithm
            InvalidInputError: Input exceeds the configured limit
            HashingFailedError: The backend failed
        """
        resolved = self.resolve(algorithm)
        self.check_input(data)
        self._logger.debug("Computing %s over %d bytes", resolved.display_name, len(data))
        return self._registry.compute_hex(resolved, data)

    def verify(
        self, data: bytes, expected: str, algorithm: HashAlgorithm | str | None = None
    ) -> bool:
        """
        Check data against an expected hex checksum.

        The comparison ignores case of the expected value.

        Returns:
            True if the computed checksum matches
        """
        actual = self.checksum(data, algorithm)
        matched = actual == expected.lower()
        if not matched:
            self._logger.debug("Checksum mismatch: expected %s, got %s", expected, actual)
        return matched

"""
flexsum: checksum and digest algorithms behind one interface.

Select an algorithm by name, compute a digest over a byte buffer and
render it as canonical lowercase hex.

Example:
    >>> from flexsum import HashAlgorithm, compute_digest, render
    >>> render(compute_digest(HashAlgorithm.CRC32, b"123456789"))
    'cbf43926'
"""

from .core.exceptions import (
    AlgorithmError,
    ConfigValidationError,
    FlexsumConfigError,
    FlexsumException,
    HashError,
    HashingFailedError,
    InvalidInputError,
    UnknownAlgorithmError,
    UnsupportedAlgorithmError,
)
from .core.interfaces.backend import HashBackend
from .core.models.algorithm import HashAlgorithm, is_supported_for_checksum, parse_algorithm
from .core.models.digest import BytesDigest, DigestResult, IntegerDigest, render
from .core.settings import FlexsumSettings, load_settings
from .hashing import HashAlgorithmRegistry, StandardHashBackend, compute_digest
from .services.checksum import ChecksumService

__all__ = [
    "AlgorithmError",
    "BytesDigest",
    "ChecksumService",
    "ConfigValidationError",
    "DigestResult",
    "FlexsumConfigError",
    "FlexsumException",
    "FlexsumSettings",
    "HashAlgorithm",
    "HashAlgorithmRegistry",
    "HashBackend",
    "HashError",
    "HashingFailedError",
    "IntegerDigest",
    "InvalidInputError",
    "StandardHashBackend",
    "UnknownAlgorithmError",
    "UnsupportedAlgorithmError",
    "compute_digest",
    "is_supported_for_checksum",
    "load_settings",
    "parse_algorithm",
    "render",
]

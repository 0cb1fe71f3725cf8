"""
Hash algorithm strategies and registry.

Each algorithm is computed by a strategy that knows which backend function
to call and which digest variant it produces.
"""

from .backend import StandardHashBackend
from .registry import DEFAULT_STRATEGIES, HashAlgorithmRegistry, compute_digest, default_registry
from .strategies import (
    ChecksumStrategy,
    CRC32CStrategy,
    CRC32Strategy,
    DigestStrategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
)

__all__ = [
    "CRC32CStrategy",
    "CRC32Strategy",
    "ChecksumStrategy",
    "DEFAULT_STRATEGIES",
    "DigestStrategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA256Strategy",
    "StandardHashBackend",
    "compute_digest",
    "default_registry",
]

"""
Hash algorithm identifiers.

The set of algorithms is closed. Names are parsed case-insensitively and
an unrecognized name is a lookup miss, not an error.
"""

from __future__ import annotations

from enum import Enum


class HashAlgorithm(str, Enum):
    """Algorithm identifier, valued by its lowercase token."""

    CRC32 = "crc32"
    CRC32C = "crc32c"
    SHA1 = "sha1"
    SHA256 = "sha256"
    MD5 = "md5"  # recognized, but never a valid checksum algorithm

    @classmethod
    def parse(cls, name: str) -> HashAlgorithm | None:
        """
        Look up an algorithm by name.

        The whole string is lowercased before comparison; surrounding
        whitespace is not stripped.

        Args:
            name: Algorithm name, e.g. 'SHA256' or 'crc32c'

        Returns:
            Matching HashAlgorithm, or None if the name is not recognized.
        """
        return _BY_TOKEN.get(name.lower())

    @property
    def is_supported_for_checksum(self) -> bool:
        """Whether this algorithm may be used as a content-integrity checksum."""
        return self in _CHECKSUM_ALGORITHMS

    @property
    def display_name(self) -> str:
        """Uppercase name used in diagnostics (e.g. 'SHA256')."""
        return self.name

    @classmethod
    def checksum_algorithms(cls) -> list[HashAlgorithm]:
        """Algorithms usable as checksums, in declaration order."""
        return [algorithm for algorithm in cls if algorithm.is_supported_for_checksum]


_BY_TOKEN: dict[str, HashAlgorithm] = {algorithm.value: algorithm for algorithm in HashAlgorithm}

# Explicit allow-set: algorithms missing from it are unsupported.
_CHECKSUM_ALGORITHMS = frozenset(
    {
        HashAlgorithm.CRC32,
        HashAlgorithm.CRC32C,
        HashAlgorithm.SHA256,
        HashAlgorithm.SHA1,
    }
)


def parse_algorithm(name: str) -> HashAlgorithm | None:
    """Function form of HashAlgorithm.parse."""
    return HashAlgorithm.parse(name)


def is_supported_for_checksum(algorithm: HashAlgorithm) -> bool:
    """Function form of HashAlgorithm.is_supported_for_checksum."""
    return algorithm.is_supported_for_checksum

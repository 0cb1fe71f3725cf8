"""
Standard hash backend.

CRC-32 and the cryptographic digests come from the standard library;
CRC-32C comes from the crc package's table-driven calculator.
"""

import hashlib
import zlib

from crc import Calculator, Configuration

# Castagnoli polynomial, reflected, as used by iSCSI and ext4
CRC32C_CONFIGURATION = Configuration(
    width=32,
    polynomial=0x1EDC6F41,
    init_value=0xFFFFFFFF,
    final_xor_value=0xFFFFFFFF,
    reverse_input=True,
    reverse_output=True,
)


class StandardHashBackend:
    """HashBackend implementation over zlib, crc and hashlib."""

    def __init__(self) -> None:
        self._crc32c = Calculator(CRC32C_CONFIGURATION, optimized=True)

    def crc32(self, data: bytes) -> int:
        return zlib.crc32(data) & 0xFFFFFFFF

    def crc32c(self, data: bytes) -> int:
        return self._crc32c.checksum(data)

    def sha1(self, data: bytes) -> bytes:
        return hashlib.sha1(data).digest()

    def sha256(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    def md5(self, data: bytes) -> bytes:
        # Raises ValueError on FIPS-restricted builds
        return hashlib.md5(data).digest()

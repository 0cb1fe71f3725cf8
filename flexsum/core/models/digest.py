"""
Digest result models.

CRC-family algorithms produce a 32-bit integer, digest-family algorithms
produce an opaque byte string. Both shapes are variants of one tagged
union and render to the same lowercase hex convention.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field
from typing_extensions import assert_never

from .base import ImmutableModel

UINT32_MAX = 0xFFFFFFFF


class IntegerDigest(ImmutableModel):
    """Fixed-width 32-bit checksum (CRC32, CRC32C)."""

    kind: Literal["integer"] = "integer"
    value: int = Field(ge=0, le=UINT32_MAX, description="Unsigned 32-bit checksum")

    def hex(self) -> str:
        """Render as 8 zero-padded lowercase hex digits, most significant first."""
        return f"{self.value:08x}"


class BytesDigest(ImmutableModel):
    """Variable-length byte digest (SHA1, SHA256, MD5)."""

    kind: Literal["bytes"] = "bytes"
    data: bytes = Field(description="Raw digest bytes")

    def hex(self) -> str:
        """Render as two lowercase hex digits per byte, in order."""
        return self.data.hex()


DigestResult = Annotated[IntegerDigest | BytesDigest, Field(discriminator="kind")]


def render(result: IntegerDigest | BytesDigest) -> str:
    """
    Render a digest result as a canonical lowercase hex string.

    Args:
        result: Either digest variant

    Returns:
        8 hex digits for an IntegerDigest, 2 per byte for a BytesDigest.
    """
    if isinstance(result, IntegerDigest):
        return result.hex()
    if isinstance(result, BytesDigest):
        return result.hex()
    assert_never(result)

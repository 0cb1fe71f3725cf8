"""
Pydantic models for flexsum.

This package provides typed, validated models for flexsum's values and
configuration. All models use Pydantic v2.
"""

from .algorithm import HashAlgorithm, is_supported_for_checksum, parse_algorithm
from .base import FlexsumBaseModel, ImmutableModel
from .config import ChecksumConfig, FlexsumConfig, LoggingConfig
from .digest import BytesDigest, DigestResult, IntegerDigest, render

__all__ = [
    "BytesDigest",
    "ChecksumConfig",
    "DigestResult",
    "FlexsumBaseModel",
    "FlexsumConfig",
    "HashAlgorithm",
    "ImmutableModel",
    "IntegerDigest",
    "LoggingConfig",
    "is_supported_for_checksum",
    "parse_algorithm",
    "render",
]

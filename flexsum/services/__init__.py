"""Service implementations for flexsum."""

from .checksum import ChecksumService
from .logging import FlexsumLogger, NullLogger, get_default_logger, set_default_logger

__all__ = [
    "ChecksumService",
    "FlexsumLogger",
    "NullLogger",
    "get_default_logger",
    "set_default_logger",
]

"""
Core definitions for flexsum.

This module provides:
- Algorithm identifiers and digest result models
- Protocol definitions for the hash backend and logger
- Settings loading
- Custom exception hierarchy
"""

from .exceptions import (
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

__all__ = [
    "AlgorithmError",
    "ConfigValidationError",
    "FlexsumConfigError",
    "FlexsumException",
    "HashError",
    "HashingFailedError",
    "InvalidInputError",
    "UnknownAlgorithmError",
    "UnsupportedAlgorithmError",
]

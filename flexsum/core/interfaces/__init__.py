"""
Protocol definitions for flexsum's service interfaces.

These define the contracts implementations must follow, so the
computation layer can be exercised against fakes.
"""

from .backend import HashBackend
from .logger import ILogger

__all__ = [
    "HashBackend",
    "ILogger",
]

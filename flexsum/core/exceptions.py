"""
Custom exception hierarchy for flexsum.

Provides typed exceptions so callers can tell an unusable algorithm apart
from a failure inside the underlying hash implementation.
"""

from __future__ import annotations


class FlexsumException(Exception):
    """
    Base exception for all flexsum errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, sizes, etc.)
        recoverable: Whether retry/recovery may be possible
    """

    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class FlexsumConfigError(FlexsumException):
    """Base class for configuration-related errors."""

    pass


class ConfigValidationError(FlexsumConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so pydantic validators can raise it directly.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Hashing Errors
# =============================================================================


class HashError(FlexsumException):
    """Base class for digest computation errors."""

    pass


class InvalidInputError(HashError, ValueError):
    """
    Input rejected before any digest was computed.

    Never raised by the computation layer itself; callers raise it
    for their own preconditions such as size limits.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        size: int | None = None,
        limit: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if size is not None:
            ctx["size"] = size
        if limit is not None:
            ctx["limit"] = limit
        super().__init__(message, context=ctx, cause=cause)


class HashingFailedError(HashError):
    """
    The underlying hash implementation failed.

    The reason names the algorithm and carries the downstream error text,
    and the downstream exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        reason: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(reason, context=context, cause=cause)
        self.reason = reason
        self.algorithm = algorithm


# =============================================================================
# Algorithm Selection Errors
# =============================================================================


class AlgorithmError(FlexsumException):
    """Base class for algorithm selection errors raised by services."""

    pass


class UnknownAlgorithmError(AlgorithmError, ValueError):
    """Algorithm name did not match any known algorithm."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)


class UnsupportedAlgorithmError(AlgorithmError, ValueError):
    """Algorithm is recognized but may not be used as a checksum."""

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)

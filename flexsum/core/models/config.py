"""
Configuration models.

Provides Pydantic models for flexsum configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from ..exceptions import ConfigValidationError
from .algorithm import HashAlgorithm
from .base import FlexsumBaseModel

# Type aliases
ChecksumAlgorithmName = Literal["crc32", "crc32c", "sha1", "sha256"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(FlexsumBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class ChecksumConfig(ConfigBaseModel):
    """Checksum configuration section."""

    default_algorithm: ChecksumAlgorithmName = "crc32"
    max_input_size: int | None = Field(default=None, ge=0)

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        """Accept any casing and reject algorithms excluded from checksum use."""
        if isinstance(v, HashAlgorithm):
            v = v.value
        if not isinstance(v, str):
            return v
        algorithm = HashAlgorithm.parse(v)
        if algorithm is None:
            raise ConfigValidationError(
                f"Unknown checksum algorithm: {v}", key="checksum.default_algorithm", value=v
            )
        if not algorithm.is_supported_for_checksum:
            raise ConfigValidationError(
                f"{algorithm.display_name} is not a supported checksum algorithm",
                key="checksum.default_algorithm",
                value=v,
            )
        return algorithm.value

    @field_validator("max_input_size", mode="before")
    @classmethod
    def parse_empty_limit(cls, v: Any) -> Any:
        """Treat an empty value (e.g. an unset env var) as no limit."""
        if v == "":
            return None
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def lowercase_level(cls, v: Any) -> Any:
        """Accept upper-case level names."""
        return v.lower() if isinstance(v, str) else v


class FlexsumConfig(ConfigBaseModel):
    """Complete flexsum configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'checksum.default_algorithm')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default
        return obj

"""
Configuration models.

Provides Pydantic models for dispnet_hash configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from .base import DispnetBaseModel
from .hash import Argon2Params, Argon2Variant, HashKind

# Type aliases
HashAlgorithm = Literal["blake3", "crc32", "argon2"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(DispnetBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types and env strings
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="never",
    )


class Argon2Config(ConfigBaseModel):
    """Argon2 cost settings.

    Salts are never configured: either the built-in default salt is used or,
    with ``random_salt``, a fresh one is drawn per hash.
    """

    variant: Argon2Variant = "i"
    time_cost: int = Field(default=3, ge=1)
    memory_cost: int = Field(default=4096, ge=1)
    parallelism: int = Field(default=1, ge=1)
    hash_len: int = Field(default=32, ge=1)
    salt_len: int = Field(default=16, ge=1)
    random_salt: bool = False

    def to_params(self, salt: bytes | None = None) -> Argon2Params:
        """Build hashing parameters, optionally pinning the salt."""
        return Argon2Params(**self.model_dump(), salt=salt)


class HashConfig(ConfigBaseModel):
    """Hash algorithm configuration section."""

    default_kind: HashAlgorithm = "blake3"
    argon2: Argon2Config = Field(default_factory=Argon2Config)

    @field_validator("default_kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: object) -> object:
        """Accept algorithm names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def kind(self) -> HashKind:
        return HashKind.from_name(self.default_kind)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

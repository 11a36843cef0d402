"""Pydantic models for dispnet_hash."""

from .base import DispnetBaseModel, ImmutableModel
from .config import Argon2Config, HashConfig, LoggingConfig
from .hash import DEFAULT_ARGON2_SALT, DEFAULT_HASH_KIND, Argon2Params, DispnetHash, HashKind

__all__ = [
    "DEFAULT_ARGON2_SALT",
    "DEFAULT_HASH_KIND",
    "Argon2Config",
    "Argon2Params",
    "DispnetBaseModel",
    "DispnetHash",
    "HashConfig",
    "HashKind",
    "ImmutableModel",
    "LoggingConfig",
]

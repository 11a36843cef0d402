"""
Hash algorithm strategies and registry.

Binds the closed set of HashKinds to the primitives that compute and
verify their digests.
"""

from .registry import HashAlgorithmRegistry, compute, default_registry
from .strategies import (
    Argon2Strategy,
    Blake3Strategy,
    CRC32Strategy,
    HashStrategy,
)

__all__ = [
    "Argon2Strategy",
    "Blake3Strategy",
    "CRC32Strategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "compute",
    "default_registry",
]

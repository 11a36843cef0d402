"""
Programmatic surface for building, rendering, parsing and verifying hashes.

The default algorithm is an explicit argument default (Blake3), never
ambient state. Settings-driven callers pass ``settings.hash.kind`` and
``settings.hash.argon2.to_params()`` themselves.
"""

from __future__ import annotations

from . import codec
from .core.models.hash import DEFAULT_HASH_KIND, Argon2Params, DispnetHash, HashKind
from .hashing import HashAlgorithmRegistry, default_registry
from .verifier import _as_bytes, verify


def construct_with_kind(
    kind: HashKind,
    data: bytes | str,
    params: Argon2Params | None = None,
    registry: HashAlgorithmRegistry = default_registry,
) -> DispnetHash:
    """Compute a DispnetHash of data with the given algorithm.

    Args:
        kind: Hash algorithm
        data: Input bytes (str is encoded as UTF-8)
        params: Argon2 cost parameters and salt; ignored by other kinds
        registry: Strategy lookup (built-in registry by default)

    Raises:
        ComputeError: If the primitive rejects its configuration or the
            digest does not fit the length field
    """
    digest = registry.compute(kind, _as_bytes(data), params)
    return codec.build(kind, digest)


def construct_default(data: bytes | str, kind: HashKind = DEFAULT_HASH_KIND) -> DispnetHash:
    """Compute a DispnetHash of data with the default algorithm (Blake3)."""
    return construct_with_kind(kind, data)


def to_wire_string(value: DispnetHash) -> str:
    """Render a DispnetHash as its wire string."""
    return codec.serialize(value)


def from_wire_string(value: str) -> DispnetHash:
    """Parse a wire string, raising a HashParseError subclass on bad input."""
    return codec.parse(value)


__all__ = [
    "construct_default",
    "construct_with_kind",
    "from_wire_string",
    "to_wire_string",
    "verify",
]

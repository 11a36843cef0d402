"""
Algorithm-aware verification of candidate input against a stored hash.

Fixed-digest kinds recompute and compare in constant time; Argon2 hands
the stored encoded reference to the primitive's own verify routine.
"""

from __future__ import annotations

from .core.exceptions import HashParseError
from .core.models.hash import DispnetHash
from .hashing import HashAlgorithmRegistry, default_registry


def _get_logger():
    from .core.di import resolve_or_default
    from .core.interfaces.logger import ILogger
    from .services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def verify(
    reference: str | DispnetHash,
    candidate: bytes | str,
    registry: HashAlgorithmRegistry = default_registry,
) -> bool:
    """Return True iff candidate hashes to reference.

    An unparseable reference is reported as a mismatch; callers that need
    to tell corruption apart should parse the reference first.

    Args:
        reference: Wire-form string or parsed DispnetHash
        candidate: Input to check (str is encoded as UTF-8)
        registry: Strategy lookup (built-in registry by default)
    """
    if isinstance(reference, DispnetHash):
        stored = reference
    else:
        from .codec import parse

        try:
            stored = parse(reference)
        except HashParseError as e:
            _get_logger().debug("Reference hash rejected during verify: %s", e)
            return False

    matched = registry.verify(stored.hash_type, stored.digest_value, _as_bytes(candidate))
    if not matched:
        _get_logger().debug("Candidate does not match %s reference", stored.hash_type.algorithm_name)
    return matched

"""
Hash algorithm registry.

A static, read-only table binding every HashKind to its strategy. The
set of algorithms is closed: there is no runtime registration, so a
wire tag always resolves to the same algorithm.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..core.exceptions import UnknownHashTypeError
from ..core.models.hash import Argon2Params, HashKind
from .strategies import Argon2Strategy, Blake3Strategy, CRC32Strategy, HashStrategy

_STRATEGIES: Mapping[HashKind, HashStrategy] = MappingProxyType(
    {
        HashKind.BLAKE3: Blake3Strategy(),
        HashKind.CRC32: CRC32Strategy(),
        HashKind.ARGON2: Argon2Strategy(),
    }
)


class HashAlgorithmRegistry:
    """
    Lookup of hash strategies by kind.

    Example:
        registry = HashAlgorithmRegistry()
        digest = registry.compute(HashKind.BLAKE3, b"test")
    """

    def __init__(self, strategies: Mapping[HashKind, HashStrategy] = _STRATEGIES):
        """
        Initialize the registry.

        Args:
            strategies: Kind to strategy table (the built-in table by default)
        """
        self._strategies = strategies

    def get(self, kind: HashKind) -> HashStrategy:
        """
        Get strategy by kind.

        Raises:
            UnknownHashTypeError: If no strategy serves the kind
        """
        strategy = self._strategies.get(kind)
        if strategy is None:
            raise UnknownHashTypeError(
                "No strategy for hash kind", tag=getattr(kind, "tag", str(kind))
            )
        return strategy

    def compute(self, kind: HashKind, data: bytes, params: Argon2Params | None = None) -> bytes:
        """
        Compute digest bytes of data using the given kind.

        Args:
            kind: Hash kind
            data: Data to hash
            params: Argon2 parameters (ignored by other kinds)

        Returns:
            Raw digest bytes
        """
        return self.get(kind).compute(data, params)

    def verify(self, kind: HashKind, digest: bytes, candidate: bytes) -> bool:
        """Check candidate against a stored digest of the given kind."""
        return self.get(kind).verify(digest, candidate)

    @property
    def available_algorithms(self) -> list[HashKind]:
        """List supported kinds in tag order."""
        return sorted(self._strategies)

    def __contains__(self, kind: object) -> bool:
        return kind in self._strategies


default_registry = HashAlgorithmRegistry()


def compute(kind: HashKind, data: bytes, params: Argon2Params | None = None) -> bytes:
    """Compute digest bytes with the built-in registry."""
    return default_registry.compute(kind, data, params)

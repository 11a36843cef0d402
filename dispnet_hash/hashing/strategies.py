"""
Hash algorithm strategy implementations.

Each strategy computes the digest bytes stored in the value field for one
HashKind and knows how to check a candidate input against a stored digest.
"""

from __future__ import annotations

import hmac
import secrets
from abc import ABC, abstractmethod

import blake3
import crc32c
from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError
from argon2.low_level import Type, hash_secret

from ..core.exceptions import ComputeError
from ..core.models.hash import DEFAULT_ARGON2_SALT, Argon2Params, HashKind


def _get_logger():
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - kind: The HashKind (and wire tag) the strategy serves
    - compute(): Digest bytes for the value field
    """

    @property
    @abstractmethod
    def kind(self) -> HashKind:
        """Return the hash kind this strategy implements."""
        pass

    @property
    def algorithm_name(self) -> str:
        return self.kind.algorithm_name

    @abstractmethod
    def compute(self, data: bytes, params: Argon2Params | None = None) -> bytes:
        """Compute digest bytes for data."""
        pass

    def verify(self, digest: bytes, candidate: bytes) -> bool:
        """Recompute the digest of candidate and compare in constant time."""
        return hmac.compare_digest(self.compute(candidate), digest)


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - 32-byte cryptographic hash."""

    @property
    def kind(self) -> HashKind:
        return HashKind.BLAKE3

    def compute(self, data: bytes, params: Argon2Params | None = None) -> bytes:
        return blake3.blake3(data).digest()


class CRC32Strategy(HashStrategy):
    """CRC-32C (Castagnoli) checksum strategy.

    The digest is the unsigned checksum rendered as ASCII decimal text,
    e.g. b"2258662080" for b"test".
    """

    @property
    def kind(self) -> HashKind:
        return HashKind.CRC32

    def compute(self, data: bytes, params: Argon2Params | None = None) -> bytes:
        checksum = crc32c.crc32c(data) & 0xFFFFFFFF
        return str(checksum).encode("ascii")


class Argon2Strategy(HashStrategy):
    """Argon2 key derivation strategy.

    The digest is the PHC encoded reference string
    ($argon2<variant>$v=19$m=..,t=..,p=..$<salt>$<hash>) as ASCII bytes.
    """

    TYPES = {"i": Type.I, "d": Type.D, "id": Type.ID}

    def __init__(self) -> None:
        self._verifier = PasswordHasher()

    @property
    def kind(self) -> HashKind:
        return HashKind.ARGON2

    @staticmethod
    def _salt(params: Argon2Params) -> bytes:
        if params.salt is not None:
            return params.salt
        if params.random_salt:
            return secrets.token_bytes(params.salt_len)
        return DEFAULT_ARGON2_SALT

    def compute(self, data: bytes, params: Argon2Params | None = None) -> bytes:
        params = params or Argon2Params()
        salt = self._salt(params)
        try:
            return hash_secret(
                data,
                salt,
                time_cost=params.time_cost,
                memory_cost=params.memory_cost,
                parallelism=params.parallelism,
                hash_len=params.hash_len,
                type=self.TYPES[params.variant],
            )
        except (HashingError, OverflowError) as e:
            raise ComputeError(
                f"Argon2 rejected parameters: {e}",
                algorithm=self.algorithm_name,
                context={
                    "time_cost": params.time_cost,
                    "memory_cost": params.memory_cost,
                    "parallelism": params.parallelism,
                    "hash_len": params.hash_len,
                    "salt_len": len(salt),
                },
                cause=e,
            ) from e

    def verify(self, digest: bytes, candidate: bytes) -> bool:
        """Check candidate against the encoded reference held in digest.

        Parameters and salt are read from the reference itself. A corrupted
        reference counts as a mismatch.
        """
        try:
            encoded = digest.decode("ascii")
            return self._verifier.verify(encoded, candidate)
        except UnicodeDecodeError as e:
            _get_logger().debug("Argon2 reference is not ASCII: %s", e)
        except VerificationError as e:
            _get_logger().debug("Argon2 verification failed: %s", e)
        except InvalidHashError as e:
            _get_logger().debug("Argon2 reference is not a valid encoded hash: %s", e)
        return False

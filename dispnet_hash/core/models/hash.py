"""
Hash value models.

HashKind is the closed set of supported algorithms with their wire tags;
DispnetHash is the structured, immutable form of a wire-form hash.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Literal

from pydantic import Field, model_validator

from ..exceptions import UnknownHashTypeError
from .base import ImmutableModel

Argon2Variant = Literal["i", "d", "id"]


class HashKind(IntEnum):
    """Supported hash algorithms.

    Values are the wire tags. Tags are append-only: a value is never
    reassigned to a different algorithm.
    """

    BLAKE3 = 1
    CRC32 = 2
    ARGON2 = 3

    @property
    def tag(self) -> str:
        """Two-digit zero-padded wire tag (e.g. '01')."""
        return f"{self.value:02d}"

    @property
    def algorithm_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_tag(cls, tag: str) -> HashKind:
        """Map a two-character wire tag to its kind.

        Raises:
            UnknownHashTypeError: If the tag is not assigned
        """
        for kind in cls:
            if kind.tag == tag:
                return kind
        raise UnknownHashTypeError("Unknown hash type tag", tag=tag)

    @classmethod
    def from_name(cls, name: str) -> HashKind:
        """Map an algorithm name ('blake3', 'crc32', 'argon2') to its kind."""
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            raise UnknownHashTypeError(
                "Unknown hash algorithm name", context={"name": name}, cause=e
            ) from e


DEFAULT_HASH_KIND = HashKind.BLAKE3

# Salt used when neither an explicit salt nor random salting is requested.
DEFAULT_ARGON2_SALT = b"A8nUz1Pkc0IZ0uJSZNnMlvdLz0T3al5Hjhg2"


class Argon2Params(ImmutableModel):
    """Argon2 cost parameters and salt.

    Unset fields fall back to the defaults below. Without an explicit
    ``salt`` the fixed DEFAULT_ARGON2_SALT is used, so identical input and
    params always give identical output. Set ``random_salt`` to draw a
    fresh salt of ``salt_len`` bytes for every hash instead.
    """

    variant: Argon2Variant = "i"
    time_cost: int = Field(default=3, ge=1)
    memory_cost: int = Field(default=4096, ge=1)  # KiB
    parallelism: int = Field(default=1, ge=1)
    hash_len: int = Field(default=32, ge=1)
    salt: bytes | None = None
    salt_len: int = Field(default=16, ge=1)
    random_salt: bool = False


class DispnetHash(ImmutableModel):
    """A self-describing digest: algorithm, digest byte length and raw digest.

    For Argon2 the digest is the primitive's own encoded reference string
    (parameters, salt and hash) stored as opaque bytes.
    """

    hash_type: HashKind
    digest_length: int = Field(ge=0)
    digest_value: bytes

    @model_validator(mode="after")
    def _check_digest_length(self) -> DispnetHash:
        if len(self.digest_value) != self.digest_length:
            raise ValueError(
                f"digest_length {self.digest_length} does not match "
                f"digest of {len(self.digest_value)} bytes"
            )
        return self

    @classmethod
    def create(
        cls,
        kind: HashKind,
        data: bytes | str,
        params: Argon2Params | None = None,
    ) -> DispnetHash:
        """Compute a fresh hash of ``data`` with ``kind``."""
        from ...api import construct_with_kind

        return construct_with_kind(kind, data, params)

    @classmethod
    def new(cls, data: bytes | str) -> DispnetHash:
        """Compute a fresh hash of ``data`` with the default kind (Blake3)."""
        from ...api import construct_default

        return construct_default(data)

    @classmethod
    def parse(cls, value: str) -> DispnetHash:
        """Parse a wire-form string."""
        from ...codec import parse

        return parse(value)

    @property
    def hex_digest(self) -> str:
        return self.digest_value.hex()

    def to_wire_string(self) -> str:
        from ...codec import serialize

        return serialize(self)

    def verify(self, candidate: bytes | str) -> bool:
        """Check whether ``candidate`` produces this hash."""
        from ...verifier import verify

        return verify(self, candidate)

    def __str__(self) -> str:
        return self.to_wire_string()

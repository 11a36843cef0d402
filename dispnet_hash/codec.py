"""
TLV wire codec.

Wire form (format revision with a 4-digit length field):

    <tag: 2 decimal digits><length: 4 decimal digits><value: length * 2 hex chars>

The length counts digest bytes, not hex characters. The format carries no
revision marker, so strings from the earlier 3-digit revision are rejected
rather than guessed at.
"""

from __future__ import annotations

import re

from .core.exceptions import (
    DigestTooLongError,
    InvalidHexEncodingError,
    LengthMismatchError,
    MalformedHashError,
)
from .core.models.hash import DispnetHash, HashKind

TAG_WIDTH = 2
LENGTH_FIELD_WIDTH = 4
HEADER_WIDTH = TAG_WIDTH + LENGTH_FIELD_WIDTH
MAX_DIGEST_LENGTH = 10**LENGTH_FIELD_WIDTH - 1

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]*")


def _get_logger():
    from .core.di import resolve_or_default
    from .core.interfaces.logger import ILogger
    from .services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


def build(kind: HashKind, digest: bytes) -> DispnetHash:
    """Wrap already-computed digest bytes in a DispnetHash.

    Raises:
        DigestTooLongError: If the digest does not fit the length field
    """
    if len(digest) > MAX_DIGEST_LENGTH:
        raise DigestTooLongError(
            "Digest too long for the length field",
            digest_length=len(digest),
            max_length=MAX_DIGEST_LENGTH,
            context={"algorithm": kind.algorithm_name},
        )
    return DispnetHash(hash_type=kind, digest_length=len(digest), digest_value=bytes(digest))


def serialize(value: DispnetHash) -> str:
    """Render a DispnetHash in canonical wire form (lowercase hex)."""
    if value.digest_length > MAX_DIGEST_LENGTH:
        raise DigestTooLongError(
            "Digest too long for the length field",
            digest_length=value.digest_length,
            max_length=MAX_DIGEST_LENGTH,
        )
    return (
        f"{value.hash_type.tag}"
        f"{value.digest_length:0{LENGTH_FIELD_WIDTH}d}"
        f"{value.digest_value.hex()}"
    )


def parse(value: str) -> DispnetHash:
    """Parse a wire-form string into a DispnetHash.

    Input is treated as untrusted: every structural problem raises a
    HashParseError subclass and nothing is truncated or defaulted.

    Raises:
        MalformedHashError: Not a string, shorter than the header, or
            non-numeric length field
        UnknownHashTypeError: Tag is not assigned to any hash kind
        LengthMismatchError: Hex payload length differs from 2 * length
        InvalidHexEncodingError: Payload contains non-hex characters
    """
    if not isinstance(value, str):
        raise MalformedHashError(
            "Wire hash must be a string", context={"type": type(value).__name__}
        )
    if len(value) < HEADER_WIDTH:
        _get_logger().debug("Rejected wire hash shorter than header: %r", value)
        raise MalformedHashError("Wire hash too short for header", value=value)

    raw_tag = value[:TAG_WIDTH]
    raw_length = value[TAG_WIDTH:HEADER_WIDTH]
    raw_digest = value[HEADER_WIDTH:]

    kind = HashKind.from_tag(raw_tag)

    if not _DECIMAL.fullmatch(raw_length):
        _get_logger().debug("Digest length is not a decimal number: %r", raw_length)
        raise MalformedHashError("Digest length field is not numeric", value=raw_length)
    digest_length = int(raw_length)

    if len(raw_digest) != digest_length * 2:
        _get_logger().debug(
            "Length mismatch for digest. Length: %d Hex chars: %d", digest_length, len(raw_digest)
        )
        raise LengthMismatchError(
            "Declared digest length does not match payload",
            digest_length=digest_length,
            hex_length=len(raw_digest),
        )

    if not _HEX.fullmatch(raw_digest):
        _get_logger().debug("Invalid digest hex value: %r", raw_digest)
        raise InvalidHexEncodingError("Digest is not valid hex", hex_digest=raw_digest)

    return DispnetHash(
        hash_type=kind,
        digest_length=digest_length,
        digest_value=bytes.fromhex(raw_digest),
    )

"""
dispnet_hash - self-describing digest encoding.

A hash is rendered as ``<tag><length><hex digest>`` so consumers can tell
which algorithm produced it and how long the digest is without any
external metadata.

Usage:
    from dispnet_hash import construct_default, verify

    wire = str(construct_default(b"test"))
    verify(wire, b"test")  # True
"""

from .api import (
    construct_default,
    construct_with_kind,
    from_wire_string,
    to_wire_string,
    verify,
)
from .codec import LENGTH_FIELD_WIDTH, MAX_DIGEST_LENGTH, TAG_WIDTH
from .core.exceptions import (
    ComputeError,
    DigestTooLongError,
    DispnetException,
    HashParseError,
    InvalidHexEncodingError,
    LengthMismatchError,
    MalformedHashError,
    UnknownHashTypeError,
)
from .core.models.hash import DEFAULT_HASH_KIND, Argon2Params, DispnetHash, HashKind

try:
    from importlib.metadata import version

    __version__ = version("dispnet-hash")
except Exception:
    __version__ = "0.2.0"

__all__ = [
    "DEFAULT_HASH_KIND",
    "LENGTH_FIELD_WIDTH",
    "MAX_DIGEST_LENGTH",
    "TAG_WIDTH",
    "Argon2Params",
    "ComputeError",
    "DigestTooLongError",
    "DispnetException",
    "DispnetHash",
    "HashKind",
    "HashParseError",
    "InvalidHexEncodingError",
    "LengthMismatchError",
    "MalformedHashError",
    "UnknownHashTypeError",
    "__version__",
    "construct_default",
    "construct_with_kind",
    "from_wire_string",
    "to_wire_string",
    "verify",
]

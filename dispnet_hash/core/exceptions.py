"""
Custom exception hierarchy for dispnet_hash.

Parse failures are raised as typed exceptions so untrusted input can be
rejected explicitly instead of being coerced to a default.
"""

from __future__ import annotations


class DispnetException(Exception):
    """
    Base exception for all dispnet_hash errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (offending field, lengths, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Compute Errors
# =============================================================================


class ComputeError(DispnetException):
    """
    The underlying hash primitive rejected its input or configuration.

    Raised for invalid Argon2 parameter combinations (salt too short,
    memory cost below the parallelism floor, etc.).
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


class DigestTooLongError(ComputeError):
    """Digest does not fit into the fixed-width length field."""

    def __init__(
        self,
        message: str,
        *,
        digest_length: int | None = None,
        max_length: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if digest_length is not None:
            ctx["digest_length"] = digest_length
        if max_length is not None:
            ctx["max_length"] = max_length
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Parse Errors
# =============================================================================


class HashParseError(DispnetException, ValueError):
    """
    Base class for wire-form parse errors.

    Inherits from ValueError so callers can treat any rejected
    input as a bad value.
    """

    pass


class MalformedHashError(HashParseError):
    """
    Structural violation in the wire form.

    Raised when the input is too short for the header, is not a string,
    or carries a non-numeric length field.
    """

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class UnknownHashTypeError(HashParseError):
    """Tag is not assigned to any supported hash kind."""

    def __init__(
        self,
        message: str,
        *,
        tag: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if tag is not None:
            ctx["tag"] = tag
        super().__init__(message, context=ctx, cause=cause)


class LengthMismatchError(HashParseError):
    """Declared digest length disagrees with the hex payload length."""

    def __init__(
        self,
        message: str,
        *,
        digest_length: int | None = None,
        hex_length: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if digest_length is not None:
            ctx["digest_length"] = digest_length
        if hex_length is not None:
            ctx["hex_length"] = hex_length
        super().__init__(message, context=ctx, cause=cause)


class InvalidHexEncodingError(HashParseError):
    """Value field contains characters outside the hex alphabet."""

    def __init__(
        self,
        message: str,
        *,
        hex_digest: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if hex_digest is not None:
            ctx["hex_digest"] = hex_digest
        super().__init__(message, context=ctx, cause=cause)

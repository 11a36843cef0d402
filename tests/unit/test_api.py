"""
Unit tests for the public construct/format/parse surface and DispnetHash.
"""

import pytest
from pydantic import ValidationError

import dispnet_hash
from dispnet_hash import (
    DEFAULT_HASH_KIND,
    Argon2Params,
    ComputeError,
    DispnetHash,
    HashKind,
    construct_default,
    construct_with_kind,
    from_wire_string,
    to_wire_string,
    verify,
)
from tests.vectors import (
    ARGON2_DEFAULT_WIRE,
    ARGON2_TEST_WIRE,
    BLAKE3_TEST_WIRE,
    CRC32_TEST_WIRE,
)

INPUTS = [b"", b"test", b"\x00\xff" * 50, "unicode ✓".encode()]


class TestConstruct:
    """Tests for construct_default and construct_with_kind."""

    def test_default_is_blake3(self):
        """construct_default uses Blake3."""
        assert DEFAULT_HASH_KIND is HashKind.BLAKE3
        assert to_wire_string(construct_default(b"test")) == BLAKE3_TEST_WIRE

    def test_default_accepts_str(self):
        """String input is hashed as UTF-8."""
        assert to_wire_string(construct_default("test")) == BLAKE3_TEST_WIRE

    def test_crc32(self):
        """CRC32 of 'test' matches the reference wire string."""
        assert to_wire_string(construct_with_kind(HashKind.CRC32, b"test")) == CRC32_TEST_WIRE

    def test_argon2_with_salt(self):
        """Argon2 with defaults and a pinned salt matches the reference."""
        value = construct_with_kind(HashKind.ARGON2, b"test", Argon2Params(salt=b"12345678"))
        assert to_wire_string(value) == ARGON2_TEST_WIRE

    def test_argon2_without_params(self):
        """Omitted params use the defaults and the built-in salt."""
        value = construct_with_kind(HashKind.ARGON2, b"test")
        assert to_wire_string(value) == ARGON2_DEFAULT_WIRE
        assert verify(value, b"test") is True

    def test_argon2_without_params_deterministic(self):
        """Two unparameterised Argon2 hashes of the same input agree."""
        first = to_wire_string(construct_with_kind(HashKind.ARGON2, b"test"))
        assert first == to_wire_string(construct_with_kind(HashKind.ARGON2, b"test"))

    def test_compute_error_propagates(self):
        """Rejected parameters surface as ComputeError with nothing built."""
        with pytest.raises(ComputeError):
            construct_with_kind(HashKind.ARGON2, b"test", Argon2Params(salt=b"1234"))

    @pytest.mark.parametrize("kind", [HashKind.BLAKE3, HashKind.CRC32])
    @pytest.mark.parametrize("data", INPUTS)
    def test_deterministic(self, kind, data):
        """Same kind and input give the same wire string."""
        first = to_wire_string(construct_with_kind(kind, data))
        assert first == to_wire_string(construct_with_kind(kind, data))

    def test_argon2_deterministic_with_salt(self, fast_argon2):
        """Argon2 is deterministic once the salt is fixed."""
        first = construct_with_kind(HashKind.ARGON2, b"pw", fast_argon2)
        assert first == construct_with_kind(HashKind.ARGON2, b"pw", fast_argon2)


class TestRoundTrip:
    """from_wire_string is the left inverse of to_wire_string."""

    @pytest.mark.parametrize("kind", [HashKind.BLAKE3, HashKind.CRC32])
    @pytest.mark.parametrize("data", INPUTS)
    def test_fixed_kinds(self, kind, data):
        """Parsed hashes equal the constructed ones."""
        value = construct_with_kind(kind, data)
        assert from_wire_string(to_wire_string(value)) == value

    def test_argon2(self, fast_argon2):
        """Argon2 hashes survive the round trip and still verify."""
        value = construct_with_kind(HashKind.ARGON2, b"pw", fast_argon2)
        parsed = from_wire_string(to_wire_string(value))
        assert parsed == value
        assert parsed.verify(b"pw") is True

    @pytest.mark.parametrize("data", [b"", b"test", "unicode ✓".encode()])
    def test_argon2_default_params(self, data):
        """Argon2 with omitted params round-trips for any input."""
        value = construct_with_kind(HashKind.ARGON2, data)
        assert from_wire_string(to_wire_string(value)) == value
        assert construct_with_kind(HashKind.ARGON2, data) == value


class TestDispnetHashModel:
    """Tests for the DispnetHash model itself."""

    def test_str_is_wire_form(self):
        """str() renders the wire string."""
        assert str(DispnetHash.new(b"test")) == BLAKE3_TEST_WIRE

    def test_create_and_parse(self):
        """Classmethod helpers mirror the module functions."""
        created = DispnetHash.create(HashKind.CRC32, b"test")
        assert DispnetHash.parse(CRC32_TEST_WIRE) == created
        assert created.to_wire_string() == CRC32_TEST_WIRE

    def test_verify_method(self):
        """DispnetHash.verify checks a candidate."""
        value = DispnetHash.parse(BLAKE3_TEST_WIRE)
        assert value.verify(b"test") is True
        assert value.verify(b"tset") is False

    def test_immutable(self):
        """Fields cannot be reassigned."""
        value = DispnetHash.new(b"test")
        with pytest.raises(ValidationError):
            value.digest_length = 1  # type: ignore[misc]

    def test_hashable_and_equal(self):
        """Equal hashes collapse in a set."""
        assert len({DispnetHash.new(b"a"), DispnetHash.new(b"a"), DispnetHash.new(b"b")}) == 2

    def test_length_invariant_enforced(self):
        """A digest_length that disagrees with the bytes is rejected."""
        with pytest.raises(ValidationError):
            DispnetHash(hash_type=HashKind.BLAKE3, digest_length=3, digest_value=b"ab")

    def test_kind_must_be_enum(self):
        """hash_type only accepts HashKind members."""
        with pytest.raises(ValidationError):
            DispnetHash(hash_type="blake3", digest_length=0, digest_value=b"")  # type: ignore[arg-type]


class TestPackage:
    """Tests for the package namespace."""

    def test_exports(self):
        """The programmatic surface is importable from the package root."""
        for name in (
            "construct_default",
            "construct_with_kind",
            "to_wire_string",
            "from_wire_string",
            "verify",
        ):
            assert callable(getattr(dispnet_hash, name))

    def test_version(self):
        """A version string is exposed."""
        assert isinstance(dispnet_hash.__version__, str)

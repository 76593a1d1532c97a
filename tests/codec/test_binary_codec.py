"""
Binary writer/reader tests.

Covers the little-endian primitives, length prefixes, optionals and
sequences, and the typed errors raised when values or input do not fit.
"""

import pytest

from near_tx.codec import BinaryReader, BinaryWriter
from near_tx.codec.writer import U64_MAX, U128_MAX
from near_tx.runtime.errors import (
    DecodeError,
    EncodingError,
    ErrorCode,
    MalformedInput,
    TrailingBytes,
    TruncatedInput,
    ValueOutOfRange,
)


def _written(fn) -> bytes:
    writer = BinaryWriter()
    fn(writer)
    return writer.to_bytes()


class TestWriterPrimitives:
    """Test fixed-width integer encoding."""

    def test_integers_little_endian(self):
        assert _written(lambda w: w.u8(0xAB)) == b"\xab"
        assert _written(lambda w: w.u32le(1)) == b"\x01\x00\x00\x00"
        assert _written(lambda w: w.u64le(0x0102)) == b"\x02\x01" + b"\x00" * 6
        assert _written(lambda w: w.u128le(1000)) == (1000).to_bytes(16, "little")

    def test_maximum_values_fit(self):
        assert _written(lambda w: w.u64le(U64_MAX)) == b"\xff" * 8
        assert _written(lambda w: w.u128le(U128_MAX)) == b"\xff" * 16

    @pytest.mark.parametrize("method,value", [
        ("u8", 256),
        ("u8", -1),
        ("u32le", 2 ** 32),
        ("u64le", 2 ** 64),
        ("u128le", 2 ** 128),
        ("u128le", -5),
    ])
    def test_out_of_range_rejected(self, method, value):
        """Test that values wider than the declared width are rejected, never truncated."""
        writer = BinaryWriter()
        with pytest.raises(ValueOutOfRange) as exc_info:
            getattr(writer, method)(value)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert writer.to_bytes() == b""

    def test_non_integers_rejected(self):
        writer = BinaryWriter()
        with pytest.raises(ValueOutOfRange, match="must be an integer"):
            writer.u64le(True)
        with pytest.raises(ValueOutOfRange):
            writer.u128le(1.5)

    def test_fixed_bytes_width_enforced(self):
        assert _written(lambda w: w.fixed_bytes(b"\x01" * 32, 32)) == b"\x01" * 32
        with pytest.raises(ValueOutOfRange, match="Expected 32 bytes, got 31"):
            BinaryWriter().fixed_bytes(b"\x01" * 31, 32)


class TestWriterComposites:
    """Test length prefixes, optionals and sequences."""

    def test_string_prefixed_with_byte_length(self):
        assert _written(lambda w: w.string("abc")) == b"\x03\x00\x00\x00abc"
        # Length counts UTF-8 bytes, not characters
        assert _written(lambda w: w.string("é")) == b"\x02\x00\x00\x00\xc3\xa9"

    def test_len_prefixed_bytes(self):
        assert _written(lambda w: w.len_prefixed_bytes(b"")) == b"\x00\x00\x00\x00"
        assert _written(lambda w: w.len_prefixed_bytes(b"\xff\x00")) == b"\x02\x00\x00\x00\xff\x00"

    def test_option(self):
        assert _written(lambda w: w.option(None, w.u8)) == b"\x00"
        assert _written(lambda w: w.option(7, w.u8)) == b"\x01\x07"

    def test_sequence(self):
        data = _written(lambda w: w.sequence(["a", "bc"], w.string))
        assert data == b"\x02\x00\x00\x00" + b"\x01\x00\x00\x00a" + b"\x02\x00\x00\x00bc"
        assert _written(lambda w: w.sequence([], w.string)) == b"\x00\x00\x00\x00"


class TestReader:
    """Test decoding and decode errors."""

    def test_reads_back_primitives(self):
        writer = BinaryWriter()
        writer.u8(1)
        writer.u32le(70000)
        writer.u64le(U64_MAX)
        writer.u128le(U128_MAX - 1)
        writer.string("near")
        writer.option(None, writer.u128le)
        writer.option(5, writer.u128le)
        writer.sequence([1, 2, 3], writer.u8)

        reader = BinaryReader(writer.to_bytes())
        assert reader.u8() == 1
        assert reader.u32le() == 70000
        assert reader.u64le() == U64_MAX
        assert reader.u128le() == U128_MAX - 1
        assert reader.string() == "near"
        assert reader.option(reader.u128le) is None
        assert reader.option(reader.u128le) == 5
        assert reader.sequence(reader.u8) == [1, 2, 3]
        assert reader.eof
        reader.ensure_consumed()

    def test_truncated_integer(self):
        reader = BinaryReader(b"\x01\x02\x03")
        with pytest.raises(TruncatedInput) as exc_info:
            reader.u32le()
        err = exc_info.value
        assert err.details == {"offset": 0, "needed": 4, "remaining": 3}
        assert isinstance(err, DecodeError)
        assert isinstance(err, EncodingError)

    def test_truncated_length_prefixed(self):
        reader = BinaryReader(b"\x05\x00\x00\x00abc")
        with pytest.raises(TruncatedInput, match="Need 5 bytes"):
            reader.string()

    def test_truncated_fixed_array(self):
        with pytest.raises(TruncatedInput):
            BinaryReader(b"\x00" * 31).bytes(32)

    def test_invalid_utf8(self):
        reader = BinaryReader(b"\x02\x00\x00\x00\xc3\x28")
        with pytest.raises(MalformedInput, match="Invalid UTF-8") as exc_info:
            reader.string()
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_invalid_option_flag(self):
        reader = BinaryReader(b"\x02\x00")
        with pytest.raises(MalformedInput, match="Invalid option flag 2") as exc_info:
            reader.option(reader.u8)
        assert exc_info.value.code == ErrorCode.MALFORMED_INPUT

    def test_trailing_bytes(self):
        reader = BinaryReader(b"\x01\x02")
        reader.u8()
        assert reader.remaining == 1
        with pytest.raises(TrailingBytes) as exc_info:
            reader.ensure_consumed()
        assert exc_info.value.details == {"offset": 1, "remaining": 1}

"""
Canonical JSON and error model tests.
"""

import hashlib

import pytest

from near_tx.canonjson import dumps_canonical, dumps_canonical_bytes
from near_tx.codec import TransactionCodec, sha256_bytes, sha256_hex
from near_tx.runtime.errors import (
    DecodeError,
    EncodingError,
    ErrorCode,
    InvalidVariant,
    NearTxError,
    NestedDelegate,
    SignerError,
    SignerUnavailable,
    TruncatedInput,
)
from near_tx.tx import transfer


class TestCanonicalJSON:
    """Test canonical JSON encoding."""

    def test_key_ordering(self):
        assert dumps_canonical({"z": 1, "a": 2, "m": 3}) == dumps_canonical({"a": 2, "m": 3, "z": 1})
        assert dumps_canonical({"z": 1, "a": 2}) == '{"a":2,"z":1}'

    def test_nested_structures(self):
        data = {"b": [{"y": 1, "x": 2}, (1, 2)], "a": None}
        assert dumps_canonical(data) == '{"a":null,"b":[{"x":2,"y":1},[1,2]]}'

    def test_unicode_kept_as_utf8(self):
        assert dumps_canonical_bytes({"name": "é"}) == '{"name":"é"}'.encode("utf-8")

    def test_unsupported_value(self):
        with pytest.raises(TypeError):
            dumps_canonical({"x": object()})


class TestHashes:
    """Test the hash helpers used for signing."""

    def test_sha256(self):
        assert sha256_bytes(b"abc") == hashlib.sha256(b"abc").digest()
        assert sha256_hex(b"abc") == hashlib.sha256(b"abc").hexdigest()

    def test_message_and_hash(self):
        action = transfer(1)
        message, digest = TransactionCodec.message_and_hash(action)
        assert message == TransactionCodec.encode_for_signing(action) == action.encode()
        assert digest == TransactionCodec.hash_for_signing(action) == hashlib.sha256(message).digest()


class TestErrorModel:
    """Test structured error information."""

    def test_default_code(self):
        err = TruncatedInput("short")
        assert err.code == ErrorCode.TRUNCATED_INPUT
        assert err.message == "short"
        assert str(err) == "[TRUNCATED_INPUT] short"

    def test_base_class_codes(self):
        assert NearTxError("x").code == ErrorCode.UNKNOWN
        assert EncodingError("x").code == ErrorCode.ENCODING_ERROR
        assert DecodeError("x").code == ErrorCode.DECODING_ERROR
        assert SignerError("x").code == ErrorCode.SIGNER_ERROR
        assert NestedDelegate("x").code == ErrorCode.NESTED_DELEGATE
        assert isinstance(NestedDelegate("x"), InvalidVariant)

    def test_details_and_cause(self):
        cause = RuntimeError("offline")
        err = SignerUnavailable("no key", details={"accountId": "a.near"}, cause=cause)
        assert str(err) == "[SIGNER_UNAVAILABLE] no key | Details: {'accountId': 'a.near'} | Caused by: offline"
        assert err.to_dict() == {
            "code": 301,
            "message": "no key",
            "details": {"accountId": "a.near"},
            "cause": "offline",
        }

    def test_explicit_code(self):
        err = NearTxError("boom", code=ErrorCode.INTERNAL)
        assert err.code == ErrorCode.INTERNAL
        assert err.to_dict() == {"code": 2, "message": "boom"}

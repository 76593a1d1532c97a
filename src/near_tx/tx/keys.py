"""
Key and signature value types.

PublicKey and Signature are fixed-width on the wire: a u8 key type followed
by exactly 32 (public key) or 64 (signature) raw bytes.
"""

from __future__ import annotations
from enum import IntEnum

import base58
from pydantic import field_validator

from ..codec.reader import BinaryReader
from ..codec.wire import WireModel
from ..codec.writer import BinaryWriter
from ..runtime.errors import InvalidKey

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
BLOCK_HASH_LENGTH = 32


class KeyType(IntEnum):
    """Key algorithm tag stored in the first byte of keys and signatures."""

    ED25519 = 0

    @classmethod
    def from_string(cls, name: str) -> KeyType:
        """Parse a key type prefix such as ``ed25519``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidKey(f"Unknown key type: {name}", details={"keyType": name})


def _check_width(v: bytes, size: int, what: str) -> bytes:
    if len(v) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(v)}")
    return v


class PublicKey(WireModel):
    """Public key identifying the signing key of an account."""

    key_type: int = KeyType.ED25519
    data: bytes

    @field_validator("data")
    @classmethod
    def _data_width(cls, v: bytes) -> bytes:
        return _check_width(v, PUBLIC_KEY_LENGTH, "Public key data")

    @classmethod
    def from_string(cls, encoded: str) -> PublicKey:
        """
        Parse ``<key type>:<base58 data>``; a bare base58 string means ed25519.

        Raises:
            InvalidKey: If the prefix, the base58 text or the length is invalid
        """
        parts = encoded.split(":")
        if len(parts) == 1:
            key_type, payload = KeyType.ED25519, parts[0]
        elif len(parts) == 2:
            key_type, payload = KeyType.from_string(parts[0]), parts[1]
        else:
            raise InvalidKey(f"Invalid encoded key format, must be <curve>:<encoded key>: {encoded}")

        try:
            data = base58.b58decode(payload)
        except ValueError as e:
            raise InvalidKey(f"Invalid base58 key data: {payload}", cause=e)
        if len(data) != PUBLIC_KEY_LENGTH:
            raise InvalidKey(
                f"Public key data must be {PUBLIC_KEY_LENGTH} bytes, got {len(data)}",
                details={"length": len(data)},
            )
        return cls(key_type=key_type, data=data)

    def to_string(self) -> str:
        """Text form ``ed25519:<base58 data>``."""
        try:
            prefix = KeyType(self.key_type).name.lower()
        except ValueError:
            raise InvalidKey(f"Unknown key type: {self.key_type}")
        return f"{prefix}:{base58.b58encode(self.data).decode('ascii')}"

    def __str__(self) -> str:
        return self.to_string()

    def serialize(self, writer: BinaryWriter) -> None:
        writer.u8(self.key_type)
        writer.fixed_bytes(self.data, PUBLIC_KEY_LENGTH)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> PublicKey:
        key_type = reader.u8()
        return cls(key_type=key_type, data=reader.bytes(PUBLIC_KEY_LENGTH))


class Signature(WireModel):
    """Signature over a canonical message, tagged with its key type."""

    key_type: int = KeyType.ED25519
    data: bytes

    @field_validator("data")
    @classmethod
    def _data_width(cls, v: bytes) -> bytes:
        return _check_width(v, SIGNATURE_LENGTH, "Signature data")

    def serialize(self, writer: BinaryWriter) -> None:
        writer.u8(self.key_type)
        writer.fixed_bytes(self.data, SIGNATURE_LENGTH)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> Signature:
        key_type = reader.u8()
        return cls(key_type=key_type, data=reader.bytes(SIGNATURE_LENGTH))


def check_block_hash(v: bytes) -> bytes:
    """Field validator helper for 32-byte block hashes."""
    return _check_width(v, BLOCK_HASH_LENGTH, "Block hash")

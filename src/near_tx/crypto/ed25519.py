"""
Ed25519 key pairs.

Local KeyPair implementation backed by the ``cryptography`` package. Secret
keys use the ``ed25519:<base58(seed || public key)>`` text form.
"""

from __future__ import annotations
import hashlib
from typing import Union

import base58
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey,
)

from ..runtime.errors import InvalidKey
from ..signers.signer import KeyPair
from ..tx.keys import PUBLIC_KEY_LENGTH, SIGNATURE_LENGTH, KeyType, PublicKey, Signature

SEED_LENGTH = 32


class KeyPairEd25519(KeyPair):
    """
    Ed25519 key pair.

    Provides signing, verification and the string encoding of secret keys.
    """

    def __init__(self, secret_key: bytes):
        """
        Initialize from a 32-byte seed or a 64-byte ``seed || public key``.

        Args:
            secret_key: Secret key bytes

        Raises:
            InvalidKey: If the key is malformed or the embedded public key
                does not match the seed
        """
        if len(secret_key) not in (SEED_LENGTH, SEED_LENGTH + PUBLIC_KEY_LENGTH):
            raise InvalidKey(f"Ed25519 secret key must be 32 or 64 bytes, got {len(secret_key)}")

        seed = bytes(secret_key[:SEED_LENGTH])
        try:
            self._crypto_key = CryptoEd25519PrivateKey.from_private_bytes(seed)
        except ValueError as e:
            raise InvalidKey(f"Invalid Ed25519 private key: {e}", cause=e)

        public_bytes = self._crypto_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        if len(secret_key) > SEED_LENGTH and bytes(secret_key[SEED_LENGTH:]) != public_bytes:
            raise InvalidKey("Ed25519 secret key does not match its embedded public key")

        self._seed = seed
        self._public_key = PublicKey(key_type=KeyType.ED25519, data=public_bytes)

    @classmethod
    def from_random(cls) -> KeyPairEd25519:
        """Generate a new random Ed25519 key pair."""
        crypto_key = CryptoEd25519PrivateKey.generate()
        seed = crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return cls(seed)

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> KeyPairEd25519:
        """
        Derive a key pair from an arbitrary seed using SHA-256.

        For deterministic test keys.
        """
        if isinstance(seed, str):
            seed = seed.encode('utf-8')
        return cls(hashlib.sha256(seed).digest())

    @classmethod
    def from_string(cls, encoded: str) -> KeyPairEd25519:
        """
        Parse ``ed25519:<base58 secret key>``.

        Raises:
            InvalidKey: If the prefix or the key data is invalid
        """
        prefix, sep, payload = encoded.partition(":")
        if not sep:
            prefix, payload = "ed25519", encoded
        if KeyType.from_string(prefix) != KeyType.ED25519:
            raise InvalidKey(f"Unsupported key type: {prefix}")
        try:
            secret_key = base58.b58decode(payload)
        except ValueError as e:
            raise InvalidKey("Invalid base58 secret key", cause=e)
        return cls(secret_key)

    def to_string(self) -> str:
        """Secret key as ``ed25519:<base58(seed || public key)>``."""
        secret = self._seed + self._public_key.data
        return f"ed25519:{base58.b58encode(secret).decode('ascii')}"

    def get_public_key(self) -> PublicKey:
        return self._public_key

    def sign(self, message: bytes) -> Signature:
        """
        Sign a message.

        Args:
            message: Message to sign

        Returns:
            Signature holding the 64-byte Ed25519 signature
        """
        return Signature(key_type=KeyType.ED25519, data=self._crypto_key.sign(message))

    def verify(self, message: bytes, signature: Union[Signature, bytes]) -> bool:
        """
        Verify a signature against a message.

        Args:
            message: Message that was signed
            signature: Signature or raw 64-byte signature

        Returns:
            True if signature is valid
        """
        raw = signature.data if isinstance(signature, Signature) else bytes(signature)
        if len(raw) != SIGNATURE_LENGTH:
            return False
        verifier = CryptoEd25519PublicKey.from_public_bytes(self._public_key.data)
        try:
            verifier.verify(raw, message)
        except InvalidSignature:
            return False
        return True

    def __repr__(self) -> str:
        return f"KeyPairEd25519(public_key='{self._public_key}')"

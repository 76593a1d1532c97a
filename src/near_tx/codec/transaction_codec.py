"""
Transaction Codec

Produces the canonical signing message of a wire entity and its hash. The
transaction pipeline and the delegate builder both go through here so the
two signing domains agree on how a payload is canonicalized and hashed.
"""

from typing import Tuple

from .hashes import sha256_bytes
from .wire import WireModel, encode


class TransactionCodec:
    """
    Signing message and hash construction.

    The hash function is fixed: SHA-256 over the canonical Borsh encoding.
    """

    @staticmethod
    def encode_for_signing(entity: WireModel) -> bytes:
        """
        Canonical bytes of a transaction or delegate action.

        Args:
            entity: Transaction, DelegateAction or any other wire entity

        Returns:
            Canonical binary encoding used as the signing message
        """
        return encode(entity)

    @staticmethod
    def hash_for_signing(entity: WireModel) -> bytes:
        """
        Hash of the canonical bytes.

        Args:
            entity: Entity to hash

        Returns:
            32-byte SHA-256 digest
        """
        return sha256_bytes(TransactionCodec.encode_for_signing(entity))

    @staticmethod
    def message_and_hash(entity: WireModel) -> Tuple[bytes, bytes]:
        """
        Canonical bytes together with their hash, encoding only once.

        Returns:
            Tuple of (message, sha256(message))
        """
        message = TransactionCodec.encode_for_signing(entity)
        return message, sha256_bytes(message)

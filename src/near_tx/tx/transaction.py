"""
Transaction and SignedTransaction.

Wire layout of a transaction, in order: signer_id, public_key, nonce,
receiver_id, block_hash, actions.
"""

from typing import Sequence, Tuple

from pydantic import StrictInt, field_validator

from ..codec.reader import BinaryReader
from ..codec.transaction_codec import TransactionCodec
from ..codec.wire import WireModel
from ..codec.writer import BinaryWriter
from .actions import Action
from .keys import BLOCK_HASH_LENGTH, PublicKey, Signature, check_block_hash


class Transaction(WireModel):
    """Unsigned transaction: actions sent by ``signer_id`` to ``receiver_id``."""

    signer_id: str
    public_key: PublicKey
    nonce: StrictInt
    receiver_id: str
    block_hash: bytes
    actions: Tuple[Action, ...]

    @field_validator("block_hash")
    @classmethod
    def _block_hash_width(cls, v: bytes) -> bytes:
        return check_block_hash(v)

    def serialize(self, writer: BinaryWriter) -> None:
        writer.string(self.signer_id)
        self.public_key.serialize(writer)
        writer.u64le(self.nonce)
        writer.string(self.receiver_id)
        writer.fixed_bytes(self.block_hash, BLOCK_HASH_LENGTH)
        writer.sequence(self.actions, lambda a: a.serialize(writer))

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "Transaction":
        signer_id = reader.string()
        public_key = PublicKey.deserialize(reader)
        nonce = reader.u64le()
        receiver_id = reader.string()
        block_hash = reader.bytes(BLOCK_HASH_LENGTH)
        actions = reader.sequence(lambda: Action.deserialize(reader))
        return cls(
            signer_id=signer_id,
            public_key=public_key,
            nonce=nonce,
            receiver_id=receiver_id,
            block_hash=block_hash,
            actions=actions,
        )

    def get_hash(self) -> bytes:
        """SHA-256 of the canonical encoding; the transaction's on-chain id."""
        return TransactionCodec.hash_for_signing(self)


class SignedTransaction(WireModel):
    """Transaction together with the signer's signature over its hash."""

    transaction: Transaction
    signature: Signature

    def serialize(self, writer: BinaryWriter) -> None:
        self.transaction.serialize(writer)
        self.signature.serialize(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "SignedTransaction":
        transaction = Transaction.deserialize(reader)
        return cls(transaction=transaction, signature=Signature.deserialize(reader))


def create_transaction(signer_id: str, public_key: PublicKey, receiver_id: str, nonce: int,
                       actions: Sequence[Action], block_hash: bytes) -> Transaction:
    """Build an unsigned transaction; no I/O, no hashing."""
    return Transaction(
        signer_id=signer_id,
        public_key=public_key,
        nonce=nonce,
        receiver_id=receiver_id,
        block_hash=block_hash,
        actions=tuple(actions),
    )

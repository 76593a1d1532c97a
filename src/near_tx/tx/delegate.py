"""
Delegate (meta-transaction) builder.

A sender authorizes a batch of actions by signing a DelegateAction with a
local key. The result is a SignedDelegate action that a relayer places in
its own transaction and signs through the regular pipeline, so the inner
and outer signatures cover different bytes and different keys.
"""

import logging
from typing import Callable, Sequence

from ..codec.transaction_codec import TransactionCodec
from ..runtime.errors import NestedDelegate
from ..signers.signer import KeyPair
from .actions import Action, DelegateAction, SignedDelegate, wrap_non_delegate
from .keys import PublicKey, Signature

logger = logging.getLogger(__name__)


def build_delegate_action(sender_id: str, receiver_id: str, actions: Sequence[Action], nonce: int,
                          block_hash: bytes, public_key: PublicKey) -> DelegateAction:
    """
    Build an unsigned delegate action.

    Raises:
        NestedDelegate: If any action is itself a delegate action
    """
    for index, action in enumerate(actions):
        if isinstance(action, SignedDelegate):
            raise NestedDelegate(
                "A delegate action cannot wrap another delegate action",
                details={"index": index},
            )
    return DelegateAction(
        sender_id=sender_id,
        receiver_id=receiver_id,
        actions=wrap_non_delegate(actions),
        nonce=nonce,
        block_hash=block_hash,
        public_key=public_key,
    )


def sign_delegate_action(delegate_action: DelegateAction, key_pair: KeyPair) -> Signature:
    """
    Sign the SHA-256 of the delegate action's canonical encoding.

    Returns:
        Signature tagged with the key pair's key type
    """
    digest = TransactionCodec.hash_for_signing(delegate_action)
    signature = key_pair.sign(digest)
    logger.debug(f"Signed delegate action {digest.hex()} for {delegate_action.sender_id}")
    return Signature(key_type=key_pair.get_public_key().key_type, data=signature.data)


def delegate_action(sender_id: str, receiver_id: str, actions: Sequence[Action], nonce: int,
                    block_hash: bytes, key_pair: KeyPair) -> SignedDelegate:
    """
    Build and self-sign a delegate action.

    Args:
        sender_id: Account authorizing the actions
        receiver_id: Account the actions are applied to
        actions: Actions to authorize; none may be a delegate action
        nonce: Nonce of the sender's access key
        block_hash: Recent block hash (32 bytes)
        key_pair: Sender's local key

    Returns:
        SignedDelegate action ready to be embedded in a relayer's transaction
    """
    public_key = key_pair.get_public_key()
    unsigned = build_delegate_action(sender_id, receiver_id, actions, nonce, block_hash, public_key)
    signature = sign_delegate_action(unsigned, key_pair)
    return SignedDelegate(delegate_action=unsigned, signature=signature)


def verify_signed_delegate(signed_delegate: SignedDelegate,
                           verify: Callable[[bytes, Signature], bool]) -> bool:
    """
    Check the inner signature of a SignedDelegate.

    Args:
        signed_delegate: Delegate action with its signature
        verify: Callback receiving (hash, signature), e.g. ``key_pair.verify``

    Returns:
        True if the signature matches the delegate action's hash
    """
    digest = TransactionCodec.hash_for_signing(signed_delegate.delegate_action)
    return verify(digest, signed_delegate.signature)

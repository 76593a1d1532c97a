"""
Transaction signing pipeline.

canonical encode -> SHA-256 -> signer.sign_message -> SignedTransaction

The only await is the call into the signer capability. Nothing is cached
between calls and signer errors reach the caller unchanged; retries and
timeouts belong to the caller or the signer.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

from ..codec.transaction_codec import TransactionCodec
from ..options import SigningOptions
from ..runtime.errors import TransactionError
from ..signers.signer import Signer
from .actions import Action
from .keys import Signature
from .transaction import SignedTransaction, Transaction, create_transaction

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[SigningOptions], account_id: Optional[str],
                     network_id: Optional[str]) -> SigningOptions:
    if options is None:
        return SigningOptions(account_id=account_id, network_id=network_id)
    if account_id is not None or network_id is not None:
        raise TransactionError("Pass either options or account_id/network_id, not both")
    return options


async def sign_transaction(transaction: Transaction, signer: Signer,
                           account_id: Optional[str] = None, network_id: Optional[str] = None,
                           *, options: Optional[SigningOptions] = None) -> Tuple[bytes, SignedTransaction]:
    """
    Signs a given transaction from an account with given keys, applied to the given network.

    Args:
        transaction: The transaction to sign
        signer: Signer capability producing the signature
        account_id: Account whose key signs, forwarded to the signer
        network_id: Target network, forwarded to the signer
        options: SigningOptions instead of account_id/network_id

    Returns:
        Tuple of (transaction hash, signed transaction)

    Raises:
        SignerError: Whatever the signer raised, unchanged
    """
    opts = _resolve_options(options, account_id, network_id)
    message, digest = TransactionCodec.message_and_hash(transaction)
    logger.debug(
        f"Signing transaction {digest.hex()} from {transaction.signer_id} "
        f"(nonce {transaction.nonce}, {len(transaction.actions)} actions)"
    )

    signature: Union[Signature, bytes] = await signer.sign_message(message, opts.account_id, opts.network_id)
    data = signature.data if isinstance(signature, Signature) else bytes(signature)

    signed = SignedTransaction(
        transaction=transaction,
        signature=Signature(key_type=transaction.public_key.key_type, data=data),
    )
    return digest, signed


async def build_and_sign_transaction(receiver_id: str, nonce: int, actions: Sequence[Action],
                                     block_hash: bytes, signer: Signer,
                                     account_id: Optional[str] = None, network_id: Optional[str] = None,
                                     *, options: Optional[SigningOptions] = None) -> Tuple[bytes, SignedTransaction]:
    """
    Builds a transaction for ``account_id`` and signs it.

    The signer's public key for the account is fetched first and becomes the
    transaction's public key.

    Returns:
        Tuple of (transaction hash, signed transaction)

    Raises:
        TransactionError: If no account id is given
        SignerError: Whatever the signer raised, unchanged
    """
    opts = _resolve_options(options, account_id, network_id)
    if opts.account_id is None:
        raise TransactionError("An account id is required to build a transaction")

    public_key = await signer.get_public_key(opts.account_id, opts.network_id)
    transaction = create_transaction(opts.account_id, public_key, receiver_id, nonce, actions, block_hash)
    return await sign_transaction(transaction, signer, options=opts)

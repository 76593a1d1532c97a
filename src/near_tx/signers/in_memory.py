"""
In-memory signer.

Wraps a single local KeyPair behind the asynchronous Signer interface.
Messages are hashed with SHA-256 and the digest is signed.
"""

import logging
from typing import Optional

from ..codec.hashes import sha256_bytes
from ..runtime.errors import SignerUnavailable
from ..tx.keys import PublicKey, Signature
from .signer import KeyPair, Signer

logger = logging.getLogger(__name__)


class InMemorySigner(Signer):
    """
    Signer holding one key pair.

    When bound to an account and/or network, requests for any other account
    or network fail with SignerUnavailable.
    """

    def __init__(self, key_pair: KeyPair, account_id: Optional[str] = None,
                 network_id: Optional[str] = None):
        """
        Initialize in-memory signer.

        Args:
            key_pair: Key used for every signature
            account_id: Account this key belongs to, None for any
            network_id: Network this key is valid on, None for any
        """
        self.key_pair = key_pair
        self.account_id = account_id
        self.network_id = network_id

    def _check_scope(self, account_id: Optional[str], network_id: Optional[str]) -> None:
        if self.account_id is not None and account_id is not None and account_id != self.account_id:
            raise SignerUnavailable(
                f"No key for account {account_id}",
                details={"accountId": account_id, "networkId": network_id},
            )
        if self.network_id is not None and network_id is not None and network_id != self.network_id:
            raise SignerUnavailable(
                f"No key for account {account_id} on network {network_id}",
                details={"accountId": account_id, "networkId": network_id},
            )

    async def get_public_key(self, account_id: Optional[str] = None,
                             network_id: Optional[str] = None) -> PublicKey:
        self._check_scope(account_id, network_id)
        return self.key_pair.get_public_key()

    async def sign_message(self, message: bytes, account_id: Optional[str] = None,
                           network_id: Optional[str] = None) -> Signature:
        self._check_scope(account_id, network_id)
        digest = sha256_bytes(message)
        logger.debug(f"Signing {len(message)}-byte message for {account_id} on {network_id}")
        return self.key_pair.sign(digest)

    def __repr__(self) -> str:
        return f"InMemorySigner(account_id={self.account_id!r}, network_id={self.network_id!r})"

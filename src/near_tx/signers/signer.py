"""
Signing capability interfaces.

Two capabilities are consumed by the transaction code:

- Signer: asynchronous, addressed by account/network, may be backed by a
  remote service or hardware. Used by the transaction signing pipeline.
- KeyPair: synchronous local key. Used by the delegate action builder.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ..tx.keys import PublicKey, Signature


class Signer(ABC):
    """
    External signer capability.

    Implementations raise SignerUnavailable or SigningRejected (or their own
    SignerError subclasses); callers receive those errors unchanged.
    """

    @abstractmethod
    async def get_public_key(self, account_id: Optional[str] = None,
                             network_id: Optional[str] = None) -> PublicKey:
        """
        Public key used to sign for the account on the network.

        Args:
            account_id: Account the key belongs to
            network_id: Network the account lives on

        Returns:
            PublicKey of the signing key
        """

    @abstractmethod
    async def sign_message(self, message: bytes, account_id: Optional[str] = None,
                           network_id: Optional[str] = None) -> Signature:
        """
        Sign a canonical message.

        Args:
            message: Canonical bytes to sign
            account_id: Account whose key signs
            network_id: Network the account lives on

        Returns:
            Signature over the message

        Raises:
            SignerError: If signing fails
        """


class KeyPair(ABC):
    """Locally held signing key."""

    @abstractmethod
    def get_public_key(self) -> PublicKey:
        """Public half of the key pair."""

    @abstractmethod
    def sign(self, message: bytes) -> Signature:
        """
        Sign bytes with the private key.

        Args:
            message: Bytes to sign

        Returns:
            Signature tagged with this key's type
        """

    @abstractmethod
    def verify(self, message: bytes, signature: Union[Signature, bytes]) -> bool:
        """
        Verify a signature against a message.

        Returns:
            True if signature is valid
        """


__all__ = [
    "Signer",
    "KeyPair",
]

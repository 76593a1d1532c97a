"""
Signing capabilities for near-tx.

Signer is the asynchronous external capability used by the transaction
signing pipeline; KeyPair is the synchronous local key used by the delegate
action builder.
"""

from .signer import KeyPair, Signer
from .in_memory import InMemorySigner

__all__ = [
    "Signer",
    "KeyPair",
    "InMemorySigner",
]

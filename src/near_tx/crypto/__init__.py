"""
Cryptographic primitives for near-tx.

Provides the Ed25519 local key pair used for delegate actions and by
InMemorySigner.
"""

from .ed25519 import KeyPairEd25519

__all__ = [
    "KeyPairEd25519",
]

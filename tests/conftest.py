"""
Shared fixtures:
- deterministic Ed25519 key pairs
- stub signers implementing the async Signer interface
"""

import hashlib
from typing import List, Optional, Tuple

import pytest

from near_tx.crypto import KeyPairEd25519
from near_tx.signers import Signer
from near_tx.tx import PublicKey, Signature


BLOCK_HASH = hashlib.sha256(b"block").digest()
FIXED_SIGNATURE = bytes(range(64))


class StubSigner(Signer):
    """Signer returning a fixed signature and recording every request."""

    def __init__(self, public_key: PublicKey, signature: bytes = FIXED_SIGNATURE):
        self.public_key = public_key
        self.signature = signature
        self.messages: List[Tuple[bytes, Optional[str], Optional[str]]] = []
        self.key_requests: List[Tuple[Optional[str], Optional[str]]] = []

    async def get_public_key(self, account_id=None, network_id=None):
        self.key_requests.append((account_id, network_id))
        return self.public_key

    async def sign_message(self, message, account_id=None, network_id=None):
        self.messages.append((message, account_id, network_id))
        return Signature(data=self.signature)


class FailingSigner(Signer):
    """Signer raising a preset error from both operations."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def get_public_key(self, account_id=None, network_id=None):
        self.calls += 1
        raise self.error

    async def sign_message(self, message, account_id=None, network_id=None):
        self.calls += 1
        raise self.error


@pytest.fixture
def block_hash():
    """32-byte block hash used across tests."""
    return BLOCK_HASH


@pytest.fixture
def key_pair():
    """Provide a deterministic Ed25519 key pair for testing."""
    return KeyPairEd25519.from_seed("alice.near")


@pytest.fixture
def relayer_key_pair():
    """Second deterministic key pair, distinct from key_pair."""
    return KeyPairEd25519.from_seed("relayer.near")


@pytest.fixture
def public_key(key_pair):
    return key_pair.get_public_key()


@pytest.fixture
def stub_signer(public_key):
    """Signer stub returning FIXED_SIGNATURE for every message."""
    return StubSigner(public_key)


@pytest.fixture
def fixed_signature():
    return FIXED_SIGNATURE


@pytest.fixture
def make_stub_signer():
    """Factory for StubSigner around an arbitrary public key."""
    return StubSigner


@pytest.fixture
def make_failing_signer():
    """Factory for a signer that raises the given error."""
    return FailingSigner

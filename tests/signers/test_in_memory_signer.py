"""
Tests for InMemorySigner and SigningOptions.
"""

import hashlib

import pytest
from pydantic import ValidationError

from near_tx.options import SigningOptions
from near_tx.runtime.errors import SignerError, SignerUnavailable
from near_tx.signers import InMemorySigner, KeyPair, Signer


class TestInMemorySigner:
    """Tests for the single-key signer."""

    def test_implements_signer(self, key_pair):
        signer = InMemorySigner(key_pair)
        assert isinstance(signer, Signer)
        assert isinstance(key_pair, KeyPair)

    @pytest.mark.asyncio
    async def test_unbound_serves_any_account(self, key_pair):
        signer = InMemorySigner(key_pair)
        assert await signer.get_public_key("anyone.near", "mainnet") == key_pair.get_public_key()
        assert await signer.get_public_key() == key_pair.get_public_key()

    @pytest.mark.asyncio
    async def test_signs_sha256_of_message(self, key_pair):
        signer = InMemorySigner(key_pair, account_id="alice.near")
        message = b"canonical bytes"
        signature = await signer.sign_message(message, "alice.near")
        assert key_pair.verify(hashlib.sha256(message).digest(), signature)
        assert not key_pair.verify(message, signature)

    @pytest.mark.asyncio
    async def test_wrong_account(self, key_pair):
        signer = InMemorySigner(key_pair, account_id="alice.near")
        with pytest.raises(SignerUnavailable) as exc_info:
            await signer.sign_message(b"m", "bob.near")
        assert exc_info.value.details == {"accountId": "bob.near", "networkId": None}
        assert isinstance(exc_info.value, SignerError)

    @pytest.mark.asyncio
    async def test_wrong_network(self, key_pair):
        signer = InMemorySigner(key_pair, account_id="alice.near", network_id="testnet")
        with pytest.raises(SignerUnavailable, match="on network mainnet"):
            await signer.get_public_key("alice.near", "mainnet")

    @pytest.mark.asyncio
    async def test_unspecified_request_matches_bound_signer(self, key_pair):
        signer = InMemorySigner(key_pair, account_id="alice.near", network_id="testnet")
        signature = await signer.sign_message(b"m")
        assert len(signature.data) == 64

    def test_repr(self, key_pair):
        signer = InMemorySigner(key_pair, account_id="alice.near")
        assert repr(signer) == "InMemorySigner(account_id='alice.near', network_id=None)"


class TestSigningOptions:
    """Tests for signing options."""

    def test_defaults(self):
        options = SigningOptions()
        assert options.account_id is None
        assert options.network_id is None
        assert options.to_dict() == {}

    def test_aliases_and_names(self):
        by_alias = SigningOptions(accountId="alice.near", networkId="testnet")
        by_name = SigningOptions(account_id="alice.near", network_id="testnet")
        assert by_alias == by_name
        assert by_name.to_dict() == {"accountId": "alice.near", "networkId": "testnet"}

    def test_whitespace_stripped(self):
        assert SigningOptions(account_id="  alice.near ").account_id == "alice.near"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            SigningOptions(network_id="   ")

    def test_frozen(self):
        options = SigningOptions(account_id="alice.near")
        with pytest.raises(ValidationError):
            options.account_id = "bob.near"

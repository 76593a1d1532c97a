"""
near-tx - NEAR transaction construction, binary codec and signing

This package builds NEAR protocol actions and transactions, encodes them in
the canonical Borsh layout, signs them through an asynchronous signer
capability and builds self-signed delegate actions for meta-transactions.
"""

# Transaction model first: signers and crypto depend on tx.keys
from .tx import *
from .tx import __all__ as _tx_all

# Codec
from .codec import (
    BinaryReader, BinaryWriter, TransactionCodec, WireModel, WireUnion, decode, encode,
    sha256_bytes, sha256_hex,
)
from .canonjson import dumps_canonical, dumps_canonical_bytes

# Errors
from .runtime.errors import *
from .runtime.errors import __all__ as _errors_all

# Signing capabilities
from .signers import InMemorySigner, KeyPair, Signer
from .crypto import KeyPairEd25519
from .options import SigningOptions

__version__ = "0.1.0"
__all__ = [
    *_tx_all,
    *_errors_all,
    "BinaryReader",
    "BinaryWriter",
    "TransactionCodec",
    "WireModel",
    "WireUnion",
    "decode",
    "encode",
    "sha256_bytes",
    "sha256_hex",
    "dumps_canonical",
    "dumps_canonical_bytes",
    "Signer",
    "KeyPair",
    "InMemorySigner",
    "KeyPairEd25519",
    "SigningOptions",
    "__version__",
]

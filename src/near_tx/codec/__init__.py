"""
near-tx Binary Codec Module

Canonical Borsh encoding/decoding for every entity in the transaction model.

Key components:
- writer.py: Binary writer with range-checked little-endian primitives
- reader.py: Binary reader raising typed decode errors
- wire.py: WireModel and WireUnion base classes plus encode()/decode()
- transaction_codec.py: Signing message and hash construction
- hashes.py: SHA-256 hashing helpers
"""

from .hashes import sha256_bytes, sha256_hex
from .reader import BinaryReader
from .transaction_codec import TransactionCodec
from .wire import WireModel, WireUnion, decode, encode
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "TransactionCodec",
    "WireModel",
    "WireUnion",
    "decode",
    "encode",
    "sha256_bytes",
    "sha256_hex",
]

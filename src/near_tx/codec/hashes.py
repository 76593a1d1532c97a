"""
Hash Functions

SHA-256 is the only digest used for transactions and delegate actions.
"""

import hashlib


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def sha256_hex(input_bytes: bytes) -> str:
    """SHA-256 hash of input bytes as lowercase hex."""
    return sha256_bytes(input_bytes).hex()

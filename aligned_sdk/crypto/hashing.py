"""
Hashing Utilities
Keccak-256 hashing and hex helpers for commitments and Merkle nodes.

This module provides:
- Keccak-256 (legacy Keccak, as used by Ethereum) for raw bytes
- Zero-digest handling for absent optional fields
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Every digest is computed on a freshly created hash object; no hasher is
  shared or reset between calls
- Always hash raw bytes exactly as given
"""
from __future__ import annotations

from typing import Optional

from Crypto.Hash import keccak


HASH_SIZE = 32

# Commitment used for absent optional fields
ZERO_HASH: bytes = bytes(HASH_SIZE)


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 digest of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def hash_optional(data: Optional[bytes]) -> bytes:
    """
    Hash an optional field: keccak256(data) if present, else ZERO_HASH.

    An empty byte string is present and hashes normally.
    """
    if data is None:
        return ZERO_HASH
    return keccak256(data)


def hash_concat(*parts: bytes) -> bytes:
    """
    Hash the concatenation of byte sequences in the given order.

    Used for the commitment digest and for Merkle parents:
    parent = keccak256(left + right)
    """
    return keccak256(b"".join(parts))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "HASH_SIZE",
    "ZERO_HASH",
    "keccak256",
    "hash_optional",
    "hash_concat",
    "to_hex",
    "from_hex",
]

"""
Commitment scheme: verification data -> fixed-size digests.

Usage:
    from aligned_sdk.commitment import build_commitment, commitment_hash

    commitment = build_commitment(verification_data)
    leaf = commitment_hash(commitment)
"""
from .builder import (
    ADDRESS_PATTERN,
    decode_address,
    build_commitment,
    commitment_hash,
)

__all__ = [
    "ADDRESS_PATTERN",
    "decode_address",
    "build_commitment",
    "commitment_hash",
]

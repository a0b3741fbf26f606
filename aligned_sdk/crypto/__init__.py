"""
Core cryptographic utilities.

Keccak-256 hashing for commitments and Merkle nodes, and recoverable
ECDSA signing of commitment digests.
"""
from .hashing import (
    HASH_SIZE,
    ZERO_HASH,
    keccak256,
    hash_optional,
    hash_concat,
    to_hex,
    from_hex,
)
from .signatures import (
    SIGNATURE_SIZE,
    PrivateKey,
    signature_from_bytes,
    load_account,
    sign_hash,
    recover_signer,
)

__all__ = [
    "HASH_SIZE",
    "ZERO_HASH",
    "keccak256",
    "hash_optional",
    "hash_concat",
    "to_hex",
    "from_hex",
    "SIGNATURE_SIZE",
    "PrivateKey",
    "signature_from_bytes",
    "load_account",
    "sign_hash",
    "recover_signer",
]

"""
Batch Merkle Tree and Inclusion Verification

Usage:
    from aligned_sdk.merkle import MerkleProver, verify_inclusion
    from aligned_sdk.commitment import build_commitment, commitment_hash

    leaves = [commitment_hash(build_commitment(d)) for d in batch]
    inclusion = MerkleProver.inclusion_data(leaves, index=2)

    assert verify_inclusion(leaves[2], inclusion)
"""
from .merkle_tree import (
    EMPTY_TREE_ROOT,
    MerkleProof,
    merkle_parent,
    build_merkle_root,
    build_merkle_proof,
    compute_root,
    verify_merkle_proof,
)

from .inclusion import (
    MerkleInclusionVerifier,
    MerkleProver,
    select_inclusion_proof,
    verify_aligned_verification_data,
    verify_commitment_inclusion,
    verify_inclusion,
    verify_inclusion_or_raise,
)


__all__ = [
    # Core types
    "MerkleProof",
    "EMPTY_TREE_ROOT",
    # Tree functions
    "merkle_parent",
    "build_merkle_root",
    "build_merkle_proof",
    "compute_root",
    "verify_merkle_proof",
    # Inclusion checks
    "select_inclusion_proof",
    "verify_inclusion",
    "verify_inclusion_or_raise",
    "verify_commitment_inclusion",
    "verify_aligned_verification_data",
    # Convenience classes
    "MerkleInclusionVerifier",
    "MerkleProver",
]

"""
Batch Inclusion Verification
Checks that a commitment is a member of a batch Merkle root reported by
the aggregator, independently of the submission flow.

This module provides:
- verify_inclusion: boolean check of a leaf against BatchInclusionData
- verify_inclusion_or_raise: same check, raising InclusionProofMismatchException
- verify_aligned_verification_data: re-check retained inclusion evidence
- MerkleInclusionVerifier / MerkleProver: class-based convenience wrappers

The left/right convention is documented in merkle_tree.py and must match
the aggregator's tree construction.
"""
from __future__ import annotations

import logging
from typing import Sequence

from aligned_sdk.commitment import commitment_hash
from aligned_sdk.crypto.hashing import to_hex
from aligned_sdk.merkle.merkle_tree import (
    MerkleProof,
    build_merkle_proof,
    build_merkle_root,
    compute_root,
)
from aligned_sdk.schemas.batch import (
    AlignedVerificationData,
    BatchInclusionData,
    InclusionProof,
)
from aligned_sdk.schemas.errors import InclusionProofMismatchException
from aligned_sdk.schemas.verification import VerificationDataCommitment


logger = logging.getLogger(__name__)


def select_inclusion_proof(
    inclusion_data: BatchInclusionData,
    proof_position: int = 0,
) -> InclusionProof:
    """
    Pick the InclusionProof for one item of an aggregator response.

    Raises:
        InclusionProofMismatchException: If the response has no proof at that position
    """
    proofs = inclusion_data.batch_inclusion_proof
    if proof_position < 0 or proof_position >= len(proofs):
        raise InclusionProofMismatchException(
            f"No inclusion proof at position {proof_position} "
            f"(response carries {len(proofs)})",
            index_in_batch=inclusion_data.index_in_batch,
            details={"proof_position": proof_position},
        )
    return proofs[proof_position]


def _check_root(
    leaf: bytes,
    merkle_path: Sequence[bytes],
    index_in_batch: int,
    batch_merkle_root: bytes,
) -> None:
    try:
        computed = compute_root(leaf, merkle_path, index_in_batch)
    except ValueError as e:
        raise InclusionProofMismatchException(
            f"Malformed inclusion proof: {e}",
            index_in_batch=index_in_batch,
            expected_root=to_hex(batch_merkle_root),
        ) from e

    if computed != batch_merkle_root:
        raise InclusionProofMismatchException(
            "Recomputed batch root does not match the claimed root",
            index_in_batch=index_in_batch,
            expected_root=to_hex(batch_merkle_root),
            computed_root=to_hex(computed),
        )


def verify_inclusion_or_raise(
    leaf: bytes,
    inclusion_data: BatchInclusionData,
    proof_position: int = 0,
) -> None:
    """
    Verify that leaf is included in inclusion_data's batch root.

    Args:
        leaf: Commitment digest (see commitment_hash)
        inclusion_data: Aggregator response for the submission
        proof_position: Which entry of batch_inclusion_proof to use

    Raises:
        InclusionProofMismatchException: If the path does not lead to the root
    """
    proof = select_inclusion_proof(inclusion_data, proof_position)
    _check_root(
        leaf,
        proof.merkle_path,
        inclusion_data.index_in_batch,
        inclusion_data.batch_merkle_root,
    )


def verify_inclusion(
    leaf: bytes,
    inclusion_data: BatchInclusionData,
    proof_position: int = 0,
) -> bool:
    """Boolean form of verify_inclusion_or_raise."""
    try:
        verify_inclusion_or_raise(leaf, inclusion_data, proof_position)
    except InclusionProofMismatchException as e:
        logger.debug("Inclusion check failed: %s %s", e.message, e.details)
        return False
    return True


def verify_commitment_inclusion(
    commitment: VerificationDataCommitment,
    inclusion_data: BatchInclusionData,
    proof_position: int = 0,
) -> bool:
    """Verify inclusion using the commitment's digest as the leaf."""
    return verify_inclusion(commitment_hash(commitment), inclusion_data, proof_position)


def verify_aligned_verification_data(data: AlignedVerificationData) -> bool:
    """Re-check retained inclusion evidence."""
    try:
        _check_root(
            commitment_hash(data.verification_data_commitment),
            data.batch_inclusion_proof.merkle_path,
            data.index_in_batch,
            data.batch_merkle_root,
        )
    except InclusionProofMismatchException as e:
        logger.debug("Inclusion check failed: %s %s", e.message, e.details)
        return False
    return True


class MerkleInclusionVerifier:
    """
    Convenience class for verifying batch inclusion.

    Example:
        >>> MerkleInclusionVerifier.verify(leaf, inclusion_data)
        True
    """

    @staticmethod
    def verify(leaf: bytes, inclusion_data: BatchInclusionData, proof_position: int = 0) -> bool:
        return verify_inclusion(leaf, inclusion_data, proof_position)

    @staticmethod
    def verify_or_raise(
        leaf: bytes,
        inclusion_data: BatchInclusionData,
        proof_position: int = 0,
    ) -> None:
        verify_inclusion_or_raise(leaf, inclusion_data, proof_position)

    @staticmethod
    def verify_commitment(
        commitment: VerificationDataCommitment,
        inclusion_data: BatchInclusionData,
        proof_position: int = 0,
    ) -> bool:
        return verify_commitment_inclusion(commitment, inclusion_data, proof_position)

    @staticmethod
    def verify_evidence(data: AlignedVerificationData) -> bool:
        return verify_aligned_verification_data(data)


class MerkleProver:
    """
    Builds batch trees and inclusion data the way the aggregator does.

    Useful for simulating an aggregator in tests or local tooling.
    """

    @staticmethod
    def compute_root(leaves: Sequence[bytes]) -> bytes:
        return build_merkle_root(leaves)

    @staticmethod
    def prove(leaves: Sequence[bytes], index: int) -> MerkleProof:
        return build_merkle_proof(leaves, index)

    @staticmethod
    def inclusion_data(leaves: Sequence[bytes], index: int) -> BatchInclusionData:
        """
        Build the BatchInclusionData an aggregator would return for leaves[index].

        Raises:
            IndexError: If index is out of range
            ValueError: If leaves is empty
        """
        proof = build_merkle_proof(leaves, index)
        return BatchInclusionData(
            batch_merkle_root=proof.root,
            batch_inclusion_proof=[InclusionProof(merkle_path=proof.siblings)],
            index_in_batch=index,
        )


__all__ = [
    "select_inclusion_proof",
    "verify_inclusion",
    "verify_inclusion_or_raise",
    "verify_commitment_inclusion",
    "verify_aligned_verification_data",
    "MerkleInclusionVerifier",
    "MerkleProver",
]

"""
aligned-sdk

Client-side commitments, signed submissions and batch inclusion
verification for a proof aggregation service.
"""

__version__ = "0.1.0"

from aligned_sdk.schemas import (
    AlignedVerificationData,
    BatchInclusionData,
    ClientMessage,
    InclusionProof,
    ProvingSystemId,
    Signature,
    VerificationData,
    VerificationDataCommitment,
    name_of,
)
from aligned_sdk.commitment import build_commitment, commitment_hash
from aligned_sdk.messages import build_client_message, recover_message_signer
from aligned_sdk.merkle import MerkleInclusionVerifier, verify_inclusion
from aligned_sdk.submission import BatchSubmitter, BatchTransport

__all__ = [
    "__version__",
    "AlignedVerificationData",
    "BatchInclusionData",
    "ClientMessage",
    "InclusionProof",
    "ProvingSystemId",
    "Signature",
    "VerificationData",
    "VerificationDataCommitment",
    "name_of",
    "build_commitment",
    "commitment_hash",
    "build_client_message",
    "recover_message_signer",
    "MerkleInclusionVerifier",
    "verify_inclusion",
    "BatchSubmitter",
    "BatchTransport",
]

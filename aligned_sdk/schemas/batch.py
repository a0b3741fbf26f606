"""
Schemas & Wire Types
File: batch.py

Purpose: Batch inclusion data received from the aggregator and the
inclusion evidence a caller keeps afterwards.

The aggregator speaks PascalCase keys (BatchMerkleRoot, BatchInclusionProof,
MerklePath, IndexInBatch); the snake_case field names are accepted too.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .canonical import Hash32, dumps_canonical
from .verification import VerificationDataCommitment


class InclusionProof(BaseModel):
    """Sibling hashes ordered from the leaf level up to just below the root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    merkle_path: list[Hash32] = Field(
        default_factory=list,
        validation_alias=AliasChoices("merkle_path", "MerklePath"),
        serialization_alias="MerklePath",
    )

    @property
    def depth(self) -> int:
        return len(self.merkle_path)


class BatchInclusionData(BaseModel):
    """
    Where a submission landed: the batch root, its path and its index.

    batch_inclusion_proof holds one InclusionProof per item the response
    covers; a single-submission response carries exactly one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    batch_merkle_root: Hash32 = Field(
        ...,
        validation_alias=AliasChoices("batch_merkle_root", "BatchMerkleRoot"),
        serialization_alias="BatchMerkleRoot",
    )
    batch_inclusion_proof: list[InclusionProof] = Field(
        default_factory=list,
        validation_alias=AliasChoices("batch_inclusion_proof", "BatchInclusionProof"),
        serialization_alias="BatchInclusionProof",
    )
    index_in_batch: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("index_in_batch", "IndexInBatch"),
        serialization_alias="IndexInBatch",
    )

    def to_json(self) -> str:
        return dumps_canonical(self)


class AlignedVerificationData(BaseModel):
    """Proof-of-inclusion evidence retained by the caller for one submission."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    verification_data_commitment: VerificationDataCommitment
    batch_merkle_root: Hash32
    batch_inclusion_proof: InclusionProof
    index_in_batch: int = Field(..., ge=0)

    def to_json(self) -> str:
        return dumps_canonical(self)


__all__ = [
    "InclusionProof",
    "BatchInclusionData",
    "AlignedVerificationData",
]

"""
Schemas & Wire Types
File: verification.py

Purpose: The verification-data record a caller submits and the commitment
derived from it.

The proof artifacts are opaque byte blobs; nothing here inspects them.
"""

from typing import Any, Annotated, Optional

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from aligned_sdk.config import RuntimeConfig, get_default_config

from .canonical import Hash32, WireBytes
from .proving_system import ProvingSystemId, coerce_proving_system, from_name, name_of


ADDRESS_SIZE = 20


def _require_address_bytes(value: bytes) -> bytes:
    if len(value) != ADDRESS_SIZE:
        raise ValueError(f"Expected {ADDRESS_SIZE} address bytes, got {len(value)}")
    return value


AddressBytes = Annotated[WireBytes, AfterValidator(_require_address_bytes)]


def _legacy_halo2_names(context: Optional[dict]) -> bool:
    """Read the Halo2 naming flag from a {"config": RuntimeConfig} context."""
    config: Optional[RuntimeConfig] = (context or {}).get("config")
    return (config or get_default_config()).protocol.legacy_halo2_names


class VerificationData(BaseModel):
    """
    A proof submission as built by the caller.

    Optional artifacts are plain ``bytes | None``: absent means None,
    which is not the same as an empty byte string.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    proving_system: ProvingSystemId = Field(
        ...,
        description="Proof system the artifacts belong to",
    )
    proof: WireBytes = Field(
        ...,
        description="Opaque proof bytes",
    )
    public_input: Optional[WireBytes] = Field(
        default=None,
        description="Public inputs, if the proof system uses them",
    )
    verification_key: Optional[WireBytes] = Field(
        default=None,
        description="Verification key, if the proof system uses one",
    )
    vm_program_code: Optional[WireBytes] = Field(
        default=None,
        description="zkVM program code; takes precedence over verification_key",
    )
    proof_generator_address: str = Field(
        ...,
        description="0x-prefixed 20-byte address of the proof generator",
        validation_alias=AliasChoices("proof_generator_address", "proof_generator_addr"),
        serialization_alias="proof_generator_addr",
    )

    @field_validator("proving_system", mode="before")
    @classmethod
    def _parse_proving_system(cls, value: Any, info: ValidationInfo) -> ProvingSystemId:
        if isinstance(value, str):
            return from_name(value, legacy_halo2_names=_legacy_halo2_names(info.context))
        return coerce_proving_system(value)

    @field_serializer("proving_system", when_used="json")
    def _serialize_proving_system(self, value: ProvingSystemId, info: SerializationInfo) -> str:
        return name_of(value, legacy_halo2_names=_legacy_halo2_names(info.context))

    @field_serializer("proof_generator_address", when_used="json")
    def _serialize_address(self, value: str) -> str:
        return value.lower()


class VerificationDataCommitment(BaseModel):
    """
    Fixed-size digests standing in for a VerificationData record.

    Derived once per record by the commitment builder.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    proof_commitment: Hash32 = Field(
        ...,
        description="keccak256(proof)",
    )
    public_input_commitment: Hash32 = Field(
        ...,
        description="keccak256(public_input) or 32 zero bytes",
    )
    proof_system_aux_data_commitment: Hash32 = Field(
        ...,
        description="keccak256(vm_program_code or verification_key) or 32 zero bytes",
    )
    proof_generator_addr: AddressBytes = Field(
        ...,
        description="Raw 20-byte proof generator address",
    )

    def packed(self) -> bytes:
        """Concatenate the fields in commitment order."""
        return (
            self.proof_commitment
            + self.public_input_commitment
            + self.proof_system_aux_data_commitment
            + self.proof_generator_addr
        )


__all__ = [
    "ADDRESS_SIZE",
    "AddressBytes",
    "VerificationData",
    "VerificationDataCommitment",
]

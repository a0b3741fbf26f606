"""
Common test fixtures shared by all test modules.

Provides factory functions for core SDK data structures:
- VerificationData
- VerificationDataCommitment
- Batches of synthetic leaves
"""

from typing import Optional

from aligned_sdk.commitment import build_commitment, commitment_hash
from aligned_sdk.crypto.hashing import keccak256
from aligned_sdk.schemas.proving_system import ProvingSystemId
from aligned_sdk.schemas.verification import VerificationData, VerificationDataCommitment


# Throwaway key used only in tests
TEST_PRIVATE_KEY = "0x7d2647ad2e1f6c1dce5abe2b5c3b9c8ecfe959e40b989d531bbf6624ff1c62df"

TEST_PROOF_GENERATOR = "0x1111111111111111111111111111111111111111"


# =============================================================================
# VerificationData Factory
# =============================================================================

def make_verification_data(
    proving_system: ProvingSystemId = ProvingSystemId.Groth16Bn254,
    proof: bytes = b"proof-bytes",
    public_input: Optional[bytes] = b"pub-bytes",
    verification_key: Optional[bytes] = b"vk-bytes",
    vm_program_code: Optional[bytes] = None,
    proof_generator_address: str = TEST_PROOF_GENERATOR,
) -> VerificationData:
    """Create a VerificationData with the standard Groth16 test values."""
    return VerificationData(
        proving_system=proving_system,
        proof=proof,
        public_input=public_input,
        verification_key=verification_key,
        vm_program_code=vm_program_code,
        proof_generator_address=proof_generator_address,
    )


def make_sp1_data(index: int = 0) -> VerificationData:
    """Create a zkVM-style record (program code, no verification key)."""
    return make_verification_data(
        proving_system=ProvingSystemId.SP1,
        proof=f"sp1-proof-{index}".encode(),
        public_input=None,
        verification_key=None,
        vm_program_code=f"elf-{index}".encode(),
    )


# =============================================================================
# Commitment Factories
# =============================================================================

def make_commitment(**kwargs) -> VerificationDataCommitment:
    """Build the commitment of make_verification_data(**kwargs)."""
    return build_commitment(make_verification_data(**kwargs))


def make_leaves(n: int) -> list[bytes]:
    """Distinct synthetic 32-byte leaves."""
    return [keccak256(f"leaf-{i}".encode()) for i in range(n)]


def make_batch(n: int) -> list[VerificationData]:
    """n distinct records with their own proofs."""
    return [
        make_verification_data(proof=f"proof-{i}".encode(), public_input=f"pub-{i}".encode())
        for i in range(n)
    ]


def leaves_for(batch: list[VerificationData]) -> list[bytes]:
    """Commitment digests of a batch, in order."""
    return [commitment_hash(build_commitment(d)) for d in batch]

"""
Commitment Builder

Derives a VerificationDataCommitment from a VerificationData record and
the 32-byte commitment digest that is both signed and used as the batch
Merkle leaf.

Commitment rules:
1. proof_commitment = keccak256(proof)
2. public_input_commitment = keccak256(public_input), or 32 zero bytes if absent
3. proof_system_aux_data_commitment = keccak256(vm_program_code) if present,
   else keccak256(verification_key) if present, else 32 zero bytes
4. proof_generator_addr = the 20 raw bytes of the 0x-prefixed hex address
5. commitment digest = keccak256(proof || public_input || aux || addr)
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from aligned_sdk.config import RuntimeConfig, get_default_config
from aligned_sdk.crypto.hashing import hash_optional, keccak256
from aligned_sdk.schemas.errors import EmptyProofException, InvalidAddressEncodingException
from aligned_sdk.schemas.verification import VerificationData, VerificationDataCommitment


logger = logging.getLogger(__name__)

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def decode_address(address: str) -> bytes:
    """
    Decode a 0x-prefixed 20-byte hex address.

    Mixed-case (checksummed) input is accepted; the checksum is not checked.

    Raises:
        InvalidAddressEncodingException: If the string is not 0x + 40 hex chars
    """
    if not isinstance(address, str) or not ADDRESS_PATTERN.match(address):
        raise InvalidAddressEncodingException(
            f"Proof generator address must be 0x followed by 40 hex characters, "
            f"got: {address!r}",
            address=address if isinstance(address, str) else repr(address),
        )
    return bytes.fromhex(address[2:])


def build_commitment(
    data: VerificationData,
    config: Optional[RuntimeConfig] = None,
) -> VerificationDataCommitment:
    """
    Build the commitment for a verification data record.

    Args:
        data: Record to commit to
        config: Runtime configuration (defaults to the global one)

    Returns:
        VerificationDataCommitment with three 32-byte digests and the raw address

    Raises:
        InvalidAddressEncodingException: If the proof generator address is malformed
        EmptyProofException: If the proof is empty and strict_empty_proof is set
    """
    config = config or get_default_config()

    if len(data.proof) == 0:
        if config.protocol.strict_empty_proof:
            raise EmptyProofException(
                "Refusing to commit to an empty proof",
                details={"proving_system": data.proving_system.name},
            )
        logger.warning(
            "Committing to an empty %s proof; this is almost certainly a bug",
            data.proving_system.name,
        )

    # Decode first so a bad address fails before any hashing work
    proof_generator_addr = decode_address(data.proof_generator_address)

    aux_data = data.vm_program_code if data.vm_program_code is not None else data.verification_key

    return VerificationDataCommitment(
        proof_commitment=keccak256(data.proof),
        public_input_commitment=hash_optional(data.public_input),
        proof_system_aux_data_commitment=hash_optional(aux_data),
        proof_generator_addr=proof_generator_addr,
    )


def commitment_hash(commitment: VerificationDataCommitment) -> bytes:
    """
    Digest of a commitment: the signed payload and the batch Merkle leaf.

    keccak256(proof_commitment || public_input_commitment
              || proof_system_aux_data_commitment || proof_generator_addr)
    """
    return keccak256(commitment.packed())


__all__ = [
    "ADDRESS_PATTERN",
    "decode_address",
    "build_commitment",
    "commitment_hash",
]

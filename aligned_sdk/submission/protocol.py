"""
Batch Submission Protocol

The core's side of the contract with the remote aggregator:
- turn VerificationData records into signed ClientMessages, in order
- hand each serialized message to a caller-supplied transport
- parse the BatchInclusionData that comes back and keep it as
  AlignedVerificationData

Connection management, batching policy and retries belong to the
transport. Transport exceptions propagate untouched so they stay
distinguishable from InclusionProofMismatchException.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pydantic import ValidationError

from aligned_sdk.commitment import build_commitment, commitment_hash
from aligned_sdk.config import RuntimeConfig, get_default_config
from aligned_sdk.crypto.hashing import to_hex
from aligned_sdk.crypto.signatures import PrivateKey, load_account
from aligned_sdk.merkle.inclusion import select_inclusion_proof, verify_inclusion_or_raise
from aligned_sdk.messages import sign_commitment
from aligned_sdk.schemas.batch import AlignedVerificationData, BatchInclusionData
from aligned_sdk.schemas.canonical import loads_canonical
from aligned_sdk.schemas.errors import SchemaValidationException
from aligned_sdk.schemas.messages import ClientMessage
from aligned_sdk.schemas.verification import VerificationData, VerificationDataCommitment


logger = logging.getLogger(__name__)


class BatchTransport(ABC):
    """
    Delivers one serialized ClientMessage and returns the raw response.

    Implementations own dialing, timeouts and cancellation.
    """

    @abstractmethod
    def send(self, message_json: str) -> bytes:
        """Send a message and block until the aggregator answers with inclusion data."""


def build_client_messages(
    data_list: Sequence[VerificationData],
    private_key: PrivateKey,
    config: Optional[RuntimeConfig] = None,
) -> list[ClientMessage]:
    """
    Build signed messages for several records, preserving order.

    All or nothing: the first failure propagates and no messages are returned.
    """
    return [message for _, message in _commit_and_sign(data_list, private_key, config)]


def _commit_and_sign(
    data_list: Sequence[VerificationData],
    private_key: PrivateKey,
    config: Optional[RuntimeConfig],
) -> list[tuple[VerificationDataCommitment, ClientMessage]]:
    account = load_account(private_key)
    signed = []
    for data in data_list:
        commitment = build_commitment(data, config)
        signed.append((commitment, sign_commitment(data, commitment, account, config)))
    return signed


def parse_batch_inclusion_data(raw: bytes | str) -> BatchInclusionData:
    """
    Deserialize the aggregator's inclusion data from a raw buffer.

    Raises:
        SchemaValidationException: If the buffer is not a valid inclusion document
    """
    try:
        payload = loads_canonical(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaValidationException(
            f"Inclusion data is not valid JSON: {e}",
        ) from e

    if not isinstance(payload, dict):
        raise SchemaValidationException(
            "Inclusion data must be a JSON object",
            details={"type": type(payload).__name__},
        )

    try:
        return BatchInclusionData.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        raise SchemaValidationException(
            f"Invalid inclusion data: {e.error_count()} error(s)",
            field_path=".".join(str(p) for p in first.get("loc", ())) or None,
            details={"error": first.get("msg", str(e))},
        ) from e


def to_aligned_verification_data(
    commitment: VerificationDataCommitment,
    inclusion_data: BatchInclusionData,
    proof_position: int = 0,
) -> AlignedVerificationData:
    """Combine a commitment with the aggregator's response into retained evidence."""
    return AlignedVerificationData(
        verification_data_commitment=commitment,
        batch_merkle_root=inclusion_data.batch_merkle_root,
        batch_inclusion_proof=select_inclusion_proof(inclusion_data, proof_position),
        index_in_batch=inclusion_data.index_in_batch,
    )


class BatchSubmitter:
    """
    Submits records through a BatchTransport and collects inclusion evidence.

    Usage:
        submitter = BatchSubmitter(transport)
        evidence = submitter.submit_multiple([data_a, data_b], private_key)
    """

    def __init__(
        self,
        transport: BatchTransport,
        config: Optional[RuntimeConfig] = None,
    ) -> None:
        self.transport = transport
        self.config = config or get_default_config()

    def submit_multiple(
        self,
        data_list: Sequence[VerificationData],
        private_key: PrivateKey,
    ) -> list[AlignedVerificationData]:
        """
        Sign and send every record, returning evidence in submission order.

        Every message is built before anything is sent, so a malformed
        record aborts the whole call without side effects.

        Raises:
            InvalidAddressEncodingException, EmptyProofException: On bad records
            SchemaValidationException: If a response cannot be parsed
            InclusionProofMismatchException: If verification is enabled and a
                response does not prove inclusion of the submitted commitment
        """
        signed = _commit_and_sign(data_list, private_key, self.config)

        results: list[AlignedVerificationData] = []
        for position, (commitment, message) in enumerate(signed):
            raw = self.transport.send(message.to_json(self.config))
            inclusion = parse_batch_inclusion_data(raw)

            if self.config.verifier.verify_inclusion:
                verify_inclusion_or_raise(commitment_hash(commitment), inclusion)

            logger.info(
                "Submission %d included in batch %s at index %d",
                position,
                to_hex(inclusion.batch_merkle_root),
                inclusion.index_in_batch,
            )
            results.append(to_aligned_verification_data(commitment, inclusion))

        return results


__all__ = [
    "BatchTransport",
    "BatchSubmitter",
    "build_client_messages",
    "parse_batch_inclusion_data",
    "to_aligned_verification_data",
]

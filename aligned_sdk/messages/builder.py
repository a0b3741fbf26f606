"""
Client Message Builder

Turns a VerificationData record and a private key into a signed
ClientMessage:

    commitment = build_commitment(data)
    digest     = commitment_hash(commitment)
    signature  = sign_hash(digest, private_key)
    message    = ClientMessage(verification_data=data, signature=signature)

A message is either fully built and signed or not built at all; every
failure raises before the ClientMessage is constructed.
"""
from __future__ import annotations

import logging
from typing import Optional

from aligned_sdk.commitment import build_commitment, commitment_hash
from aligned_sdk.config import RuntimeConfig
from aligned_sdk.crypto.signatures import PrivateKey, recover_signer, sign_hash
from aligned_sdk.schemas.messages import ClientMessage
from aligned_sdk.schemas.verification import VerificationData, VerificationDataCommitment


logger = logging.getLogger(__name__)


def build_client_message(
    data: VerificationData,
    private_key: PrivateKey,
    config: Optional[RuntimeConfig] = None,
) -> ClientMessage:
    """
    Commit to a verification data record and sign the commitment digest.

    Args:
        data: Record to submit
        private_key: Hex string, raw 32 bytes, or an eth-account LocalAccount
        config: Runtime configuration (defaults to the global one)

    Returns:
        Signed ClientMessage

    Raises:
        InvalidAddressEncodingException: If the proof generator address is malformed
        EmptyProofException: If the proof is empty in strict mode
        InvalidSignatureLengthException: If the signer returned a malformed signature
    """
    commitment = build_commitment(data, config)
    return sign_commitment(data, commitment, private_key, config)


def sign_commitment(
    data: VerificationData,
    commitment: VerificationDataCommitment,
    private_key: PrivateKey,
    config: Optional[RuntimeConfig] = None,
) -> ClientMessage:
    """
    Sign an already built commitment and wrap it with its record.

    commitment must be build_commitment(data); callers that need the
    commitment as well use this to avoid committing twice.
    """
    signature = sign_hash(commitment_hash(commitment), private_key)

    message = ClientMessage(verification_data=data, signature=signature)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built client message: %s", message.to_json(config))
    return message


def recover_message_signer(
    message: ClientMessage,
    config: Optional[RuntimeConfig] = None,
) -> str:
    """
    Recover the checksummed address that signed a ClientMessage.

    Recomputes the commitment digest from the message's verification data,
    the same way the aggregator does.
    """
    commitment = build_commitment(message.verification_data, config)
    return recover_signer(commitment_hash(commitment), message.signature)


__all__ = [
    "build_client_message",
    "sign_commitment",
    "recover_message_signer",
]

"""Signed client messages for submission to the aggregator."""
from .builder import build_client_message, recover_message_signer, sign_commitment

__all__ = [
    "build_client_message",
    "sign_commitment",
    "recover_message_signer",
]

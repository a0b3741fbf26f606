"""Submission boundary between the SDK core and a caller-supplied transport."""
from .protocol import (
    BatchSubmitter,
    BatchTransport,
    build_client_messages,
    parse_batch_inclusion_data,
    to_aligned_verification_data,
)

__all__ = [
    "BatchSubmitter",
    "BatchTransport",
    "build_client_messages",
    "parse_batch_inclusion_data",
    "to_aligned_verification_data",
]

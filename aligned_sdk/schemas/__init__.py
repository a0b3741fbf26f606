"""
Schemas & Wire Types
File: __init__.py

Purpose: Export the public API for the schemas module.
This is the main entry point for other modules to import wire types.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    Hash32,
    WireBytes,
    canonicalize_value,
    decode_wire_bytes,
    dumps_canonical,
    encode_wire_bytes,
    loads_canonical,
)

# Error models and exceptions
from .errors import (
    AlignedError,
    AlignedException,
    CanonicalizationException,
    EmptyProofException,
    ErrorCodes,
    InclusionProofMismatchException,
    InvalidAddressEncodingException,
    InvalidSignatureLengthException,
    SchemaValidationException,
    UnsupportedProvingSystemException,
)

# Proving system registry
from .proving_system import (
    CANONICAL_NAMES,
    LEGACY_NAMES,
    ProvingSystemId,
    coerce_proving_system,
    from_name,
    name_of,
)

# Submission records
from .verification import (
    ADDRESS_SIZE,
    VerificationData,
    VerificationDataCommitment,
)

from .messages import (
    ClientMessage,
    Signature,
)

# Batch inclusion
from .batch import (
    AlignedVerificationData,
    BatchInclusionData,
    InclusionProof,
)


__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "Hash32",
    "WireBytes",
    "canonicalize_value",
    "decode_wire_bytes",
    "dumps_canonical",
    "encode_wire_bytes",
    "loads_canonical",
    # Errors
    "AlignedError",
    "AlignedException",
    "CanonicalizationException",
    "EmptyProofException",
    "ErrorCodes",
    "InclusionProofMismatchException",
    "InvalidAddressEncodingException",
    "InvalidSignatureLengthException",
    "SchemaValidationException",
    "UnsupportedProvingSystemException",
    # Registry
    "CANONICAL_NAMES",
    "LEGACY_NAMES",
    "ProvingSystemId",
    "coerce_proving_system",
    "from_name",
    "name_of",
    # Records
    "ADDRESS_SIZE",
    "VerificationData",
    "VerificationDataCommitment",
    "ClientMessage",
    "Signature",
    "AlignedVerificationData",
    "BatchInclusionData",
    "InclusionProof",
]

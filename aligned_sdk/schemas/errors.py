"""
Schemas & Wire Types
File: errors.py

Purpose: Standard error taxonomy for the aligned SDK.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

None of these errors are transient: they signal malformed input or a
structural mismatch, so nothing in the SDK retries on them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the SDK."""

    # Schema & Validation Errors
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Registry Errors
    UNSUPPORTED_PROVING_SYSTEM = "UNSUPPORTED_PROVING_SYSTEM"

    # Commitment Errors
    INVALID_ADDRESS_ENCODING = "INVALID_ADDRESS_ENCODING"
    EMPTY_PROOF = "EMPTY_PROOF"

    # Signature Errors
    INVALID_SIGNATURE_LENGTH = "INVALID_SIGNATURE_LENGTH"

    # Merkle & Inclusion Errors
    INCLUSION_PROOF_MISMATCH = "INCLUSION_PROOF_MISMATCH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class AlignedError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (e.g. reported
    back to a transport or logged as JSON) instead of being raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INCLUSION_PROOF_MISMATCH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "AlignedException":
        """Convert this error model to a raised exception."""
        return AlignedException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AlignedException(Exception):
    """
    Base exception for all aligned SDK errors.

    Carries structured error information and can be converted to/from
    AlignedError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "ALIGNED_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AlignedError:
        """Convert this exception to an AlignedError model."""
        return AlignedError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CanonicalizationException(AlignedException):
    """Exception raised when wire serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class SchemaValidationException(AlignedException):
    """Exception raised when a received payload does not match the wire schema."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details=full_details,
            retryable=False,
        )


class UnsupportedProvingSystemException(AlignedException):
    """
    Exception raised for a proving system outside the closed registry.

    Indicates a programming error at the call site.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if value is not None:
            full_details["value"] = repr(value)
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_PROVING_SYSTEM,
            details=full_details,
            retryable=False,
        )


class InvalidAddressEncodingException(AlignedException):
    """Exception raised when a proof generator address is not 0x + 40 hex chars."""

    def __init__(
        self,
        message: str,
        address: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if address is not None:
            full_details["address"] = address
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ADDRESS_ENCODING,
            details=full_details,
            retryable=False,
        )


class EmptyProofException(AlignedException):
    """Exception raised in strict mode when a zero-length proof is committed."""

    def __init__(
        self,
        message: str = "Proof is empty",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_PROOF,
            details=details,
            retryable=False,
        )


class InvalidSignatureLengthException(AlignedException):
    """Exception raised when a raw signature is not exactly 65 bytes."""

    def __init__(
        self,
        message: str,
        length: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if length is not None:
            full_details["length"] = length
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_SIGNATURE_LENGTH,
            details=full_details,
            retryable=False,
        )


class InclusionProofMismatchException(AlignedException):
    """
    Exception raised when a batch inclusion proof does not lead to the claimed root.

    Either the proof is corrupted/forged or the left/right convention
    differs from the aggregator's tree construction.
    """

    def __init__(
        self,
        message: str,
        index_in_batch: int | None = None,
        expected_root: str | None = None,
        computed_root: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index_in_batch is not None:
            full_details["index_in_batch"] = index_in_batch
        if expected_root is not None:
            full_details["expected_root"] = expected_root
        if computed_root is not None:
            full_details["computed_root"] = computed_root
        super().__init__(
            message=message,
            code=ErrorCodes.INCLUSION_PROOF_MISMATCH,
            details=full_details,
            retryable=False,
        )

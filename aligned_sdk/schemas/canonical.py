"""
Schemas & Wire Types
File: canonical.py

Purpose: Deterministic JSON serialization for wire messages, plus the
byte-field encoding shared by every wire model.

Byte encoding rules:
- Outgoing byte fields are standard base64 strings.
- Incoming byte fields may be base64 strings or JSON arrays of ints (0..255).
- Explicit nulls are preserved; the aggregator expects them.
"""

import base64
import binascii
import json
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, PlainSerializer

from .errors import CanonicalizationException

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def encode_wire_bytes(value: bytes) -> str:
    """
    Encode bytes for a JSON wire field.

    Example:
        >>> encode_wire_bytes(b"proof")
        'cHJvb2Y='
    """
    return base64.b64encode(value).decode("ascii")


def decode_wire_bytes(value: Any) -> Any:
    """
    Decode a JSON wire field into bytes.

    Accepts bytes (passed through), base64 strings and lists of ints.
    Anything else is returned untouched so pydantic reports the type error.

    Raises:
        ValueError: If a string is not valid base64 or a list holds
            values outside 0..255.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 byte field: {e}") from e

    if isinstance(value, list):
        if not all(isinstance(b, int) and not isinstance(b, bool) for b in value):
            raise ValueError("Byte arrays must contain integers only")
        try:
            return bytes(value)
        except ValueError as e:
            raise ValueError(f"Byte array values must be in 0..255: {e}") from e

    return value


def _require_32_bytes(value: bytes) -> bytes:
    if len(value) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(value)}")
    return value


# Byte field carried over the wire as base64
WireBytes = Annotated[
    bytes,
    BeforeValidator(decode_wire_bytes),
    PlainSerializer(encode_wire_bytes, return_type=str, when_used="json"),
]

# 32-byte digest (commitments, Merkle nodes)
Hash32 = Annotated[WireBytes, AfterValidator(_require_32_bytes)]


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively canonicalize a value for deterministic JSON serialization.

    Args:
        value: Any Python value to canonicalize.
        path: Current path for error reporting.

    Returns:
        A JSON-serializable canonical representation.

    Raises:
        CanonicalizationException: If the value has no wire representation.
    """
    if value is None or isinstance(value, (bool, int, str)):
        return value

    if isinstance(value, float):
        raise CanonicalizationException(
            message="Floats have no canonical wire representation",
            details={"path": path, "value": str(value)},
        )

    if isinstance(value, Enum):
        return value.value

    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="json", by_alias=True)
        return canonicalize_value(dumped, path)

    if isinstance(value, dict):
        return {
            k: canonicalize_value(v, f"{path}.{k}" if path else k)
            for k, v in value.items()
        }

    if isinstance(value, (list, tuple)):
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if isinstance(value, (bytes, bytearray)):
        return encode_wire_bytes(bytes(value))

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Sorted keys, no whitespace, bytes as base64, enums as their values,
    nulls kept.

    Raises:
        CanonicalizationException: If serialization fails.
    """
    try:
        canonicalized = canonicalize_value(obj)
        return json.dumps(
            canonicalized,
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
        )
    except CanonicalizationException:
        raise
    except Exception as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def loads_canonical(raw: str | bytes) -> Any:
    """Parse a JSON document received from the wire."""
    return json.loads(raw)

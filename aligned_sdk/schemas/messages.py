"""
Schemas & Wire Types
File: messages.py

Purpose: Signature and ClientMessage, the unit sent to the aggregator.
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aligned_sdk.config import RuntimeConfig, get_default_config

from .canonical import dumps_canonical, loads_canonical
from .verification import VerificationData


# 0x followed by 64 hex chars = 32 bytes
HEX_WORD_PATTERN = re.compile(r"^0x[0-9a-fA-F]{64}$")


class Signature(BaseModel):
    """
    Recoverable ECDSA signature in wire form.

    r and s are 0x-prefixed lowercase hex of 32 bytes each; v is the
    recovery id as produced by the signer (27/28 for Ethereum signers).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    r: str = Field(..., description="0x-prefixed 32-byte hex")
    s: str = Field(..., description="0x-prefixed 32-byte hex")
    v: int = Field(..., ge=0, le=255, description="Recovery id")

    @field_validator("r", "s")
    @classmethod
    def _validate_word(cls, value: str) -> str:
        if not HEX_WORD_PATTERN.match(value):
            raise ValueError(
                f"Expected 0x-prefixed 32-byte hex, got: {value[:20]}..."
                if len(value) > 20 else f"Expected 0x-prefixed 32-byte hex, got: {value}"
            )
        return value.lower()

    def to_bytes(self) -> bytes:
        """Return the raw 65-byte r||s||v layout."""
        return bytes.fromhex(self.r[2:]) + bytes.fromhex(self.s[2:]) + bytes([self.v])


class ClientMessage(BaseModel):
    """A signed submission. Immutable once built."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    verification_data: VerificationData
    signature: Signature

    def to_json(self, config: Optional[RuntimeConfig] = None) -> str:
        """
        Serialize to the canonical wire document.

        The proving system name follows config's Halo2 naming table
        (defaults to the global config).
        """
        dumped = self.model_dump(
            mode="json",
            by_alias=True,
            context={"config": config or get_default_config()},
        )
        return dumps_canonical(dumped)

    @classmethod
    def from_json(
        cls,
        raw: Union[bytes, str],
        config: Optional[RuntimeConfig] = None,
    ) -> "ClientMessage":
        """Parse a wire document, reading proving system names with config's table."""
        return cls.model_validate(
            loads_canonical(raw),
            context={"config": config or get_default_config()},
        )


__all__ = [
    "HEX_WORD_PATTERN",
    "Signature",
    "ClientMessage",
]

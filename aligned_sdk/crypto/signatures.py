"""
Signatures
Recoverable secp256k1 ECDSA signing of commitment digests and the codec
from raw 65-byte signatures to their wire form.

Signing uses eth-account (RFC 6979 deterministic nonces), so the same key
and digest always produce the same signature. The digest is signed as-is,
without an EIP-191 prefix, matching the aggregator's address recovery.
"""
from __future__ import annotations

import logging
from typing import Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_keys import keys

from aligned_sdk.crypto.hashing import HASH_SIZE, to_hex
from aligned_sdk.schemas.errors import InvalidSignatureLengthException
from aligned_sdk.schemas.messages import Signature


logger = logging.getLogger(__name__)

SIGNATURE_SIZE = 65

PrivateKey = Union[str, bytes, LocalAccount]


def signature_from_bytes(raw: bytes) -> Signature:
    """
    Convert a raw r||s||v signature into its wire form.

    Args:
        raw: 65 bytes laid out as r (32) || s (32) || v (1)

    Returns:
        Signature with 0x-prefixed lowercase hex r and s

    Raises:
        InvalidSignatureLengthException: If raw is not exactly 65 bytes
    """
    if len(raw) != SIGNATURE_SIZE:
        raise InvalidSignatureLengthException(
            f"Signature must be {SIGNATURE_SIZE} bytes, got {len(raw)}",
            length=len(raw),
        )
    return Signature(
        r=to_hex(raw[0:32]),
        s=to_hex(raw[32:64]),
        v=raw[64],
    )


def load_account(private_key: PrivateKey) -> LocalAccount:
    """Accept a hex key, raw key bytes or an already loaded account."""
    if isinstance(private_key, LocalAccount):
        return private_key
    return Account.from_key(private_key)


def sign_hash(message_hash: bytes, private_key: PrivateKey) -> Signature:
    """
    Sign a 32-byte digest with a recoverable ECDSA signature.

    Raises:
        ValueError: If message_hash is not 32 bytes
    """
    if len(message_hash) != HASH_SIZE:
        raise ValueError(f"Message hash must be {HASH_SIZE} bytes, got {len(message_hash)}")

    account = load_account(private_key)
    signed = account.unsafe_sign_hash(message_hash)
    signature = signature_from_bytes(bytes(signed.signature))
    logger.debug("Signed %s as %s", to_hex(message_hash), account.address)
    return signature


def recover_signer(message_hash: bytes, signature: Signature) -> str:
    """
    Recover the checksummed address that produced a signature.

    Accepts both 27/28 and 0/1 recovery ids.

    Raises:
        ValueError: If the recovery id is out of range
        eth_keys.exceptions.BadSignature: If no public key can be recovered
    """
    v = signature.v - 27 if signature.v >= 27 else signature.v
    if v not in (0, 1):
        raise ValueError(f"Invalid recovery id: {signature.v}")

    eth_signature = keys.Signature(vrs=(v, int(signature.r, 16), int(signature.s, 16)))
    public_key = eth_signature.recover_public_key_from_msg_hash(message_hash)
    return public_key.to_checksum_address()


__all__ = [
    "SIGNATURE_SIZE",
    "PrivateKey",
    "signature_from_bytes",
    "load_account",
    "sign_hash",
    "recover_signer",
]

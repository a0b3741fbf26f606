"""
Schemas & Wire Types
File: proving_system.py

Purpose: Closed registry of supported proving systems and their canonical
wire names. Aggregator-side consumers match on the exact strings, so the
tables below are a compatibility contract.

Halo2 naming:
    An earlier client shipped with the Halo2KZG/Halo2IPA names swapped.
    CANONICAL_NAMES maps each variant to its own name; LEGACY_NAMES keeps
    the swapped mapping for deployments that still expect it.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from .errors import UnsupportedProvingSystemException


class ProvingSystemId(int, Enum):
    """Supported proving systems. Integer values are stable."""

    GnarkPlonkBls12_381 = 0
    GnarkPlonkBn254 = 1
    Groth16Bn254 = 2
    SP1 = 3
    Halo2KZG = 4
    Halo2IPA = 5
    Risc0 = 6


CANONICAL_NAMES: Mapping[ProvingSystemId, str] = MappingProxyType({
    ProvingSystemId.GnarkPlonkBls12_381: "GnarkPlonkBls12_381",
    ProvingSystemId.GnarkPlonkBn254: "GnarkPlonkBn254",
    ProvingSystemId.Groth16Bn254: "Groth16Bn254",
    ProvingSystemId.SP1: "SP1",
    ProvingSystemId.Halo2KZG: "Halo2KZG",
    ProvingSystemId.Halo2IPA: "Halo2IPA",
    ProvingSystemId.Risc0: "Risc0",
})

LEGACY_NAMES: Mapping[ProvingSystemId, str] = MappingProxyType({
    **CANONICAL_NAMES,
    ProvingSystemId.Halo2KZG: "Halo2IPA",
    ProvingSystemId.Halo2IPA: "Halo2KZG",
})


def _check_table_complete(table: Mapping[ProvingSystemId, str], label: str) -> None:
    missing = set(ProvingSystemId) - set(table)
    if missing:
        raise RuntimeError(
            f"{label} proving system table is missing: "
            f"{sorted(m.name for m in missing)}"
        )
    if len(set(table.values())) != len(table):
        raise RuntimeError(f"{label} proving system table has duplicate names")


# Fail at import time rather than on the first unlucky lookup
_check_table_complete(CANONICAL_NAMES, "Canonical")
_check_table_complete(LEGACY_NAMES, "Legacy")

_BY_NAME: Mapping[str, ProvingSystemId] = MappingProxyType(
    {name: system_id for system_id, name in CANONICAL_NAMES.items()}
)


def coerce_proving_system(value: Any) -> ProvingSystemId:
    """
    Convert an enum member or its integer value to a ProvingSystemId.

    Raises:
        UnsupportedProvingSystemException: For anything outside the enum.
    """
    if isinstance(value, ProvingSystemId):
        return value
    # bool is an int subclass but never a valid id
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return ProvingSystemId(value)
        except ValueError:
            pass
    raise UnsupportedProvingSystemException(
        f"Unsupported proving system: {value!r}",
        value=value,
    )


def name_of(value: Any, *, legacy_halo2_names: bool = False) -> str:
    """
    Return the wire name of a proving system.

    Args:
        value: ProvingSystemId member or its integer value
        legacy_halo2_names: Use the swapped Halo2 names of older clients

    Returns:
        Canonical wire name

    Raises:
        UnsupportedProvingSystemException: If value is not a known proving system

    Example:
        >>> name_of(ProvingSystemId.Groth16Bn254)
        'Groth16Bn254'
    """
    system_id = coerce_proving_system(value)
    table = LEGACY_NAMES if legacy_halo2_names else CANONICAL_NAMES
    return table[system_id]


def from_name(name: str, *, legacy_halo2_names: bool = False) -> ProvingSystemId:
    """
    Look up a proving system by its wire name.

    With legacy_halo2_names the Halo2 names are read with the swapped
    meaning, mirroring name_of.

    Raises:
        UnsupportedProvingSystemException: If the name is unknown
    """
    system_id = _BY_NAME.get(name) if isinstance(name, str) else None
    if system_id is None:
        raise UnsupportedProvingSystemException(
            f"Unknown proving system name: {name!r}",
            value=name,
        )
    if legacy_halo2_names and system_id in (ProvingSystemId.Halo2KZG, ProvingSystemId.Halo2IPA):
        return next(k for k, v in LEGACY_NAMES.items() if v == name)
    return system_id


__all__ = [
    "ProvingSystemId",
    "CANONICAL_NAMES",
    "LEGACY_NAMES",
    "coerce_proving_system",
    "name_of",
    "from_name",
]

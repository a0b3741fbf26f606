"""
Merkle Tree Implementation
Deterministic batch Merkle tree construction, proof generation, and
root recomputation.

Batch Tree Rules (must match the aggregator's tree construction):
1. Leaf: the commitment digest of a submission
   (aligned_sdk.commitment.commitment_hash)
2. Parent hashing: parent = keccak256(left + right)
3. Padding rule: Duplicate last node if odd number at any level
4. Empty leaves: build_merkle_root([]) returns keccak256(b"")
5. Single leaf: root = leaf (the leaf hash itself)
6. Paths are ordered leaf level first; bit k of the leaf index (least
   significant bit first) says whether the running hash is the left (0)
   or right (1) child at level k

Determinism Notes:
- Leaf ordering is submission order; this module never sorts leaves
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from aligned_sdk.crypto.hashing import HASH_SIZE, hash_concat, keccak256


# Empty tree sentinel: keccak256 of empty bytes
EMPTY_TREE_ROOT: bytes = keccak256(b"")


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle proof for a single leaf in a batch tree.

    Attributes:
        leaf: The leaf hash being proven (32 bytes)
        index: The 0-based index of the leaf in the batch
        siblings: Sibling hashes from bottom to top of tree
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: list[bytes]
    root: bytes

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """Parent hash of two child nodes: keccak256(left + right)."""
    return hash_concat(left, right)


def _next_level(level: list[bytes]) -> list[bytes]:
    if len(level) % 2 == 1:
        level = level + [level[-1]]
    return [merkle_parent(level[i], level[i + 1]) for i in range(0, len(level), 2)]


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Padding Rule: Duplicate last node at each level if odd.
    Example: [a, b, c] -> [a, b, c, c] -> [parent(a,b), parent(c,c)]

    Args:
        leaves: Leaf hashes in batch order

    Returns:
        32-byte Merkle root
    """
    if len(leaves) == 0:
        return EMPTY_TREE_ROOT

    current_level: list[bytes] = list(leaves)
    while len(current_level) > 1:
        current_level = _next_level(current_level)

    return current_level[0]


def build_merkle_proof(leaves: Sequence[bytes], index: int) -> MerkleProof:
    """
    Generate a Merkle proof for the leaf at the given index.

    Args:
        leaves: Leaf hashes in batch order
        index: 0-based index of the leaf to prove

    Returns:
        MerkleProof with leaf, index, siblings (bottom-up), and root

    Raises:
        IndexError: If index is out of range
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot generate proof for empty leaf list")

    if index < 0 or index >= len(leaves):
        raise IndexError(
            f"Leaf index {index} out of range for {len(leaves)} leaves"
        )

    siblings: list[bytes] = []
    current_level: list[bytes] = list(leaves)
    current_index = index

    while len(current_level) > 1:
        if len(current_level) % 2 == 1:
            current_level.append(current_level[-1])

        # XOR with 1 flips the last bit: the other child of the same parent
        siblings.append(current_level[current_index ^ 1])

        current_level = _next_level(current_level)
        current_index = current_index // 2

    return MerkleProof(
        leaf=leaves[index],
        index=index,
        siblings=siblings,
        root=current_level[0],
    )


def compute_root(leaf: bytes, siblings: Sequence[bytes], index: int) -> bytes:
    """
    Recompute a root from a leaf, its bottom-up siblings and its index.

    Raises:
        ValueError: If the index is negative or needs more levels than the
            path has, or a node is not 32 bytes
    """
    if index < 0:
        raise ValueError(f"Leaf index must be non-negative, got {index}")
    if index >> len(siblings):
        raise ValueError(
            f"Leaf index {index} does not fit a path of depth {len(siblings)}"
        )
    if len(leaf) != HASH_SIZE:
        raise ValueError(f"Leaf must be {HASH_SIZE} bytes, got {len(leaf)}")

    current_hash = leaf
    current_index = index

    for level, sibling in enumerate(siblings):
        if len(sibling) != HASH_SIZE:
            raise ValueError(
                f"Sibling at level {level} must be {HASH_SIZE} bytes, got {len(sibling)}"
            )
        if current_index % 2 == 0:
            # Current node is left child
            current_hash = merkle_parent(current_hash, sibling)
        else:
            # Current node is right child
            current_hash = merkle_parent(sibling, current_hash)
        current_index = current_index // 2

    return current_hash


def verify_merkle_proof(proof: MerkleProof) -> bool:
    """
    Verify a Merkle proof against its claimed root.

    Returns:
        True if the proof is valid, False otherwise (including malformed proofs)
    """
    try:
        return compute_root(proof.leaf, proof.siblings, proof.index) == proof.root
    except ValueError:
        return False


__all__ = [
    "EMPTY_TREE_ROOT",
    "MerkleProof",
    "merkle_parent",
    "build_merkle_root",
    "build_merkle_proof",
    "compute_root",
    "verify_merkle_proof",
]

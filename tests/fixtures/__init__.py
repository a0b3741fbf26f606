"""
Test fixtures package for aligned SDK tests.

Usage:
    from fixtures import make_verification_data, make_leaves

    def test_something():
        data = make_verification_data(proof=b"p")
"""

from .common import (
    TEST_PRIVATE_KEY,
    TEST_PROOF_GENERATOR,
    make_verification_data,
    make_sp1_data,
    make_commitment,
    make_leaves,
    make_batch,
    leaves_for,
)

__all__ = [
    "TEST_PRIVATE_KEY",
    "TEST_PROOF_GENERATOR",
    "make_verification_data",
    "make_sp1_data",
    "make_commitment",
    "make_leaves",
    "make_batch",
    "leaves_for",
]

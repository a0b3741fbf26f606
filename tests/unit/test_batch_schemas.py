"""
Wire Schema Unit Tests
Tests for aligned_sdk/schemas/batch.py, canonical.py and inclusion-data parsing.
"""
import base64
import json

import pytest
from pydantic import ValidationError

from aligned_sdk.crypto.hashing import keccak256
from aligned_sdk.merkle import MerkleProver, verify_inclusion
from aligned_sdk.schemas.batch import BatchInclusionData, InclusionProof
from aligned_sdk.schemas.canonical import decode_wire_bytes, dumps_canonical, encode_wire_bytes
from aligned_sdk.schemas.errors import CanonicalizationException, SchemaValidationException
from aligned_sdk.submission import parse_batch_inclusion_data

from fixtures.common import make_leaves


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


class TestWireBytes:
    def test_encode_base64(self):
        assert encode_wire_bytes(b"proof") == "cHJvb2Y="

    def test_decode_base64(self):
        assert decode_wire_bytes("cHJvb2Y=") == b"proof"

    def test_decode_int_array(self):
        assert decode_wire_bytes([1, 2, 255]) == b"\x01\x02\xff"

    def test_decode_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            decode_wire_bytes([256])

    def test_decode_rejects_bad_base64(self):
        with pytest.raises(ValueError):
            decode_wire_bytes("not base64!")

    def test_float_not_canonical(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({"x": 1.5})

    def test_nulls_kept(self):
        assert dumps_canonical({"b": None, "a": b"\x00"}) == '{"a":"AA==","b":null}'


class TestParseInclusionData:
    def test_pascal_case_base64(self):
        leaves = make_leaves(4)
        expected = MerkleProver.inclusion_data(leaves, 2)
        raw = json.dumps({
            "BatchMerkleRoot": _b64(expected.batch_merkle_root),
            "BatchInclusionProof": [
                {"MerklePath": [_b64(h) for h in expected.batch_inclusion_proof[0].merkle_path]}
            ],
            "IndexInBatch": 2,
        }).encode()

        parsed = parse_batch_inclusion_data(raw)

        assert parsed == expected
        assert verify_inclusion(leaves[2], parsed)

    def test_int_array_bytes(self):
        leaves = make_leaves(2)
        expected = MerkleProver.inclusion_data(leaves, 1)
        raw = json.dumps({
            "BatchMerkleRoot": list(expected.batch_merkle_root),
            "BatchInclusionProof": [
                {"MerklePath": [list(h) for h in expected.batch_inclusion_proof[0].merkle_path]}
            ],
            "IndexInBatch": 1,
        })

        assert parse_batch_inclusion_data(raw) == expected

    def test_own_serialization_parses_back(self):
        inclusion = MerkleProver.inclusion_data(make_leaves(5), 4)
        doc = json.loads(inclusion.to_json())

        assert set(doc) == {"BatchMerkleRoot", "BatchInclusionProof", "IndexInBatch"}
        assert parse_batch_inclusion_data(inclusion.to_json()) == inclusion

    def test_not_json(self):
        with pytest.raises(SchemaValidationException, match="not valid JSON"):
            parse_batch_inclusion_data(b"{not json")

    def test_not_an_object(self):
        with pytest.raises(SchemaValidationException, match="JSON object"):
            parse_batch_inclusion_data(b"[1, 2, 3]")

    def test_missing_root(self):
        with pytest.raises(SchemaValidationException) as exc_info:
            parse_batch_inclusion_data(json.dumps({"IndexInBatch": 0}))
        field_path = exc_info.value.details["field_path"]
        assert field_path.replace("_", "").lower() == "batchmerkleroot"

    def test_short_root(self):
        raw = json.dumps({"BatchMerkleRoot": _b64(b"\x00" * 31), "IndexInBatch": 0})
        with pytest.raises(SchemaValidationException):
            parse_batch_inclusion_data(raw)

    def test_negative_index(self):
        raw = json.dumps({"BatchMerkleRoot": _b64(keccak256(b"r")), "IndexInBatch": -1})
        with pytest.raises(SchemaValidationException):
            parse_batch_inclusion_data(raw)


class TestModels:
    def test_inclusion_proof_depth(self):
        proof = InclusionProof(merkle_path=make_leaves(3))
        assert proof.depth == 3

    def test_inclusion_data_frozen(self):
        inclusion = MerkleProver.inclusion_data(make_leaves(2), 0)
        with pytest.raises(ValidationError):
            inclusion.index_in_batch = 1

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            BatchInclusionData.model_validate({
                "BatchMerkleRoot": keccak256(b"r"),
                "IndexInBatch": 0,
                "Unexpected": True,
            })

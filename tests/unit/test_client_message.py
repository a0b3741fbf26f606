"""
Client Message Unit Tests
Tests for aligned_sdk/messages/builder.py and the ClientMessage wire format.
"""
import base64
import json
import re

import pytest
from eth_account import Account

from aligned_sdk.commitment import build_commitment, commitment_hash
from aligned_sdk.config import ProtocolConfig, RuntimeConfig
from aligned_sdk.crypto.signatures import recover_signer
from aligned_sdk.messages import build_client_message, recover_message_signer
from aligned_sdk.schemas.errors import InvalidAddressEncodingException
from aligned_sdk.schemas.messages import ClientMessage
from aligned_sdk.schemas.proving_system import ProvingSystemId

from fixtures.common import TEST_PRIVATE_KEY, make_sp1_data, make_verification_data


class TestBuildClientMessage:
    """End-to-end Groth16 scenario."""

    def test_signature_shape(self, verification_data, private_key):
        message = build_client_message(verification_data, private_key)

        assert re.fullmatch(r"0x[0-9a-f]{64}", message.signature.r)
        assert re.fullmatch(r"0x[0-9a-f]{64}", message.signature.s)
        assert message.signature.v in (27, 28)

    def test_repeated_signing_identical(self, verification_data, private_key):
        first = build_client_message(verification_data, private_key)
        second = build_client_message(verification_data, private_key)

        assert first.signature == second.signature
        assert first.to_json() == second.to_json()

    def test_signs_commitment_digest(self, verification_data, private_key):
        message = build_client_message(verification_data, private_key)
        digest = commitment_hash(build_commitment(verification_data))

        expected = Account.from_key(private_key).address
        assert recover_signer(digest, message.signature) == expected

    def test_recover_message_signer(self, verification_data, private_key):
        message = build_client_message(verification_data, private_key)
        assert recover_message_signer(message) == Account.from_key(private_key).address

    def test_message_keeps_verification_data(self, verification_data, private_key):
        message = build_client_message(verification_data, private_key)
        assert message.verification_data == verification_data

    def test_bad_address_builds_nothing(self, private_key):
        data = make_verification_data(proof_generator_address="0x1234")
        with pytest.raises(InvalidAddressEncodingException):
            build_client_message(data, private_key)

    def test_different_data_different_signature(self, private_key):
        a = build_client_message(make_verification_data(proof=b"a"), private_key)
        b = build_client_message(make_verification_data(proof=b"b"), private_key)
        assert a.signature != b.signature


class TestWireFormat:
    """ClientMessage.to_json() matches the aggregator's schema."""

    def test_document_shape(self, verification_data, private_key):
        doc = json.loads(build_client_message(verification_data, private_key).to_json())

        assert set(doc) == {"verification_data", "signature"}
        assert set(doc["verification_data"]) == {
            "proving_system",
            "proof",
            "public_input",
            "verification_key",
            "vm_program_code",
            "proof_generator_addr",
        }
        assert set(doc["signature"]) == {"r", "s", "v"}

    def test_field_values(self, verification_data, private_key):
        doc = json.loads(build_client_message(verification_data, private_key).to_json())
        vd = doc["verification_data"]

        assert vd["proving_system"] == "Groth16Bn254"
        assert base64.b64decode(vd["proof"]) == b"proof-bytes"
        assert base64.b64decode(vd["public_input"]) == b"pub-bytes"
        assert base64.b64decode(vd["verification_key"]) == b"vk-bytes"
        assert vd["vm_program_code"] is None
        assert vd["proof_generator_addr"] == "0x1111111111111111111111111111111111111111"
        assert isinstance(doc["signature"]["v"], int)

    def test_address_lowercased_on_wire(self, private_key):
        data = make_verification_data(
            proof_generator_address="0x66f9664f97F2b50F62D13eA064982f936dE76657"
        )
        doc = json.loads(build_client_message(data, private_key).to_json())
        assert doc["verification_data"]["proof_generator_addr"] == (
            "0x66f9664f97f2b50f62d13ea064982f936de76657"
        )

    def test_compact_sorted_json(self, verification_data, private_key):
        text = build_client_message(verification_data, private_key).to_json()
        assert " " not in text
        assert text.index('"signature"') < text.index('"verification_data"')

    def test_parse_back(self, private_key):
        message = build_client_message(make_sp1_data(), private_key)
        parsed = ClientMessage.model_validate(json.loads(message.to_json()))

        assert parsed == message
        assert parsed.verification_data.proving_system is ProvingSystemId.SP1

    def test_legacy_halo2_names_on_wire(self, default_config, private_key):
        default_config.protocol.legacy_halo2_names = True
        data = make_verification_data(proving_system=ProvingSystemId.Halo2KZG)

        doc = json.loads(build_client_message(data, private_key).to_json())
        assert doc["verification_data"]["proving_system"] == "Halo2IPA"

    def test_canonical_halo2_names_by_default(self, private_key):
        data = make_verification_data(proving_system=ProvingSystemId.Halo2KZG)

        doc = json.loads(build_client_message(data, private_key).to_json())
        assert doc["verification_data"]["proving_system"] == "Halo2KZG"

    def test_explicit_config_overrides_default(self, private_key):
        legacy = RuntimeConfig(protocol=ProtocolConfig(legacy_halo2_names=True))
        data = make_verification_data(proving_system=ProvingSystemId.Halo2KZG)
        message = build_client_message(data, private_key, legacy)

        text = message.to_json(legacy)
        assert json.loads(text)["verification_data"]["proving_system"] == "Halo2IPA"
        assert json.loads(message.to_json())["verification_data"]["proving_system"] == "Halo2KZG"

        parsed = ClientMessage.from_json(text, legacy)
        assert parsed.verification_data.proving_system is ProvingSystemId.Halo2KZG
        assert parsed == message


def test_signature_independent_of_key_form():
    data = make_verification_data()
    account = Account.from_key(TEST_PRIVATE_KEY)
    assert (
        build_client_message(data, account).signature
        == build_client_message(data, TEST_PRIVATE_KEY).signature
    )

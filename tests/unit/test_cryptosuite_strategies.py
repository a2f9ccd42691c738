"""Tests for the per-cryptosuite canonicalization strategies."""

from __future__ import annotations

from typing import Any

import pytest

from di_eddsa.core.errors import ProofVerificationError
from di_eddsa.modules.suites.loader import StaticDocumentLoader
from di_eddsa.modules.suites.strategies import (
    STRATEGIES,
    CryptosuiteName,
    get_strategy,
)

CONTEXT_A = "https://www.w3.org/ns/credentials/v2"
CONTEXT_B = "https://www.w3.org/ns/credentials/examples/v2"


class TestGetStrategy:
    """Tests for cryptosuite lookup."""

    @pytest.mark.parametrize("name", ["eddsa-rdfc-2022", "eddsa-jcs-2022"])
    def test_supported(self, name: str) -> None:
        strategy = get_strategy(name)
        assert strategy is not None
        assert strategy.cryptosuite.value == name

    def test_accepts_enum(self) -> None:
        assert get_strategy(CryptosuiteName.EDDSA_JCS_2022) is STRATEGIES[
            CryptosuiteName.EDDSA_JCS_2022
        ]

    @pytest.mark.parametrize("name", ["ecdsa-rdfc-2019", "EDDSA-RDFC-2022", None, ""])
    def test_unsupported(self, name: Any) -> None:
        assert get_strategy(name) is None


class TestRdfcStrategy:
    """Tests for the eddsa-rdfc-2022 hooks."""

    strategy = STRATEGIES[CryptosuiteName.EDDSA_RDFC_2022]

    def test_configure_copies_document_context(self) -> None:
        config: dict[str, Any] = {"@context": [CONTEXT_B]}
        self.strategy.configure(config, {"@context": [CONTEXT_A]})
        assert config["@context"] == [CONTEXT_A]

    def test_configure_drops_context_absent_from_document(self) -> None:
        config: dict[str, Any] = {"@context": [CONTEXT_A]}
        self.strategy.configure(config, {})
        assert "@context" not in config

    def test_proof_left_alone(self) -> None:
        proof: dict[str, Any] = {"type": "DataIntegrityProof"}
        self.strategy.prepare_proof(proof, {"@context": [CONTEXT_A]})
        assert proof == {"type": "DataIntegrityProof"}

    def test_canonical_nquads(self, document_loader: StaticDocumentLoader) -> None:
        document = {"@context": [CONTEXT_A], "id": "urn:example:1", "name": "Example"}
        assert self.strategy.canonicalize(document, document_loader) == (
            '<urn:example:1> <https://schema.org/name> "Example" .\n'
        )


class TestJcsStrategy:
    """Tests for the eddsa-jcs-2022 hooks."""

    strategy = STRATEGIES[CryptosuiteName.EDDSA_JCS_2022]

    def test_canonical_json(self, document_loader: StaticDocumentLoader) -> None:
        document = {"b": 1, "a": [True, None, "é"]}
        assert self.strategy.canonicalize(document, document_loader) == '{"a":[true,null,"é"],"b":1}'

    def test_canonicalize_ignores_loader(self) -> None:
        document = {"@context": ["https://example.org/never-loaded"], "id": "urn:example:1"}
        assert "never-loaded" in self.strategy.canonicalize(document, StaticDocumentLoader())

    def test_prepare_proof_copies_context(self) -> None:
        proof: dict[str, Any] = {"type": "DataIntegrityProof"}
        self.strategy.prepare_proof(proof, {"@context": [CONTEXT_A, CONTEXT_B]})
        assert proof["@context"] == [CONTEXT_A, CONTEXT_B]

    def test_prepare_proof_without_document_context(self) -> None:
        proof: dict[str, Any] = {"type": "DataIntegrityProof"}
        self.strategy.prepare_proof(proof, {})
        assert "@context" not in proof

    def test_verify_context_prefix_accepted(self) -> None:
        document: dict[str, Any] = {"@context": [CONTEXT_A, CONTEXT_B]}
        self.strategy.check_verify_context(document, {"@context": [CONTEXT_A]})
        assert document["@context"] == [CONTEXT_A]

    def test_verify_context_string_forms(self) -> None:
        document: dict[str, Any] = {"@context": CONTEXT_A}
        self.strategy.check_verify_context(document, {"@context": CONTEXT_A})
        assert document["@context"] == CONTEXT_A

    def test_verify_context_embedded_objects_compared_by_value(self) -> None:
        embedded = {"name": "https://schema.org/name"}
        document: dict[str, Any] = {"@context": [CONTEXT_A, dict(embedded)]}
        self.strategy.check_verify_context(document, {"@context": [CONTEXT_A, dict(embedded)]})

    @pytest.mark.parametrize(
        ("document_context", "proof_context"),
        [
            ([CONTEXT_B, CONTEXT_A], [CONTEXT_A, CONTEXT_B]),
            ([CONTEXT_A], [CONTEXT_A, CONTEXT_B]),
            ([CONTEXT_A, {"x": "urn:x"}], [CONTEXT_A, {"x": "urn:y"}]),
        ],
        ids=["order", "length", "embedded"],
    )
    def test_verify_context_mismatch(
        self, document_context: list[Any], proof_context: list[Any]
    ) -> None:
        with pytest.raises(ProofVerificationError, match="does not match"):
            self.strategy.check_verify_context({"@context": document_context}, {"@context": proof_context})

    def test_verify_context_missing_from_document(self) -> None:
        with pytest.raises(ProofVerificationError, match="does not contain a context"):
            self.strategy.check_verify_context({}, {"@context": [CONTEXT_A]})

    def test_verify_without_proof_context(self) -> None:
        document: dict[str, Any] = {"@context": [CONTEXT_B]}
        self.strategy.check_verify_context(document, {})
        assert document["@context"] == [CONTEXT_B]

    @pytest.mark.parametrize("proof_context", [None, [], ""], ids=["null", "empty-list", "empty-string"])
    def test_verify_with_empty_proof_context(self, proof_context: Any) -> None:
        document: dict[str, Any] = {"@context": [CONTEXT_B]}
        self.strategy.check_verify_context(document, {"@context": proof_context})
        assert document["@context"] == [CONTEXT_B]

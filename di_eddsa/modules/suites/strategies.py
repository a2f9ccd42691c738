"""
Canonicalization strategies for the EdDSA cryptosuites.

Each cryptosuite is a row in :data:`STRATEGIES`: a canonicalization function
plus the hooks where ``eddsa-rdfc-2022`` and ``eddsa-jcs-2022`` differ in how
``@context`` travels between the document and the proof. The four-stage
pipeline itself is shared (see :mod:`di_eddsa.modules.suites.pipeline`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from di_eddsa.core.crypto.canonicalization import canonicalize_jcs, canonicalize_rdfc
from di_eddsa.core.errors import ProofVerificationError
from di_eddsa.modules.suites.loader import DocumentLoader

PROOF_TYPE = "DataIntegrityProof"
CONTEXT = "@context"


class CryptosuiteName(str, Enum):
    """Supported ``cryptosuite`` identifiers."""

    EDDSA_RDFC_2022 = "eddsa-rdfc-2022"
    EDDSA_JCS_2022 = "eddsa-jcs-2022"


Canonicalizer = Callable[[dict[str, Any], DocumentLoader], str]
ContextHook = Callable[[dict[str, Any], dict[str, Any]], None]
VerifyContextHook = Callable[[dict[str, Any], dict[str, Any]], None]


@dataclass(frozen=True)
class CanonicalizationStrategy:
    """Function table for one cryptosuite.

    Attributes
    ----------
    cryptosuite:
        The ``proof.cryptosuite`` value this row serves.
    canonicalize:
        ``(document, loader) -> str`` deterministic canonical form.
    configure:
        Mutates the cloned proof configuration before canonicalization,
        given the unsecured document.
    prepare_proof:
        Mutates the cloned proof returned by create-proof, given the
        unsecured document.
    check_verify_context:
        Validates and rewrites the unsecured document against the proof
        options on the verify path; raises ``ProofVerificationError``.
    """

    cryptosuite: CryptosuiteName
    canonicalize: Canonicalizer
    configure: ContextHook
    prepare_proof: ContextHook
    check_verify_context: VerifyContextHook


def _noop(_target: dict[str, Any], _source: dict[str, Any]) -> None:
    return None


# -- eddsa-rdfc-2022 --------------------------------------------------------


def _canonicalize_rdfc(document: dict[str, Any], loader: DocumentLoader) -> str:
    return canonicalize_rdfc(document, loader)


def _rdfc_configure(proof_config: dict[str, Any], unsecured_document: dict[str, Any]) -> None:
    if CONTEXT in unsecured_document:
        proof_config[CONTEXT] = unsecured_document[CONTEXT]
    else:
        proof_config.pop(CONTEXT, None)


# -- eddsa-jcs-2022 ---------------------------------------------------------


def _canonicalize_jcs(document: dict[str, Any], _loader: DocumentLoader) -> str:
    return canonicalize_jcs(document)


def _jcs_prepare_proof(proof: dict[str, Any], unsecured_document: dict[str, Any]) -> None:
    if CONTEXT in unsecured_document:
        proof[CONTEXT] = unsecured_document[CONTEXT]


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else [value]


def _jcs_check_verify_context(
    unsecured_document: dict[str, Any], proof_options: dict[str, Any]
) -> None:
    if not proof_options.get(CONTEXT):
        return
    if CONTEXT not in unsecured_document:
        raise ProofVerificationError(
            "The secured document does not contain a context",
            source="eddsa-jcs-2022.verify",
        )
    proof_context = _as_list(proof_options[CONTEXT])
    secured_context = _as_list(unsecured_document[CONTEXT])
    if len(secured_context) < len(proof_context) or any(
        expected != actual
        for expected, actual in zip(proof_context, secured_context[: len(proof_context)], strict=True)
    ):
        raise ProofVerificationError(
            "The secured document context does not match the proof context",
            source="eddsa-jcs-2022.verify",
        )
    unsecured_document[CONTEXT] = proof_options[CONTEXT]


STRATEGIES: dict[CryptosuiteName, CanonicalizationStrategy] = {
    CryptosuiteName.EDDSA_RDFC_2022: CanonicalizationStrategy(
        cryptosuite=CryptosuiteName.EDDSA_RDFC_2022,
        canonicalize=_canonicalize_rdfc,
        configure=_rdfc_configure,
        prepare_proof=_noop,
        check_verify_context=_noop,
    ),
    CryptosuiteName.EDDSA_JCS_2022: CanonicalizationStrategy(
        cryptosuite=CryptosuiteName.EDDSA_JCS_2022,
        canonicalize=_canonicalize_jcs,
        configure=_noop,
        prepare_proof=_jcs_prepare_proof,
        check_verify_context=_jcs_check_verify_context,
    ),
}


def get_strategy(cryptosuite: Any) -> CanonicalizationStrategy | None:
    """Look up the strategy row for a ``cryptosuite`` value, if supported."""
    try:
        return STRATEGIES[CryptosuiteName(cryptosuite)]
    except ValueError:
        return None

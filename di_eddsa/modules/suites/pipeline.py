"""
Data Integrity proof pipeline for the EdDSA cryptosuites.

Creating a proof runs four stages strictly in order:

1. **configure** the proof options into a canonical proof configuration
2. **transform** the unsecured document into its canonical form
3. **hash** both: ``SHA256(proof config) || SHA256(document)`` (64 bytes)
4. **serialize**: sign the hash with the key behind ``verificationMethod``

Verification recomputes stages 1-3 and checks the signature. The
cryptosuite-specific parts come from
:mod:`di_eddsa.modules.suites.strategies`. Every stage works on its own deep
copy, so callers' documents are never mutated.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pyld.jsonld import JsonLdError

from di_eddsa.core.config import get_settings
from di_eddsa.core.crypto import signing
from di_eddsa.core.crypto.canonicalization import sha256_digest
from di_eddsa.core.crypto.encoding import base58btc_decode, base58btc_encode
from di_eddsa.core.crypto.verification import VerificationResult
from di_eddsa.core.errors import (
    DataIntegrityError,
    DocumentLoaderError,
    FormatError,
    InvalidVerificationMethodError,
    ProofGenerationError,
    ProofTransformationError,
    ProofVerificationError,
)
from di_eddsa.core.logging import get_logger
from di_eddsa.modules.keys.keypair import Ed25519Keypair
from di_eddsa.modules.suites.loader import DocumentLoader, load_json_document
from di_eddsa.modules.suites.strategies import (
    PROOF_TYPE,
    CanonicalizationStrategy,
    get_strategy,
)

logger = get_logger(__name__)

_CANONICALIZATION_ERRORS = (JsonLdError, ValueError, TypeError)

# XML Schema dateTime in extended form; an offset is optional.
_DATETIME_PATTERN = re.compile(
    r"-?\d{4,}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?"
)


# ----------------------------------------------------------------------
# Stages
# ----------------------------------------------------------------------


def _matches_suite(proof: Mapping[str, Any], strategy: CanonicalizationStrategy) -> bool:
    return (
        proof.get("type") == PROOF_TYPE
        and proof.get("cryptosuite") == strategy.cryptosuite.value
    )


def _is_datetime(value: Any) -> bool:
    if not isinstance(value, str) or not _DATETIME_PATTERN.fullmatch(value):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def configure_proof(
    strategy: CanonicalizationStrategy,
    unsecured_document: Mapping[str, Any],
    proof_options: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> str:
    """Produce the canonical proof configuration.

    Raises
    ------
    ProofGenerationError
        Wrong ``type``/``cryptosuite``, an unparseable ``created``, or a
        proof configuration that cannot be canonicalized.
    """
    proof_config = copy.deepcopy(dict(proof_options))
    if not _matches_suite(proof_config, strategy):
        raise ProofGenerationError(
            f"Proof type must be {PROOF_TYPE!r} with cryptosuite "
            f"{strategy.cryptosuite.value!r}",
            source="configure_proof",
        )
    if "created" in proof_config and not _is_datetime(proof_config["created"]):
        raise ProofGenerationError(
            f"Invalid created timestamp: {proof_config['created']!r}", source="configure_proof"
        )

    strategy.configure(proof_config, copy.deepcopy(dict(unsecured_document)))
    try:
        return strategy.canonicalize(proof_config, document_loader)
    except _CANONICALIZATION_ERRORS as exc:
        raise ProofGenerationError(
            f"Failed to canonicalize proof configuration: {exc}", source="configure_proof"
        ) from exc


def transform_document(
    strategy: CanonicalizationStrategy,
    unsecured_document: Mapping[str, Any],
    proof_options: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> str:
    """Produce the canonical form of the unsecured document.

    Raises
    ------
    ProofTransformationError
        Wrong ``type``/``cryptosuite`` or a document that cannot be
        canonicalized.
    """
    if not _matches_suite(proof_options, strategy):
        raise ProofTransformationError(
            f"Proof type must be {PROOF_TYPE!r} with cryptosuite "
            f"{strategy.cryptosuite.value!r}",
            source="transform_document",
        )
    try:
        return strategy.canonicalize(copy.deepcopy(dict(unsecured_document)), document_loader)
    except _CANONICALIZATION_ERRORS as exc:
        raise ProofTransformationError(
            f"Failed to canonicalize document: {exc}", source="transform_document"
        ) from exc


def hash_data(transformed_document: str, canonical_proof_config: str) -> bytes:
    """Return ``SHA256(canonical_proof_config) || SHA256(transformed_document)``."""
    return sha256_digest(canonical_proof_config) + sha256_digest(transformed_document)


def resolve_verification_method(
    reference: Any, document_loader: DocumentLoader
) -> dict[str, Any]:
    """Dereference ``proof.verificationMethod`` through the document loader.

    The fragment is stripped before loading. The loaded document is used as
    is when its ``id`` equals the reference; otherwise its
    ``verificationMethod`` entries are searched by absolute or ``#fragment``
    identifier.
    """
    if not isinstance(reference, str) or not reference:
        raise InvalidVerificationMethodError(
            "Proof does not reference a verification method",
            source="resolve_verification_method",
        )
    base, _, fragment = reference.partition("#")
    try:
        document = load_json_document(document_loader, base or reference)
    except DocumentLoaderError as exc:
        raise InvalidVerificationMethodError(
            f"Cannot load verification method {reference!r}: {exc}",
            source="resolve_verification_method",
        ) from exc

    if document.get("id") == reference:
        return document

    candidates = {reference}
    if fragment:
        candidates.add(f"#{fragment}")
    methods = document.get("verificationMethod", [])
    if isinstance(methods, dict):
        methods = [methods]
    for method in methods if isinstance(methods, list) else []:
        if isinstance(method, dict) and method.get("id") in candidates:
            return method
    raise InvalidVerificationMethodError(
        f"Verification method {reference!r} not found", source="resolve_verification_method"
    )


def _import_verification_method(
    proof_options: Mapping[str, Any], document_loader: DocumentLoader
) -> Ed25519Keypair:
    method = resolve_verification_method(proof_options.get("verificationMethod"), document_loader)
    try:
        return Ed25519Keypair.import_document(
            method,
            check_context=False,
            check_revoked=get_settings().verification_method_check_revoked,
        )
    except FormatError as exc:
        raise InvalidVerificationMethodError(
            f"Unusable verification method: {exc}", source="import_verification_method"
        ) from exc


def serialize_proof(
    hash_bytes: bytes,
    proof_options: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> bytes:
    """Sign the hash data with the private key behind ``verificationMethod``.

    Raises
    ------
    InvalidVerificationMethodError
        If the method cannot be resolved or carries no private key.
    """
    keypair = _import_verification_method(proof_options, document_loader)
    if keypair.private_key is None:
        raise InvalidVerificationMethodError(
            "The verification method does not contain a private key",
            source="serialize_proof",
        )
    return signing.sign(hash_bytes, keypair.private_key)


def verify_hash(
    hash_bytes: bytes,
    proof_bytes: bytes,
    proof_options: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> VerificationResult:
    """Check ``proof_bytes`` over the hash data with the referenced public key."""
    try:
        keypair = _import_verification_method(proof_options, document_loader)
    except DataIntegrityError as exc:
        return VerificationResult.failure(exc)
    if keypair.public_key is None:
        return VerificationResult.failure(
            InvalidVerificationMethodError(
                "The verification method does not contain a public key",
                source="verify_hash",
            )
        )
    return signing.verify(hash_bytes, proof_bytes, keypair.public_key)


# ----------------------------------------------------------------------
# Entry points
# ----------------------------------------------------------------------


def create_proof(
    unsecured_document: Mapping[str, Any],
    proof_options: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> dict[str, Any]:
    """Create a Data Integrity proof for ``unsecured_document``.

    The cryptosuite is selected by ``proof_options["cryptosuite"]``. Neither
    input is modified; the returned proof is a new dict carrying
    ``proofValue``.

    Raises
    ------
    ProofGenerationError, ProofTransformationError, InvalidVerificationMethodError
        From the failing stage; no partial proof is returned.
    """
    if not isinstance(unsecured_document, Mapping):
        raise ProofTransformationError("Document must be a JSON object", source="create_proof")
    if not isinstance(proof_options, Mapping):
        raise ProofGenerationError("Proof options must be a JSON object", source="create_proof")
    strategy = get_strategy(proof_options.get("cryptosuite"))
    if strategy is None:
        raise ProofGenerationError(
            f"Unsupported cryptosuite: {proof_options.get('cryptosuite')!r}",
            source="create_proof",
        )

    document = copy.deepcopy(dict(unsecured_document))
    proof = copy.deepcopy(dict(proof_options))
    proof.pop("proofValue", None)
    strategy.prepare_proof(proof, document)

    canonical_proof_config = configure_proof(strategy, document, proof, document_loader)
    canonical_document = transform_document(strategy, document, proof, document_loader)
    proof_hash = hash_data(canonical_document, canonical_proof_config)
    proof_bytes = serialize_proof(proof_hash, proof, document_loader)

    proof["proofValue"] = base58btc_encode(proof_bytes)
    logger.debug(
        "proof_created",
        cryptosuite=strategy.cryptosuite.value,
        verification_method=proof.get("verificationMethod"),
    )
    return proof


def verify_proof(
    secured_document: Mapping[str, Any],
    document_loader: DocumentLoader,
) -> VerificationResult:
    """Verify the proof embedded in ``secured_document``.

    Never raises for bad input: every failure is reported as
    ``verified=False`` with the error attached. On success
    ``verified_document`` holds the unsecured document.
    """
    try:
        result = _verify_proof(secured_document, document_loader)
    except DataIntegrityError as exc:
        result = VerificationResult.failure(exc)

    if result.verified:
        logger.debug("proof_verified")
    else:
        logger.warning("proof_verification_failed", error_codes=result.error_codes)
    return result


def _verify_proof(
    secured_document: Mapping[str, Any], document_loader: DocumentLoader
) -> VerificationResult:
    if not isinstance(secured_document, Mapping):
        raise ProofVerificationError("Document must be a JSON object", source="verify_proof")

    unsecured_document = copy.deepcopy(dict(secured_document))
    proof_options = unsecured_document.pop("proof", None)
    if not isinstance(proof_options, dict):
        raise ProofVerificationError(
            "The document does not contain a single proof object", source="verify_proof"
        )
    proof_value = proof_options.pop("proofValue", None)
    if not isinstance(proof_value, str):
        raise ProofVerificationError("The proof value is missing", source="verify_proof")

    strategy = get_strategy(proof_options.get("cryptosuite"))
    if strategy is None:
        raise ProofVerificationError(
            f"Unsupported cryptosuite: {proof_options.get('cryptosuite')!r}",
            source="verify_proof",
        )

    proof_bytes = base58btc_decode(proof_value)
    strategy.check_verify_context(unsecured_document, proof_options)

    canonical_document = transform_document(
        strategy, unsecured_document, proof_options, document_loader
    )
    canonical_proof_config = configure_proof(
        strategy, unsecured_document, proof_options, document_loader
    )
    proof_hash = hash_data(canonical_document, canonical_proof_config)
    result = verify_hash(proof_hash, proof_bytes, proof_options, document_loader)
    if result.verified:
        result.verified_document = unsecured_document
    return result

"""
EdDSA Data Integrity cryptosuites.

- **strategies**: per-cryptosuite canonicalization and ``@context`` hooks
- **pipeline**: configure / transform / hash / serialize and the entry points
- **loader**: document loader contract and an offline implementation
"""

from di_eddsa.modules.suites.loader import (
    DocumentLoader,
    StaticDocumentLoader,
    load_json_document,
)
from di_eddsa.modules.suites.pipeline import (
    configure_proof,
    create_proof,
    hash_data,
    resolve_verification_method,
    serialize_proof,
    transform_document,
    verify_hash,
    verify_proof,
)
from di_eddsa.modules.suites.strategies import (
    PROOF_TYPE,
    CanonicalizationStrategy,
    CryptosuiteName,
    get_strategy,
)

__all__ = [
    "DocumentLoader",
    "StaticDocumentLoader",
    "load_json_document",
    "configure_proof",
    "create_proof",
    "hash_data",
    "resolve_verification_method",
    "serialize_proof",
    "transform_document",
    "verify_hash",
    "verify_proof",
    "PROOF_TYPE",
    "CanonicalizationStrategy",
    "CryptosuiteName",
    "get_strategy",
]

"""EdDSA cryptosuites (eddsa-rdfc-2022, eddsa-jcs-2022) for W3C Data Integrity proofs."""

from di_eddsa.core.crypto.verification import VerificationResult
from di_eddsa.core.errors import (
    DataIntegrityError,
    DocumentLoaderError,
    ExpiredKeypairError,
    FormatError,
    InvalidVerificationMethodError,
    KeyNotFoundError,
    KeypairRevokedError,
    LogicError,
    ProofGenerationError,
    ProofTransformationError,
    ProofVerificationError,
)
from di_eddsa.modules.keys import Ed25519Keypair, KeyEncoding, KeyFlag, generate_raw_keypair
from di_eddsa.modules.suites import (
    CryptosuiteName,
    StaticDocumentLoader,
    create_proof,
    verify_proof,
)

__version__ = "0.1.0"

__all__ = [
    "VerificationResult",
    "DataIntegrityError",
    "DocumentLoaderError",
    "ExpiredKeypairError",
    "FormatError",
    "InvalidVerificationMethodError",
    "KeyNotFoundError",
    "KeypairRevokedError",
    "LogicError",
    "ProofGenerationError",
    "ProofTransformationError",
    "ProofVerificationError",
    "Ed25519Keypair",
    "KeyEncoding",
    "KeyFlag",
    "generate_raw_keypair",
    "CryptosuiteName",
    "StaticDocumentLoader",
    "create_proof",
    "verify_proof",
]

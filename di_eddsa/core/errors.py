"""
Error taxonomy for key material handling and proof processing.

Codec and keypair operations raise these immediately. The verification
entry points catch them and report them inside a ``VerificationResult``.
"""

from __future__ import annotations


class DataIntegrityError(Exception):
    """Base exception carrying a stable machine-readable ``code``."""

    code: str = "DATA_INTEGRITY_ERROR"

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class FormatError(DataIntegrityError, ValueError):
    """Malformed or mismatched encoding, prefix, context, or type."""

    code = "FORMAT_ERROR"


class LogicError(DataIntegrityError):
    """Operation invoked on an entity in the wrong lifecycle state."""

    code = "LOGIC_ERROR"


class KeyNotFoundError(DataIntegrityError):
    """A required key half is absent."""

    code = "KEY_NOT_FOUND"


class KeypairRevokedError(DataIntegrityError):
    """The key document was revoked before now."""

    code = "KEYPAIR_REVOKED"


ExpiredKeypairError = KeypairRevokedError


class ProofGenerationError(DataIntegrityError):
    """Proof options violate the proof configuration contract."""

    code = "PROOF_GENERATION_ERROR"


class ProofTransformationError(DataIntegrityError):
    """The unsecured document cannot be transformed for this cryptosuite."""

    code = "PROOF_TRANSFORMATION_ERROR"


class ProofVerificationError(DataIntegrityError):
    """A secured document fails a structural verification rule."""

    code = "PROOF_VERIFICATION_ERROR"


class InvalidVerificationMethodError(DataIntegrityError):
    """The resolved verification method cannot supply the needed key."""

    code = "INVALID_VERIFICATION_METHOD"


class DocumentLoaderError(DataIntegrityError):
    """The document loader could not supply the requested URL."""

    code = "DOCUMENT_LOADER_ERROR"

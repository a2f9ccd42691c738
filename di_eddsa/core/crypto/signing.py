"""
Ed25519 signature primitive.

Uses the ``cryptography`` library for Ed25519 signing and verification over
raw byte buffers. Ed25519 signatures are deterministic and exactly 64 bytes.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from di_eddsa.core.crypto.verification import VerificationResult
from di_eddsa.core.errors import FormatError, KeyNotFoundError, ProofVerificationError

SIGNATURE_LENGTH = 64


def sign(message: bytes, private_key: Ed25519PrivateKey | None) -> bytes:
    """Sign ``message`` with an Ed25519 private key.

    Parameters
    ----------
    message:
        The bytes to sign.
    private_key:
        The signing key.

    Returns
    -------
    bytes
        The 64-byte signature.

    Raises
    ------
    KeyNotFoundError
        If no private key is supplied.
    """
    if private_key is None:
        raise KeyNotFoundError("The keypair does not have a private key", source="signing.sign")
    return private_key.sign(bytes(message))


def verify(
    message: bytes,
    signature: bytes,
    public_key: Ed25519PublicKey | None,
) -> VerificationResult:
    """Verify an Ed25519 signature over ``message``.

    Never raises: a missing key, a malformed signature, and a bad signature
    all come back as ``verified=False`` with the triggering error attached.
    """
    if public_key is None:
        return VerificationResult.failure(
            KeyNotFoundError("The keypair does not have a public key", source="signing.verify")
        )
    if not isinstance(signature, (bytes, bytearray)) or len(signature) != SIGNATURE_LENGTH:
        return VerificationResult.failure(
            FormatError(
                f"Expected a {SIGNATURE_LENGTH}-byte signature", source="signing.verify"
            )
        )
    try:
        public_key.verify(bytes(signature), bytes(message))
    except InvalidSignature:
        return VerificationResult.failure(
            ProofVerificationError("Signature does not match", source="signing.verify")
        )
    return VerificationResult(verified=True)

"""
Cryptographic primitives for the EdDSA Data Integrity suites.

- **encoding**: base58-btc multibase and base64url helpers
- **canonicalization**: RFC 8785 (JCS) and RDF dataset canonicalization
- **signing**: Ed25519 sign/verify over raw byte buffers
- **verification**: structured verification results
"""

from di_eddsa.core.crypto.canonicalization import (
    CANONICALIZATION_RDFC,
    canonicalize_jcs,
    canonicalize_jcs_bytes,
    canonicalize_rdfc,
    sha256_digest,
)
from di_eddsa.core.crypto.encoding import (
    MULTIBASE_BASE58_BTC,
    base58btc_decode,
    base58btc_encode,
    base64url_decode,
    base64url_encode,
)
from di_eddsa.core.crypto.signing import SIGNATURE_LENGTH, sign, verify
from di_eddsa.core.crypto.verification import VerificationResult

__all__ = [
    "CANONICALIZATION_RDFC",
    "canonicalize_jcs",
    "canonicalize_jcs_bytes",
    "canonicalize_rdfc",
    "sha256_digest",
    "MULTIBASE_BASE58_BTC",
    "base58btc_decode",
    "base58btc_encode",
    "base64url_decode",
    "base64url_encode",
    "SIGNATURE_LENGTH",
    "sign",
    "verify",
    "VerificationResult",
]
